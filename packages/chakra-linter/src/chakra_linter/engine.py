import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from chakra_symbols import TreeSitterSymbolResolver
from chakra_tree_sitter import JSXPatterns, TSXParser

from .autofix import MAX_FIX_PASSES, AutoFixEngine
from .models import InternalIssue
from .registry import registry
from .rules.base import BaseRule, RuleContext

logger = logging.getLogger(__name__)

STRING_PATH = Path("<string>")


@dataclass
class FixReport:
    source: str
    issues: List[InternalIssue] = field(default_factory=list)  # remaining after the last pass
    passes: int = 0
    fixed: int = 0

    @property
    def modified(self) -> bool:
        return self.fixed > 0


class LinterEngine:
    """Core engine for linting TSX/JSX sources"""

    def __init__(self, rules: Optional[List[BaseRule]] = None):
        self.parser = TSXParser()
        self.rules = rules if rules is not None else registry.get_all_rules()
        self.autofix = AutoFixEngine()

    def analyze_string(self, source: str, file_path: Path = STRING_PATH) -> List[InternalIssue]:
        """Run all rules on every JSX tag of the source, in document order"""
        result = self.parser.parse_string(source)
        if result.errors:
            logger.warning("%s: %d syntax error(s), first: %s", file_path, len(result.errors), result.errors[0])

        context = RuleContext(
            file_path=file_path,
            source=result.source,
            resolver=TreeSitterSymbolResolver.from_parse_result(result),
        )

        issues = []
        for node in JSXPatterns.find_jsx_tags(result.tree.root_node):
            for rule in self.rules:
                issue = rule.check_element(node, context)
                if issue is not None:
                    issues.append(issue)

        return sorted(issues, key=lambda x: (x.line, x.column))

    def analyze_file(self, file_path: Path) -> List[InternalIssue]:
        return self.analyze_string(file_path.read_text(encoding="utf-8"), file_path)

    def fix_string(self, source: str, file_path: Path = STRING_PATH) -> FixReport:
        """Lint and apply fixes until nothing fixable is left"""
        report = FixReport(source=source)

        while report.passes < MAX_FIX_PASSES:
            report.passes += 1
            report.issues = self.analyze_string(report.source, file_path)

            outcome = self.autofix.apply_fixes(report.source, report.issues)
            if not outcome.modified:
                break

            logger.info("%s: pass %d fixed %d issue(s)", file_path, report.passes, len(outcome.applied))
            report.source = outcome.source
            report.fixed += len(outcome.applied)
        else:
            logger.warning("%s: reached max fix passes", file_path)
            report.issues = self.analyze_string(report.source, file_path)

        return report

    def fix_file(self, file_path: Path) -> FixReport:
        report = self.fix_string(file_path.read_text(encoding="utf-8"), file_path)
        if report.modified:
            file_path.write_text(report.source, encoding="utf-8")
        return report
