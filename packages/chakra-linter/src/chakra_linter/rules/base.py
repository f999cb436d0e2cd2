from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from chakra_tree_sitter import ASTWalker
from tree_sitter import Node

from ..models import Fix, InternalIssue, Severity
from ..protocols import SymbolResolver


@dataclass
class RuleContext:
    """Read-only inputs shared by every rule while one file is linted"""

    file_path: Path
    source: bytes
    resolver: SymbolResolver

    def get_text(self, node: Node) -> str:
        return ASTWalker.get_text(node, self.source)


class BaseRule(ABC):
    """Abstract base class for all linting rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'C001')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name (e.g., 'require-specific-component')."""
        pass

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Default severity for this rule."""
        pass

    @property
    def auto_fixable(self) -> bool:
        """Can this rule automatically fix violations?"""
        return False

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def check_element(self, node: Node, context: RuleContext) -> InternalIssue | None:
        """Inspect one JSX opening or self-closing tag."""
        pass

    # Helper method for consistent issue creation
    def _create_issue(
        self,
        node: Node,
        context: RuleContext,
        message: str,
        data: dict[str, str] | None = None,
        fix: Fix | None = None,
    ) -> InternalIssue:
        """Helper to create an issue located at `node` with rule defaults."""
        return InternalIssue(
            file_path=context.file_path,
            line=node.start_point[0] + 1,
            rule_id=self.rule_id,
            message=message,
            severity=self.severity,
            auto_fixable=self.auto_fixable and fix is not None,
            context=self.name,
            column=ASTWalker.get_column(node, context.source) + 1,
            data=data or {},
            fix=fix,
        )
