import logging
from dataclasses import dataclass, field
from typing import List

from .models import Fix, InternalIssue

logger = logging.getLogger(__name__)

MAX_FIX_PASSES = 10


@dataclass
class FixOutcome:
    source: str
    applied: List[InternalIssue] = field(default_factory=list)
    deferred: List[InternalIssue] = field(default_factory=list)

    @property
    def modified(self) -> bool:
        return bool(self.applied)


class AutoFixEngine:
    """Applies the fixes attached to issues, one atomic batch per issue.

    Fixes are taken in source order. A fix whose edits overlap an already
    accepted fix is deferred; the caller re-lints and retries it on the next
    pass against the updated source.
    """

    def apply_fixes(self, source: str, issues: List[InternalIssue]) -> FixOutcome:
        outcome = FixOutcome(source=source)
        accepted: List[Fix] = []

        fixable = [i for i in issues if i.fix is not None and i.fix.edits]
        for issue in sorted(fixable, key=lambda i: (i.fix.edits[0].start, i.line, i.column)):
            if any(issue.fix.conflicts_with(other) for other in accepted):
                logger.debug("Deferring fix for %s:%d (overlaps another fix)", issue.file_path, issue.line)
                outcome.deferred.append(issue)
                continue
            accepted.append(issue.fix)
            outcome.applied.append(issue)

        if not accepted:
            return outcome

        merged = Fix(edits=tuple(edit for fix in accepted for edit in fix.edits))
        outcome.source = merged.apply(source.encode("utf-8")).decode("utf-8")
        return outcome
