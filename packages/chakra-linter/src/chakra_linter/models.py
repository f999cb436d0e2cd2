from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple

from tree_sitter import Node

from .errors import OverlappingEditsError


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    STYLE = "style"
    INFO = "info"


@dataclass(frozen=True)
class TextEdit:
    """Replace the half-open byte range [start, end) of the original source with `text`"""

    start: int
    end: int
    text: str = ""

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid edit range [{self.start}, {self.end})")

    @classmethod
    def replace(cls, node: Node, text: str) -> "TextEdit":
        return cls(node.start_byte, node.end_byte, text)

    @classmethod
    def remove_range(cls, start: int, end: int) -> "TextEdit":
        return cls(start, end, "")

    @classmethod
    def insert_after(cls, node: Node, text: str) -> "TextEdit":
        return cls(node.end_byte, node.end_byte, text)

    def overlaps(self, other: "TextEdit") -> bool:
        if self.start == self.end and other.start == other.end:
            # Two insertions at one offset have no defined order
            return self.start == other.start
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class Fix:
    """A batch of edits applied atomically, all computed against the same source"""

    edits: Tuple[TextEdit, ...]

    def __post_init__(self):
        ordered = tuple(sorted(self.edits, key=lambda e: (e.start, e.end)))
        for previous, current in zip(ordered, ordered[1:]):
            if previous.overlaps(current):
                raise OverlappingEditsError(
                    f"Edit [{current.start}, {current.end}) overlaps [{previous.start}, {previous.end})"
                )
        object.__setattr__(self, "edits", ordered)

    def conflicts_with(self, other: "Fix") -> bool:
        return any(mine.overlaps(theirs) for mine in self.edits for theirs in other.edits)

    def apply(self, source: bytes) -> bytes:
        result = []
        last_offset = 0
        for edit in self.edits:
            result.append(source[last_offset : edit.start])
            result.append(edit.text.encode("utf-8"))
            last_offset = edit.end
        result.append(source[last_offset:])
        return b"".join(result)


@dataclass
class InternalIssue:
    """Internal representation of a linting issue"""

    file_path: Path
    line: int
    rule_id: str
    message: str
    severity: Severity
    auto_fixable: bool
    context: str | None = None
    column: int = 0
    data: Dict[str, str] = field(default_factory=dict)
    fix: Optional[Fix] = None
