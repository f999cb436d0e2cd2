from .engine import FixReport, LinterEngine
from .errors import ChakraLintError, FixError, MissingImportContextError, OverlappingEditsError
from .models import Fix, InternalIssue, Severity, TextEdit

__all__ = [
    "ChakraLintError",
    "Fix",
    "FixError",
    "FixReport",
    "InternalIssue",
    "LinterEngine",
    "MissingImportContextError",
    "OverlappingEditsError",
    "Severity",
    "TextEdit",
]
