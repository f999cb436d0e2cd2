class ChakraLintError(Exception):
    """Base class for linter failures"""


class FixError(ChakraLintError):
    """A fix could not be constructed or applied safely"""


class MissingImportContextError(FixError):
    """No import declaration to extend with the replacement component"""

    def __init__(self, component: str, detail: str = "No ImportDeclaration found."):
        self.component = component
        super().__init__(f"Cannot import '{component}': {detail}")


class OverlappingEditsError(FixError):
    """Edits of a single fix overlap each other"""
