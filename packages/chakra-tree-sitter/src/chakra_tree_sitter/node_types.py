from dataclasses import dataclass, field
from typing import List

from tree_sitter import Tree

# JSX tags
JSX_ELEMENT = "jsx_element"
JSX_OPENING_ELEMENT = "jsx_opening_element"
JSX_CLOSING_ELEMENT = "jsx_closing_element"
JSX_SELF_CLOSING_ELEMENT = "jsx_self_closing_element"
JSX_ATTRIBUTE = "jsx_attribute"
JSX_EXPRESSION = "jsx_expression"

JSX_TAG_TYPES = (JSX_OPENING_ELEMENT, JSX_SELF_CLOSING_ELEMENT)
JSX_ATTRIBUTE_TYPES = (JSX_ATTRIBUTE, JSX_EXPRESSION)

# Imports
IMPORT_STATEMENT = "import_statement"
IMPORT_CLAUSE = "import_clause"
NAMED_IMPORTS = "named_imports"
NAMESPACE_IMPORT = "namespace_import"
IMPORT_SPECIFIER = "import_specifier"


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""

    tree: Tree
    source: bytes
    errors: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return self.source.decode("utf-8")
