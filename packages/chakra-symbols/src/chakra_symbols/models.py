from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from tree_sitter import Node


class DeclarationKind(str, Enum):
    IMPORT_SPECIFIER = "import_specifier"  # import { Box } from "..."
    IMPORT_DEFAULT = "import_default"  # import Box from "..."
    NAMESPACE_IMPORT = "namespace_import"  # import * as Chakra from "..."
    FUNCTION = "function"
    CLASS = "class"
    VARIABLE = "variable"
    PARAMETER = "parameter"


@dataclass(frozen=True)
class DeclarationContext:
    """Syntactic context of one declaration of a symbol"""

    kind: DeclarationKind
    node: Node  # declaring node, e.g. the import_specifier or variable_declarator
    name_node: Node
    line_number: int


@dataclass
class Symbol:
    """A name bound in one lexical scope"""

    name: str
    scope_type: str  # type of the scope node: 'program', 'statement_block', ...
    declarations: List[DeclarationContext] = field(default_factory=list)

    @property
    def first_declaration(self) -> Optional[DeclarationContext]:
        return self.declarations[0] if self.declarations else None
