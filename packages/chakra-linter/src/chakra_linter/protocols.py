from typing import Protocol

from chakra_symbols.models import DeclarationContext, Symbol
from tree_sitter import Node


class SymbolResolver(Protocol):
    """Symbol lookup the rules depend on; implemented by chakra_symbols"""

    def resolve(self, node: Node) -> Symbol | None: ...

    def declaration_context(self, symbol: Symbol) -> DeclarationContext | None: ...

    def enclosing_import_declaration(self, node: Node) -> Node | None: ...
