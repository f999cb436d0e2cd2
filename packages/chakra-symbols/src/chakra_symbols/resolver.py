"""Lexical symbol resolution over a tree-sitter TSX tree."""

from chakra_tree_sitter import ASTWalker, ParseResult
from chakra_tree_sitter.node_types import IMPORT_STATEMENT, JSX_CLOSING_ELEMENT, JSX_TAG_TYPES
from tree_sitter import Node

from .extractor import SymbolExtractor
from .models import DeclarationContext, Symbol


class TreeSitterSymbolResolver:
    """Maps identifier nodes to the symbols they refer to.

    Scopes are built once per tree. Only lexical bindings declared in the file
    are known; globals and ambient declarations resolve to nothing.
    """

    def __init__(self, root: Node, source: bytes | str):
        self.root = root
        self.source = source
        self.scopes = SymbolExtractor().extract_scopes(root, source)

    @classmethod
    def from_parse_result(cls, result: ParseResult) -> "TreeSitterSymbolResolver":
        return cls(result.tree.root_node, result.source)

    def resolve(self, node: Node) -> Symbol | None:
        """Symbol an identifier refers to, searching enclosing scopes inside out."""
        if node.type != "identifier":
            return None

        name = ASTWalker.get_text(node, self.source)
        if self._is_intrinsic_tag_name(node, name):
            return None

        current = node.parent
        while current is not None:
            symbol = self.scopes.lookup(current, name)
            if symbol is not None:
                return symbol
            current = current.parent
        return None

    def declaration_context(self, symbol: Symbol) -> DeclarationContext | None:
        """The first declaration is authoritative"""
        return symbol.first_declaration

    def enclosing_import_declaration(self, node: Node) -> Node | None:
        """Import statement that owns an import specifier (or any node inside it)"""
        if node.type == IMPORT_STATEMENT:
            return node
        return ASTWalker.find_parent_of_type(node, IMPORT_STATEMENT)

    @staticmethod
    def _is_intrinsic_tag_name(node: Node, name: str) -> bool:
        # <div>, <my-element>: plain string tags, never bound to a variable
        parent = node.parent
        if parent is None or parent.type not in (*JSX_TAG_TYPES, JSX_CLOSING_ELEMENT):
            return False
        return name[:1].islower() or "-" in name
