import logging

from chakra_tree_sitter import ASTWalker
from chakra_tree_sitter.node_types import (
    IMPORT_CLAUSE,
    IMPORT_SPECIFIER,
    IMPORT_STATEMENT,
    NAMED_IMPORTS,
    NAMESPACE_IMPORT,
)
from tree_sitter import Node

from .models import DeclarationContext, DeclarationKind, Symbol

logger = logging.getLogger(__name__)

FUNCTION_SCOPES = {
    "function_declaration",
    "generator_function_declaration",
    "function_expression",
    "function",
    "generator_function",
    "arrow_function",
    "method_definition",
}
BLOCK_SCOPES = {
    "statement_block",
    "for_statement",
    "for_in_statement",
    "catch_clause",
    "class",
    "class_body",
    "switch_body",
}
SCOPE_TYPES = FUNCTION_SCOPES | BLOCK_SCOPES | {"program"}

PARAMETER_TYPES = {"required_parameter", "optional_parameter"}
FUNCTION_EXPRESSIONS = {"function_expression", "function", "generator_function"}


def node_key(node: Node) -> tuple[int, int, str]:
    """Stable identity of a node across separately obtained Node wrappers"""
    return (node.start_byte, node.end_byte, node.type)


class ScopeTable:
    """Names bound per lexical scope node"""

    def __init__(self):
        self._scopes: dict[tuple[int, int, str], dict[str, Symbol]] = {}

    def bind(self, scope: Node, name: str, declaration: DeclarationContext):
        symbols = self._scopes.setdefault(node_key(scope), {})
        symbol = symbols.get(name)
        if symbol is None:
            symbol = symbols[name] = Symbol(name=name, scope_type=scope.type)
        symbol.declarations.append(declaration)

    def lookup(self, scope: Node, name: str) -> Symbol | None:
        return self._scopes.get(node_key(scope), {}).get(name)

    def __len__(self) -> int:
        return len(self._scopes)

    def symbols_in(self, scope: Node) -> dict[str, Symbol]:
        return dict(self._scopes.get(node_key(scope), {}))


class SymbolExtractor:
    """Collects the bindings of every lexical scope of a TSX file"""

    def extract_scopes(self, root: Node, source: bytes | str) -> ScopeTable:
        table = ScopeTable()

        def visit(node: Node):
            if node.type == IMPORT_STATEMENT:
                self._extract_imports(node, root, source, table)
            elif node.type in ("function_declaration", "generator_function_declaration"):
                self._bind_name(node, DeclarationKind.FUNCTION, self._enclosing_scope(node), source, table)
            elif node.type in ("class_declaration", "abstract_class_declaration"):
                self._bind_name(node, DeclarationKind.CLASS, self._enclosing_scope(node), source, table)
            elif node.type in FUNCTION_EXPRESSIONS:
                # The name of a function expression is only visible inside it
                self._bind_name(node, DeclarationKind.FUNCTION, node, source, table)
            elif node.type == "class":
                self._bind_name(node, DeclarationKind.CLASS, node, source, table)
            elif node.type == "for_in_statement":
                self._extract_loop_variable(node, source, table)
            elif node.type == "variable_declarator":
                self._extract_variable(node, source, table)
            elif node.type in PARAMETER_TYPES:
                self._extract_parameter(node, source, table)
            elif node.type == "arrow_function":
                # Single unparenthesized parameter: x => ...
                param = node.child_by_field_name("parameter")
                if param is not None:
                    self._bind_pattern(param, node, DeclarationKind.PARAMETER, param, source, table)
            elif node.type == "catch_clause":
                param = node.child_by_field_name("parameter")
                if param is not None:
                    self._bind_pattern(param, node, DeclarationKind.VARIABLE, param, source, table)

        ASTWalker.walk(root, visit)
        logger.debug("Extracted bindings for %d scope(s)", len(table))
        return table

    def _extract_imports(self, node: Node, root: Node, source, table: ScopeTable):
        clause = ASTWalker.get_child_of_type(node, IMPORT_CLAUSE)
        if clause is None:
            # Side-effect import: import "./styles.css"
            return

        for child in clause.named_children:
            if child.type == "identifier":
                self._bind(root, child, DeclarationKind.IMPORT_DEFAULT, child, source, table)
            elif child.type == NAMESPACE_IMPORT:
                name_node = ASTWalker.get_child_of_type(child, "identifier")
                if name_node is not None:
                    self._bind(root, name_node, DeclarationKind.NAMESPACE_IMPORT, child, source, table)
            elif child.type == NAMED_IMPORTS:
                for specifier in child.named_children:
                    if specifier.type != IMPORT_SPECIFIER:
                        continue
                    local = specifier.child_by_field_name("alias") or specifier.child_by_field_name("name")
                    if local is not None:
                        self._bind(root, local, DeclarationKind.IMPORT_SPECIFIER, specifier, source, table)

    def _extract_variable(self, node: Node, source, table: ScopeTable):
        pattern = node.child_by_field_name("name")
        if pattern is None:
            return
        declaration = node.parent
        if declaration is not None and declaration.type == "variable_declaration":
            # `var` is function scoped
            scope = self._enclosing_function_scope(node)
        else:
            scope = self._enclosing_scope(node)
        self._bind_pattern(pattern, scope, DeclarationKind.VARIABLE, node, source, table)

    def _extract_loop_variable(self, node: Node, source, table: ScopeTable):
        """`for (const x of xs)` / `for (let k in obj)` / `for (var x of xs)`"""
        kind = node.child_by_field_name("kind")
        pattern = node.child_by_field_name("left")
        if kind is None or pattern is None:
            # `for (x of xs)` assigns to an existing binding
            return
        if kind.type == "var":
            scope = self._enclosing_function_scope(node)
        else:
            scope = node
        self._bind_pattern(pattern, scope, DeclarationKind.VARIABLE, node, source, table)

    def _extract_parameter(self, node: Node, source, table: ScopeTable):
        pattern = node.child_by_field_name("pattern")
        if pattern is None:
            return
        scope = self._enclosing_function_scope(node)
        self._bind_pattern(pattern, scope, DeclarationKind.PARAMETER, node, source, table)

    def _bind_name(self, node: Node, kind: DeclarationKind, scope: Node, source, table: ScopeTable):
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            self._bind(scope, name_node, kind, node, source, table)

    def _bind_pattern(self, pattern: Node, scope: Node, kind, declaring: Node, source, table: ScopeTable):
        for name_node in self._pattern_identifiers(pattern):
            self._bind(scope, name_node, kind, declaring, source, table)

    def _bind(self, scope: Node, name_node: Node, kind, declaring: Node, source, table: ScopeTable):
        name = ASTWalker.get_text(name_node, source)
        table.bind(
            scope,
            name,
            DeclarationContext(
                kind=kind,
                node=declaring,
                name_node=name_node,
                line_number=name_node.start_point[0] + 1,
            ),
        )

    def _pattern_identifiers(self, pattern: Node) -> list[Node]:
        """Identifiers bound by a (possibly destructuring) binding pattern"""
        if pattern.type in ("identifier", "shorthand_property_identifier_pattern"):
            return [pattern]
        if pattern.type == "pair_pattern":
            value = pattern.child_by_field_name("value")
            return self._pattern_identifiers(value) if value is not None else []
        if pattern.type in ("assignment_pattern", "object_assignment_pattern"):
            left = pattern.child_by_field_name("left")
            return self._pattern_identifiers(left) if left is not None else []
        if pattern.type in ("object_pattern", "array_pattern", "rest_pattern"):
            names = []
            for child in pattern.named_children:
                names.extend(self._pattern_identifiers(child))
            return names
        return []

    @staticmethod
    def _enclosing_scope(node: Node) -> Node:
        current = node.parent
        while current is not None:
            if current.type in SCOPE_TYPES:
                return current
            if current.parent is None:
                return current
            current = current.parent
        return node

    @staticmethod
    def _enclosing_function_scope(node: Node) -> Node:
        current = node.parent
        while current is not None:
            if current.type in FUNCTION_SCOPES or current.type == "program":
                return current
            if current.parent is None:
                return current
            current = current.parent
        return node
