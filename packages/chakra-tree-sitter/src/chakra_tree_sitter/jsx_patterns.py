"""JSX and ES module pattern recognition."""

from tree_sitter import Node

from .ast_walker import ASTWalker
from .node_types import (
    IMPORT_CLAUSE,
    IMPORT_SPECIFIER,
    JSX_ATTRIBUTE,
    JSX_ATTRIBUTE_TYPES,
    JSX_CLOSING_ELEMENT,
    JSX_ELEMENT,
    JSX_TAG_TYPES,
    NAMED_IMPORTS,
)


class JSXPatterns:
    """Recognize JSX elements, their attributes and import declarations in the AST."""

    @staticmethod
    def is_jsx_tag(node: Node) -> bool:
        """Opening tag of an element, either `<Box>` or `<Box />`."""
        return node.type in JSX_TAG_TYPES

    @staticmethod
    def find_jsx_tags(root: Node) -> list[Node]:
        return ASTWalker.find_all_by_types(root, JSX_TAG_TYPES)

    @staticmethod
    def get_tag_name(node: Node) -> Node | None:
        """Name node of an opening, self-closing or closing tag.

        Fragments (`<>...</>`) have no name.
        """
        return node.child_by_field_name("name")

    @staticmethod
    def get_attributes(node: Node) -> list[Node]:
        """All attributes of a tag in source order, spread attributes included."""
        return [child for child in node.named_children if child.type in JSX_ATTRIBUTE_TYPES]

    @staticmethod
    def get_attribute_name(attribute: Node, source: bytes | str) -> str | None:
        if attribute.type != JSX_ATTRIBUTE or attribute.named_child_count == 0:
            return None
        return ASTWalker.get_text(attribute.named_children[0], source)

    @staticmethod
    def get_attribute_value(attribute: Node) -> Node | None:
        """Value node following `=`, or None for boolean and spread attributes."""
        if attribute.type != JSX_ATTRIBUTE:
            return None

        seen_equals = False
        for child in attribute.children:
            if seen_equals and child.is_named:
                return child
            if child.type == "=":
                seen_equals = True
        return None

    @staticmethod
    def get_closing_tag(node: Node) -> Node | None:
        """Closing tag matching an opening tag; self-closing tags have none."""
        element = node.parent
        if element is None or element.type != JSX_ELEMENT:
            return None
        return element.child_by_field_name("close_tag") or ASTWalker.get_child_of_type(
            element, JSX_CLOSING_ELEMENT
        )

    @staticmethod
    def get_module_specifier(import_node: Node) -> Node | None:
        """String node holding the module path of an import statement."""
        return import_node.child_by_field_name("source")

    @staticmethod
    def get_import_specifiers(import_node: Node) -> list[Node]:
        """Named import specifiers (`{ A, B as C }`) of an import statement."""
        clause = ASTWalker.get_child_of_type(import_node, IMPORT_CLAUSE)
        if not clause:
            return []
        named = ASTWalker.get_child_of_type(clause, NAMED_IMPORTS)
        if not named:
            return []
        return [child for child in named.named_children if child.type == IMPORT_SPECIFIER]

    @staticmethod
    def get_specifier_local_name(specifier: Node) -> Node | None:
        """Binding introduced by an import specifier: the alias when present."""
        return specifier.child_by_field_name("alias") or specifier.child_by_field_name("name")
