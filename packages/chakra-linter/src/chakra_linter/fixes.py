"""Text edits replacing a generic component with a specific one.

Every edit is computed against the original source. The edits of one plan
never overlap, so they can be applied as a single batch.
"""

import logging

from chakra_tree_sitter import ASTWalker, JSXPatterns
from tree_sitter import Node

from .errors import MissingImportContextError
from .models import Fix, TextEdit
from .origin import get_import_declaration
from .protocols import SymbolResolver

logger = logging.getLogger(__name__)


def rename_start_tag(node: Node, component: str) -> TextEdit:
    return TextEdit.replace(JSXPatterns.get_tag_name(node), component)


def rename_end_tag(node: Node, component: str) -> TextEdit | None:
    closing = JSXPatterns.get_closing_tag(node)
    if closing is None:
        return None
    name_node = JSXPatterns.get_tag_name(closing)
    return TextEdit.replace(name_node, component) if name_node is not None else None


def remove_attribute(attribute: Node, node: Node) -> TextEdit:
    """Remove an attribute together with the whitespace separating it from its neighbour."""
    attributes = JSXPatterns.get_attributes(node)
    index = next(
        i
        for i, candidate in enumerate(attributes)
        if (candidate.start_byte, candidate.end_byte) == (attribute.start_byte, attribute.end_byte)
    )

    if len(attributes) == 1:
        # in case of only attribute: back to the tag name (or its type arguments)
        previous = attribute.prev_sibling
        start = previous.end_byte if previous is not None else attribute.start_byte
        return TextEdit.remove_range(start, attribute.end_byte)

    if index == len(attributes) - 1:
        # in case of last attribute
        previous = attributes[index - 1]
        return TextEdit.remove_range(previous.end_byte, attribute.end_byte)

    following = attributes[index + 1]
    return TextEdit.remove_range(attribute.start_byte, following.start_byte)


def insert_import(node: Node, component: str, source: bytes | str, resolver: SymbolResolver) -> TextEdit | None:
    """Add `component` to the import that brought the element into scope."""
    import_node = get_import_declaration(JSXPatterns.get_tag_name(node), resolver)
    if import_node is None:
        raise MissingImportContextError(component)

    specifiers = JSXPatterns.get_import_specifiers(import_node)
    if not specifiers:
        raise MissingImportContextError(component, "Import declaration has no named specifiers.")

    for specifier in specifiers:
        local = JSXPatterns.get_specifier_local_name(specifier)
        if local is not None and ASTWalker.get_text(local, source) == component:
            # in case of already imported
            logger.debug("'%s' is already imported", component)
            return None

    last = specifiers[-1]
    if import_node.start_point[0] != last.start_point[0]:
        # in case of multi line
        prefix = ASTWalker.get_line_prefix(last, source)
        indent = prefix if prefix.isspace() else " " * len(prefix)
        return TextEdit.insert_after(last, f",\n{indent}{component}")
    return TextEdit.insert_after(last, f", {component}")


def plan_fix(node: Node, attribute: Node, component: str, source: bytes | str, resolver: SymbolResolver) -> Fix:
    edits = [
        rename_start_tag(node, component),
        rename_end_tag(node, component),
        remove_attribute(attribute, node),
        insert_import(node, component, source, resolver),
    ]
    return Fix(edits=tuple(edit for edit in edits if edit is not None))
