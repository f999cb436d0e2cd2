"""Attribute based lookup of specific Chakra components."""

import re
from dataclasses import dataclass

from chakra_tree_sitter import ASTWalker, JSXPatterns
from tree_sitter import Node

# (generic component, attribute, literal value) -> specific component
SPECIFIC_COMPONENTS: dict[tuple[str, str, str], str] = {
    ("Box", "display", "flex"): "Flex",
    ("Box", "display", "grid"): "Grid",
    ("Box", "as", "button"): "Button",
    ("Box", "as", "img"): "Image",
    ("Box", "as", "a"): "Link",
    ("Box", "as", "p"): "Text",
    ("Box", "as", "h1"): "Heading",
    ("Box", "as", "h2"): "Heading",
    ("Box", "as", "h3"): "Heading",
    ("Box", "as", "h4"): "Heading",
    ("Box", "as", "h5"): "Heading",
    ("Box", "as", "h6"): "Heading",
    ("Box", "as", "ul"): "List",
    ("Box", "as", "ol"): "List",
    ("Box", "as", "li"): "ListItem",
    ("Box", "as", "hr"): "Divider",
    ("Box", "as", "kbd"): "Kbd",
    ("Box", "as", "code"): "Code",
}

# "flex", 'flex', {"flex"}, {'flex'} and {`flex`} without substitutions
_QUOTED = re.compile(r"""^(["'])(.*)\1$""", re.DOTALL)
_EXPRESSION = re.compile(r"""^\{\s*(["'`])(.*)\1\s*\}$""", re.DOTALL)


@dataclass(frozen=True)
class ComponentMatch:
    attribute: Node
    component: str


def literal_value(value_text: str) -> str | None:
    """Literal string carried by an attribute value, or None if it is computed."""
    match = _QUOTED.match(value_text) or _EXPRESSION.match(value_text)
    if not match:
        return None
    quote, value = match.groups()
    if quote in value or (quote == "`" and "${" in value):
        return None
    return value


def find_specific_component(component: str, attribute: str, value_text: str) -> str | None:
    value = literal_value(value_text)
    if value is None:
        return None
    return SPECIFIC_COMPONENTS.get((component, attribute, value))


def classify(node: Node, component: str, source: bytes | str) -> ComponentMatch | None:
    """First attribute, in source order, that prescribes a specific component."""
    for attribute in JSXPatterns.get_attributes(node):
        name = JSXPatterns.get_attribute_name(attribute, source)
        value = JSXPatterns.get_attribute_value(attribute)
        if name is None or value is None:
            continue

        specific = find_specific_component(component, name, ASTWalker.get_text(value, source))
        if specific is not None:
            return ComponentMatch(attribute=attribute, component=specific)
    return None
