"""Where does a JSX element come from?"""

from chakra_symbols.models import DeclarationKind
from chakra_tree_sitter import ASTWalker, JSXPatterns
from tree_sitter import Node

from .protocols import SymbolResolver

CHAKRA_MODULE = "@chakra-ui/react"


def get_import_declaration(name_node: Node, resolver: SymbolResolver) -> Node | None:
    """Import statement whose named specifier binds `name_node`, if any."""
    symbol = resolver.resolve(name_node)
    # string tag
    if symbol is None:
        return None

    declaration = resolver.declaration_context(symbol)
    if declaration is None or declaration.kind != DeclarationKind.IMPORT_SPECIFIER:
        return None

    return resolver.enclosing_import_declaration(declaration.node)


def resolve_origin(name_node: Node, resolver: SymbolResolver, source: bytes | str) -> str | None:
    """Module specifier the element name was imported from, without quotes."""
    import_node = get_import_declaration(name_node, resolver)
    if import_node is None:
        return None

    specifier = JSXPatterns.get_module_specifier(import_node)
    if specifier is None:
        return None

    text = ASTWalker.get_text(specifier, source)
    # strip quote
    return text[1:-1]


def is_chakra_element(node: Node, resolver: SymbolResolver, source: bytes | str) -> bool:
    name_node = JSXPatterns.get_tag_name(node)
    if name_node is None:
        return False
    return resolve_origin(name_node, resolver, source) == CHAKRA_MODULE
