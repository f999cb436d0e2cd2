from .extractor import ScopeTable, SymbolExtractor
from .models import DeclarationContext, DeclarationKind, Symbol
from .resolver import TreeSitterSymbolResolver

__all__ = [
    "DeclarationContext",
    "DeclarationKind",
    "ScopeTable",
    "Symbol",
    "SymbolExtractor",
    "TreeSitterSymbolResolver",
]
