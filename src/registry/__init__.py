"""Symbol registry construction, conflict resolution and caching."""

from registry.cache import RegistryCache, build_registry, discover_symbols
from registry.registry import SymbolRegistry
from registry.resolve import resolve

__all__ = [
    "RegistryCache",
    "SymbolRegistry",
    "build_registry",
    "discover_symbols",
    "resolve",
]
