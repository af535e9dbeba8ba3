"""Stable public surface of symbolguard.

Callers (CLI, servers, generation pipelines) should import from here rather
than from the implementation packages. Heavy entry points are loaded lazily so
that importing ``contract.models`` stays cheap for the adapters themselves.
"""

from contract.models import (
    MANUAL_CONFIG_PATH,
    Category,
    DiscoverySource,
    PartialSymbolRecord,
    SourceKind,
    SymbolRecord,
)

_LAZY: dict[str, tuple[str, str]] = {
    "RegistryCache": ("registry.cache", "RegistryCache"),
    "discover_symbols": ("registry.cache", "discover_symbols"),
    "SymbolRegistry": ("registry.registry", "SymbolRegistry"),
    "ValidationErrorSet": ("validation.errors", "ValidationErrorSet"),
    "validate": ("validation.validator", "validate"),
    "suggest": ("suggest.suggestions", "suggest"),
    "SelfHealingResult": ("healing.controller", "SelfHealingResult"),
    "GenerationMetrics": ("healing.controller", "GenerationMetrics"),
    "heal": ("healing.controller", "heal"),
    "SymbolGuardConfig": ("rules.config", "SymbolGuardConfig"),
    "ConfigError": ("rules.config", "ConfigError"),
    "load_config": ("rules.config", "load_config"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY:
        from importlib import import_module

        module_name, attribute = _LAZY[name]
        return getattr(import_module(module_name), attribute)

    msg = f"module 'contract' has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "MANUAL_CONFIG_PATH",
    "Category",
    "ConfigError",
    "DiscoverySource",
    "GenerationMetrics",
    "PartialSymbolRecord",
    "RegistryCache",
    "SelfHealingResult",
    "SourceKind",
    "SymbolGuardConfig",
    "SymbolRecord",
    "SymbolRegistry",
    "ValidationErrorSet",
    "discover_symbols",
    "heal",
    "load_config",
    "suggest",
    "validate",
]
