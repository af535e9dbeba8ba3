"""Configuration and rule tables for symbolguard."""

from rules.config import (
    ComponentConfig,
    ConfigError,
    SymbolGuardConfig,
    load_config,
)
from rules.patterns import (
    base_component_name,
    categorize,
    is_internal_name,
    is_skipped_file,
    is_utility_export,
    looks_like_story_content,
)

__all__ = [
    "ComponentConfig",
    "ConfigError",
    "SymbolGuardConfig",
    "base_component_name",
    "categorize",
    "is_internal_name",
    "is_skipped_file",
    "is_utility_export",
    "load_config",
    "looks_like_story_content",
]
