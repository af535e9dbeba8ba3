"""Parsing utilities for symbolguard."""

from parse.treesitter_components import (
    dialect_for,
    extract_exported_components,
    extract_props,
    find_syntax_errors,
)

__all__ = [
    "dialect_for",
    "extract_exported_components",
    "extract_props",
    "find_syntax_errors",
]
