"""Shared naming utilities for symbolguard."""

from __future__ import annotations

import re
from pathlib import Path

_PASCAL_CASE = re.compile(r"^[A-Z][A-Za-z0-9]*$")


def is_pascal_case(name: str) -> bool:
    """Return True for component-shaped identifiers such as ``Button``."""
    return bool(_PASCAL_CASE.match(name))


def tag_to_symbol_name(tag: str, prefix: str = "") -> str:
    """Convert a kebab-case custom element tag to a symbol name.

    Args:
        tag: Tag name as written in markup (e.g., "sl-button")
        prefix: Optional component prefix prepended to the result

    Returns:
        PascalCase symbol name (e.g., "SlButton")

    Examples:
        >>> tag_to_symbol_name("sl-button")
        'SlButton'
        >>> tag_to_symbol_name("md-outlined-text-field")
        'MdOutlinedTextField'
        >>> tag_to_symbol_name("x-card", prefix="Ui")
        'UiXCard'
    """
    parts = [part for part in re.split(r"[-_:]", tag.strip()) if part]
    return prefix + "".join(part[:1].upper() + part[1:] for part in parts)


def file_stem(file_path: str | Path) -> str:
    """Return a file name without any of its extensions.

    Examples:
        >>> file_stem("src/components/Button.tsx")
        'Button'
        >>> file_stem(Path("Card/Card.stories.tsx"))
        'Card'
    """
    name = file_path.name if isinstance(file_path, Path) else Path(file_path).name
    return name.split(".", 1)[0]
