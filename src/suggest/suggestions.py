"""Suggest the symbol an unknown name was most likely meant to be."""

from __future__ import annotations

from collections.abc import Set
from difflib import SequenceMatcher
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

# Common mistaken terms and the real components they usually stand for.
SYNONYMS: Mapping[str, tuple[str, ...]] = {
    "stack": ("BlockStack", "InlineStack", "LegacyStack"),
    "layout": ("Layout", "Box"),
    "container": ("Box", "Layout"),
    "grid": ("Grid", "InlineGrid"),
    "text": ("Text",),
    "button": ("Button",),
    "card": ("Card", "LegacyCard"),
}

SIMILARITY_CUTOFF = 0.6


def _ordered(known_names: Iterable[str]) -> list[str]:
    # Sets carry no order of their own; sort them so results never vary.
    if isinstance(known_names, Set):
        return sorted(known_names)
    return list(known_names)


def suggest(unknown: str, known_names: Iterable[str]) -> str | None:
    """Return the most likely intended known name, or None.

    Steps, first hit wins:

    1. case-insensitive containment in either direction, scanning known
       names in order;
    2. the synonym table, keyed by the lower-cased unknown name;
    3. the most similar known name with a ratio of at least 0.6, earliest
       on ties.
    """
    known = _ordered(known_names)
    if not unknown or not known:
        return None

    needle = unknown.lower()
    for name in known:
        candidate = name.lower()
        if needle in candidate or candidate in needle:
            return name

    present = set(known)
    for synonym in SYNONYMS.get(needle, ()):
        if synonym in present:
            return synonym

    best: str | None = None
    best_ratio = SIMILARITY_CUTOFF
    for name in known:
        ratio = SequenceMatcher(None, needle, name.lower()).ratio()
        if ratio > best_ratio or (best is None and ratio >= best_ratio):
            best, best_ratio = name, ratio
    return best


def suggest_all(unknown_names: Iterable[str], known_names: Iterable[str]) -> dict[str, str]:
    """Map every resolvable unknown name to its suggestion."""
    known = _ordered(known_names)
    suggestions: dict[str, str] = {}
    for name in unknown_names:
        suggestion = suggest(name, known)
        if suggestion is not None:
            suggestions[name] = suggestion
    return suggestions


__all__ = ["SIMILARITY_CUTOFF", "SYNONYMS", "suggest", "suggest_all"]
