"""Suggestions for unknown component names."""

from suggest.suggestions import SYNONYMS, suggest, suggest_all

__all__ = ["SYNONYMS", "suggest", "suggest_all"]
