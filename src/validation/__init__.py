"""Artifact validation: unknown symbols, syntax and forbidden patterns."""

from validation.checks import PatternViolation, SyntaxCheckResult, check_patterns, check_syntax
from validation.errors import ValidationErrorSet
from validation.references import extract_references
from validation.validator import invalid_component_message, is_known_symbol, validate

__all__ = [
    "PatternViolation",
    "SyntaxCheckResult",
    "ValidationErrorSet",
    "check_patterns",
    "check_syntax",
    "extract_references",
    "invalid_component_message",
    "is_known_symbol",
    "validate",
]
