"""Validate a generated artifact against the symbol registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rules.patterns import base_component_name
from validation.checks import check_patterns, check_syntax
from validation.errors import ValidationErrorSet
from validation.references import extract_references

if TYPE_CHECKING:
    from collections.abc import Callable, Container, Sequence

    from validation.checks import PatternViolation, SyntaxCheckResult

    SyntaxCheck = Callable[[str], SyntaxCheckResult]
    PatternCheck = Callable[[str], Sequence[PatternViolation]]


def invalid_component_message(name: str) -> str:
    return f"{name} is not a valid component"


def is_known_symbol(name: str, known: Container[str]) -> bool:
    """True when name, or any base it compounds on, is known.

    ``CardHeader`` and ``Card.Header`` are both accepted when ``Card`` is.
    """
    candidate: str | None = name
    while candidate:
        if candidate in known:
            return True
        base = base_component_name(candidate)
        candidate = base if base != candidate else None
    return False


def validate(
    code: str,
    registry: Container[str],
    *,
    syntax_check: SyntaxCheck | None = None,
    pattern_check: PatternCheck | None = None,
    import_path: str = "",
    framework: str = "react",
    component_prefix: str = "",
) -> ValidationErrorSet:
    """Report unknown symbols plus syntax and forbidden-pattern errors.

    Args:
        code: Generated artifact
        registry: Authoritative names (a ``SymbolRegistry`` or any container)
        syntax_check: Replaces the default tree-sitter syntax checker
        pattern_check: Replaces the default forbidden-pattern checker
        import_path: Design-system module whose named imports are checked too
        framework: Target framework, selects reference extraction and parsing
        component_prefix: Prefix applied to custom element tags

    Returns:
        The three error categories; empty on all three means valid
    """
    if syntax_check is None:
        syntax = check_syntax(code, framework)
    else:
        syntax = syntax_check(code)
    violations = check_patterns(code) if pattern_check is None else pattern_check(code)

    references = extract_references(
        code,
        framework=framework,
        import_path=import_path,
        component_prefix=component_prefix,
    )

    return ValidationErrorSet(
        syntax_errors=() if syntax.valid else tuple(syntax.errors),
        pattern_errors=tuple(violation.format() for violation in violations),
        import_errors=tuple(
            invalid_component_message(name)
            for name in references
            if not is_known_symbol(name, registry)
        ),
    )


__all__ = ["invalid_component_message", "is_known_symbol", "validate"]
