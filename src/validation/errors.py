"""Validation error set value type."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationErrorSet:
    syntax_errors: tuple[str, ...] = field(default_factory=tuple)
    pattern_errors: tuple[str, ...] = field(default_factory=tuple)
    import_errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not (self.syntax_errors or self.pattern_errors or self.import_errors)

    @property
    def total_count(self) -> int:
        return len(self.syntax_errors) + len(self.pattern_errors) + len(self.import_errors)

    def flattened(self) -> frozenset[str]:
        """All messages as one set; category and order are irrelevant."""
        return frozenset((*self.syntax_errors, *self.pattern_errors, *self.import_errors))

    def same_as(self, other: ValidationErrorSet) -> bool:
        return self.flattened() == other.flattened()

    def format_for_log(self) -> str:
        """Summarise non-empty categories, e.g. ``Syntax(1), Import(2)``."""
        parts = [
            f"{label}({len(errors)})"
            for label, errors in (
                ("Syntax", self.syntax_errors),
                ("Pattern", self.pattern_errors),
                ("Import", self.import_errors),
            )
            if errors
        ]
        return ", ".join(parts) if parts else "None"

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "syntax_errors": list(self.syntax_errors),
            "pattern_errors": list(self.pattern_errors),
            "import_errors": list(self.import_errors),
        }


__all__ = ["ValidationErrorSet"]
