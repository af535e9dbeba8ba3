"""Default syntax and forbidden-pattern checkers.

Both are pluggable: ``validate`` accepts any callable with the same shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from parse.treesitter_components import find_syntax_errors
from rules.patterns import FORBIDDEN_CODE_RULES

# Frameworks whose artifacts are plain TSX/TypeScript modules.
_TSX_FRAMEWORKS = frozenset({"react", "web-components"})


@dataclass(frozen=True)
class SyntaxCheckResult:
    valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PatternViolation:
    line: int
    message: str

    def format(self) -> str:
        return f"Line {self.line}: {self.message}"


def check_syntax(code: str, framework: str = "react") -> SyntaxCheckResult:
    """Parse TSX artifacts with tree-sitter; other frameworks pass through.

    Vue, Svelte and Angular artifacts embed templates the TSX grammar cannot
    parse, so they are reported valid here.
    """
    if framework not in _TSX_FRAMEWORKS:
        return SyntaxCheckResult(valid=True)

    errors = find_syntax_errors(code.encode("utf-8"), "tsx")
    return SyntaxCheckResult(valid=not errors, errors=tuple(errors))


def check_patterns(code: str) -> list[PatternViolation]:
    violations: list[PatternViolation] = []
    for index, line in enumerate(code.split("\n"), start=1):
        for rule in FORBIDDEN_CODE_RULES:
            if rule.pattern.search(line):
                violations.append(PatternViolation(index, rule.result))
    return violations


__all__ = [
    "PatternViolation",
    "SyntaxCheckResult",
    "check_patterns",
    "check_syntax",
]
