"""Retry session state: attempt records, stop decisions and best-of-N selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from validation.errors import ValidationErrorSet

StopReason = Literal[
    "valid", "exhausted", "stuck", "cancelled", "generator_error", "check_error"
]


@dataclass(frozen=True)
class AttemptRecord:
    code: str
    errors: ValidationErrorSet
    auto_fix_applied: bool = False


@dataclass(frozen=True)
class RetryDecision:
    """Continue when ``stop_reason`` is None; otherwise stop for that reason."""

    stop_reason: StopReason | None = None
    reason: str = ""

    @property
    def should_retry(self) -> bool:
        return self.stop_reason is None


@dataclass
class RetrySession:
    """Ordered attempts for one generation request.

    The list index is the only clock: stuck detection compares the last two
    entries and best-of-N selection keeps the earliest of equal scores.
    """

    max_attempts: int
    attempts: list[AttemptRecord] = field(default_factory=list)
    best_index: int | None = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            msg = f"max_attempts must be at least 1, got {self.max_attempts}"
            raise ValueError(msg)

    def record(self, attempt: AttemptRecord) -> int:
        """Append an attempt and return its 1-based number."""
        self.attempts.append(attempt)
        index = len(self.attempts) - 1
        if (
            self.best_index is None
            or attempt.errors.total_count < self.attempts[self.best_index].errors.total_count
        ):
            self.best_index = index
        return index + 1

    @property
    def latest(self) -> AttemptRecord:
        return self.attempts[-1]

    @property
    def best(self) -> AttemptRecord:
        if self.best_index is None:
            msg = "No attempts recorded"
            raise LookupError(msg)
        return self.attempts[self.best_index]

    @property
    def error_history(self) -> list[ValidationErrorSet]:
        return [attempt.errors for attempt in self.attempts]

    def is_stuck(self) -> bool:
        if len(self.attempts) < 2:
            return False
        current = self.attempts[-1].errors
        previous = self.attempts[-2].errors
        return not current.is_valid and current.same_as(previous)

    def decide(self) -> RetryDecision:
        if not self.attempts:
            return RetryDecision()

        if self.latest.errors.is_valid:
            return RetryDecision("valid", "Code is valid")
        if len(self.attempts) >= self.max_attempts:
            return RetryDecision("exhausted", "Maximum retry attempts reached")
        if self.is_stuck():
            return RetryDecision("stuck", "Same errors repeating - generator appears stuck")
        return RetryDecision()


__all__ = ["AttemptRecord", "RetryDecision", "RetrySession", "StopReason"]
