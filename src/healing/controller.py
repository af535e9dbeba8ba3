"""The validation-driven self-healing loop."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Collection
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from healing.prompt import build_correction, extract_code_block
from healing.session import AttemptRecord, RetrySession
from registry.registry import SymbolRegistry
from validation.errors import ValidationErrorSet
from validation.validator import validate

if TYPE_CHECKING:
    from healing.session import StopReason
    from validation.validator import PatternCheck, SyntaxCheck

logger = logging.getLogger(__name__)

Generator = Callable[[str], str | Awaitable[str]]
AutoFix = Callable[[str], str | None]


@dataclass(frozen=True)
class AttemptMetrics:
    attempt: int
    syntax_errors: int
    pattern_errors: int
    import_errors: int
    auto_fix_applied: bool


@dataclass(frozen=True)
class GenerationMetrics:
    attempts: int
    self_healing_used: bool
    validation_history: tuple[AttemptMetrics, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SelfHealingResult:
    """Outcome of one healing session; returned whether or not it converged."""

    success: bool
    code: str
    attempts: int
    error_history: tuple[ValidationErrorSet, ...]
    final_errors: ValidationErrorSet
    stop_reason: StopReason
    generator_error: str | None = None
    check_error: str | None = None
    attempt_records: tuple[AttemptRecord, ...] = field(default_factory=tuple)

    @property
    def self_healing_used(self) -> bool:
        return self.attempts > 1

    def metrics(self) -> GenerationMetrics:
        return GenerationMetrics(
            attempts=self.attempts,
            self_healing_used=self.self_healing_used,
            validation_history=tuple(
                AttemptMetrics(
                    attempt=index,
                    syntax_errors=len(record.errors.syntax_errors),
                    pattern_errors=len(record.errors.pattern_errors),
                    import_errors=len(record.errors.import_errors),
                    auto_fix_applied=record.auto_fix_applied,
                )
                for index, record in enumerate(self.attempt_records, start=1)
            ),
        )


async def _call_generator(generate: Generator, prompt: str) -> str:
    """Await async generators; run sync ones in a worker thread off the event loop."""
    if inspect.iscoroutinefunction(generate) or inspect.iscoroutinefunction(
        getattr(generate, "__call__", None)
    ):
        response = generate(prompt)
    else:
        response = await asyncio.to_thread(generate, prompt)
    if inspect.isawaitable(response):
        response = await response
    return str(response)


def _known_names(registry: Collection[str]) -> tuple[str, ...]:
    if isinstance(registry, SymbolRegistry):
        return registry.ordered_names
    return tuple(sorted(registry))


async def heal(
    initial_code: str,
    registry: Collection[str],
    max_attempts: int,
    generate: Generator,
    *,
    syntax_check: SyntaxCheck | None = None,
    pattern_check: PatternCheck | None = None,
    auto_fix: AutoFix | None = None,
    import_path: str = "",
    framework: str = "react",
    component_prefix: str = "",
    known_names_sample: int = 20,
    cancel_event: asyncio.Event | None = None,
) -> SelfHealingResult:
    """Validate, and while invalid, ask the generator for a corrected version.

    The initial code is attempt 1, so ``generate`` runs at most
    ``max_attempts - 1`` times, one awaited call per attempt. The loop stops
    on the first valid attempt, when the budget is spent, when two
    consecutive attempts report the same non-empty errors, when
    ``cancel_event`` is set at an attempt boundary, when the generator
    raises, or when auto-fix or a checker raises. Synchronous generators run
    in a worker thread so other sessions on the loop keep running. Unless
    the session succeeded, the returned code is the attempt with the fewest
    errors (earliest on ties).

    Args:
        initial_code: First generated artifact
        registry: Authoritative names (a ``SymbolRegistry`` or any collection)
        max_attempts: Attempt budget including the initial code
        generate: ``prompt -> code`` callable, sync or async
        syntax_check: Replaces the default syntax checker
        pattern_check: Replaces the default forbidden-pattern checker
        auto_fix: Optional deterministic repair run before each validation
        import_path: Design-system module generated code imports from
        framework: Target framework
        component_prefix: Prefix applied to custom element tags
        known_names_sample: Known names listed in each corrective prompt
        cancel_event: Checked between attempts, never during generation

    Raises:
        ValueError: If max_attempts is less than 1.
    """
    session = RetrySession(max_attempts=max_attempts)
    known = _known_names(registry)
    code = initial_code
    stop_reason: StopReason
    generator_error: str | None = None
    check_error: str | None = None

    while True:
        auto_fix_applied = False
        try:
            if auto_fix is not None:
                fixed = auto_fix(code)
                if fixed is not None and fixed != code:
                    code = fixed
                    auto_fix_applied = True

            errors = validate(
                code,
                registry,
                syntax_check=syntax_check,
                pattern_check=pattern_check,
                import_path=import_path,
                framework=framework,
                component_prefix=component_prefix,
            )
        except Exception as exc:
            logger.warning(
                "Checking attempt %d failed", len(session.attempts) + 1, exc_info=True
            )
            check_error = str(exc) or type(exc).__name__
            if not session.attempts:
                session.record(
                    AttemptRecord(
                        code,
                        ValidationErrorSet(syntax_errors=(f"Validation failed: {check_error}",)),
                        auto_fix_applied,
                    )
                )
            stop_reason = "check_error"
            break

        number = session.record(AttemptRecord(code, errors, auto_fix_applied))
        logger.debug(
            "Attempt %d/%d errors: %s", number, max_attempts, errors.format_for_log()
        )

        decision = session.decide()
        if decision.stop_reason is not None:
            stop_reason = decision.stop_reason
            break

        if cancel_event is not None and cancel_event.is_set():
            stop_reason = "cancelled"
            break

        payload = build_correction(
            code,
            errors,
            known,
            attempt=number + 1,
            max_attempts=max_attempts,
            framework=framework,
            import_path=import_path,
            sample_size=known_names_sample,
        )
        try:
            response = await _call_generator(generate, payload.render())
        except Exception as exc:
            logger.warning("Generator failed on attempt %d", number + 1, exc_info=True)
            generator_error = str(exc) or type(exc).__name__
            stop_reason = "generator_error"
            break

        code = extract_code_block(str(response))

    best = session.best
    result = SelfHealingResult(
        success=best.errors.is_valid,
        code=best.code,
        attempts=len(session.attempts),
        error_history=tuple(session.error_history),
        final_errors=best.errors,
        stop_reason=stop_reason,
        generator_error=generator_error,
        check_error=check_error,
        attempt_records=tuple(session.attempts),
    )
    logger.info(
        "Self-healing stopped (%s) after %d attempt(s); remaining errors: %s",
        stop_reason,
        result.attempts,
        result.final_errors.format_for_log(),
    )
    return result


__all__ = [
    "AttemptMetrics",
    "AutoFix",
    "GenerationMetrics",
    "Generator",
    "SelfHealingResult",
    "heal",
]
