"""Validation-driven self-healing of generated code."""

from healing.controller import GenerationMetrics, SelfHealingResult, heal
from healing.prompt import CorrectionPayload, build_correction, extract_code_block
from healing.session import AttemptRecord, RetryDecision, RetrySession

__all__ = [
    "AttemptRecord",
    "CorrectionPayload",
    "GenerationMetrics",
    "RetryDecision",
    "RetrySession",
    "SelfHealingResult",
    "build_correction",
    "extract_code_block",
    "heal",
]
