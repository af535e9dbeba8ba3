"""DSPy-backed generator that rewrites UI code from a correction request."""

from __future__ import annotations

from typing import Any

import dspy  # type: ignore[import-untyped]


class CorrectCodeSignature(dspy.Signature):  # type: ignore[misc]
    """Rewrite UI code so it follows the correction instructions.

    Only components that exist in the design system may be used. Return the
    complete corrected code and nothing else.
    """

    correction_request: str = dspy.InputField(
        desc="Correction request listing errors, suggestions and the previous code"
    )
    code: str = dspy.OutputField(desc="Complete corrected code")


class CorrectCodeModule(dspy.Module):
    def __init__(self) -> None:
        super().__init__()
        self._predict = dspy.Predict(CorrectCodeSignature)

    def forward(self, correction_request: str) -> Any:
        return self._predict(correction_request=correction_request)


class DspyGenerator:
    """``prompt -> code`` generator backed by a DSPy program.

    Every call runs inside ``dspy.context(lm=...)`` so the generator never
    touches the globally configured language model.
    """

    def __init__(self, lm: Any, program: Any | None = None) -> None:
        self._lm = lm
        self._program = program if program is not None else CorrectCodeModule()

    def __call__(self, prompt: str) -> str:
        with dspy.context(lm=self._lm):
            prediction = self._program(correction_request=prompt)
        return str(getattr(prediction, "code", ""))


def build_generator(model: str, **lm_kwargs: Any) -> DspyGenerator:
    """Create a generator for a LiteLLM model string such as ``openai/gpt-4o-mini``."""
    return DspyGenerator(dspy.LM(model, **lm_kwargs))


__all__ = ["CorrectCodeModule", "CorrectCodeSignature", "DspyGenerator", "build_generator"]
