from __future__ import annotations

import dspy  # type: ignore[import-untyped]
import pytest
from dspy.utils import DummyLM  # type: ignore[import-untyped]

from generation.dspy_generator import CorrectCodeSignature, DspyGenerator
from healing.controller import heal
from validation.checks import SyntaxCheckResult


def test_signature_fields() -> None:
    assert "correction_request" in CorrectCodeSignature.input_fields
    assert "instructions" not in CorrectCodeSignature.input_fields
    assert "code" in CorrectCodeSignature.output_fields


def test_generator_returns_predicted_code() -> None:
    lm = DummyLM([{"code": "<Button />"}])

    generator = DspyGenerator(lm)

    assert generator("Fix the component names") == "<Button />"


def test_predict_with_dummy_lm() -> None:
    lm = DummyLM([{"code": "<Card />"}])
    predictor = dspy.Predict(CorrectCodeSignature)
    with dspy.context(lm=lm):
        prediction = predictor(correction_request="Fix it")
    assert prediction.code == "<Card />"


@pytest.mark.asyncio
async def test_heal_with_dspy_generator() -> None:
    lm = DummyLM([{"code": "```tsx\n<Button />\n```"}])

    result = await heal(
        "<Buton />",
        frozenset({"Button"}),
        3,
        DspyGenerator(lm),
        syntax_check=lambda code: SyntaxCheckResult(valid=True),
    )

    assert result.success
    assert result.code == "<Button />"
    assert result.attempts == 2
