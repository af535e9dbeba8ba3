from __future__ import annotations

import pytest

from suggest.suggestions import suggest, suggest_all


def test_end_to_end_typo() -> None:
    assert suggest("Buton", ["Button", "Card", "CardHeader"]) == "Button"


def test_suggestion_is_deterministic_for_sets() -> None:
    results = {suggest("Stak", {"Stack", "BlockStack"}) for _ in range(20)}

    assert results == {"Stack"}


@pytest.mark.parametrize(
    ("unknown", "known", "expected"),
    [
        ("Head", ["CardHeader", "Header"], "CardHeader"),
        ("PrimaryButton", ["Card", "Button"], "Button"),
        ("card", ["Card"], "Card"),
    ],
)
def test_containment_in_either_direction(
    unknown: str, known: list[str], expected: str
) -> None:
    assert suggest(unknown, known) == expected


def test_synonym_table() -> None:
    assert suggest("Container", ["Box", "InlineStack", "Page"]) == "Box"
    assert suggest("Layout", ["Page", "Box"]) == "Box"


def test_synonym_skips_absent_entries() -> None:
    assert suggest("Container", ["Layout", "Page"]) == "Layout"


def test_no_suggestion() -> None:
    assert suggest("Zzyzx", ["Button", "Card"]) is None
    assert suggest("Button", []) is None


def test_suggest_all_skips_unresolvable_names() -> None:
    assert suggest_all(["Buton", "Zzyzx", "Crad"], ["Button", "Card"]) == {
        "Buton": "Button",
        "Crad": "Card",
    }
