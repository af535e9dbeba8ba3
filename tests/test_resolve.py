from __future__ import annotations

import pytest

from contract.models import MANUAL_CONFIG_PATH, PartialSymbolRecord, SourceKind
from registry.registry import SymbolRegistry
from registry.resolve import pick_winner, resolve


def _record(
    name: str, kind: SourceKind, path: str = "", **fields: object
) -> PartialSymbolRecord:
    return PartialSymbolRecord(
        name=name,
        source_kind=kind,
        source_path=path or kind.value,
        **fields,  # type: ignore[arg-type]
    )


def test_one_record_per_name() -> None:
    outputs = [
        [_record("Button", SourceKind.PACKAGE), _record("Card", SourceKind.PACKAGE)],
        [_record("Button", SourceKind.LOCAL_FILE, "src/Button.tsx")],
        [_record("Button", SourceKind.CUSTOM_ELEMENTS)],
    ]

    resolved = resolve(outputs)

    assert sorted(resolved) == ["Button", "Card"]


@pytest.mark.parametrize(
    ("kinds", "winner"),
    [
        ((SourceKind.PACKAGE, SourceKind.LOCAL_FILE), SourceKind.LOCAL_FILE),
        ((SourceKind.LOCAL_FILE, SourceKind.PACKAGE), SourceKind.LOCAL_FILE),
        ((SourceKind.PACKAGE, SourceKind.MANUAL), SourceKind.MANUAL),
        ((SourceKind.CUSTOM_ELEMENTS, SourceKind.PACKAGE), SourceKind.PACKAGE),
        ((SourceKind.MANUAL, SourceKind.LOCAL_FILE), SourceKind.LOCAL_FILE),
    ],
)
def test_priority_order(kinds: tuple[SourceKind, SourceKind], winner: SourceKind) -> None:
    resolved = resolve([[_record("X", kind)] for kind in kinds])

    assert resolved["X"].source_kind is winner


def test_same_kind_ties_keep_first_seen() -> None:
    first = _record("Shared", SourceKind.LOCAL_FILE, "a/Shared.tsx")
    second = _record("Shared", SourceKind.LOCAL_FILE, "b/Shared.tsx")

    assert pick_winner([first, second]) is first
    assert resolve([[first], [second]])["Shared"].source_path == "a/Shared.tsx"


def test_defaults_are_filled_in() -> None:
    resolved = resolve([[_record("Modal", SourceKind.PACKAGE)]])

    modal = resolved["Modal"]
    assert modal.category == "feedback"
    assert modal.props == ()
    assert modal.slots == ()
    assert modal.examples == ()


def test_manual_override_always_wins_and_merges_forward() -> None:
    local = _record(
        "Button",
        SourceKind.LOCAL_FILE,
        "src/Button.tsx",
        category="form",
        props=("label", "onClick"),
        slots=("default",),
        description="Button component",
    )
    override = _record(
        "Button",
        SourceKind.MANUAL,
        MANUAL_CONFIG_PATH,
        description="Primary action",
        examples=("<Button label='Go' />",),
    )

    resolved = resolve([[local], [override]], overrides=[override])

    button = resolved["Button"]
    assert button.source_kind is SourceKind.MANUAL
    assert button.source_path == MANUAL_CONFIG_PATH
    assert button.description == "Primary action"
    assert button.props == ("label", "onClick")
    assert button.slots == ("default",)
    assert button.category == "form"
    assert button.examples == ("<Button label='Go' />",)


def test_override_with_explicit_empty_props_replaces() -> None:
    local = _record("Grid", SourceKind.LOCAL_FILE, props=("columns",))
    override = _record("Grid", SourceKind.MANUAL, props=())

    assert resolve([[local]], overrides=[override])["Grid"].props == ()


def test_override_for_new_name_is_added() -> None:
    override = _record("Shell", SourceKind.MANUAL, category="layout")

    resolved = resolve([[]], overrides=[override])

    assert resolved["Shell"].category == "layout"


def test_registry_exposes_authoritative_names() -> None:
    resolved = resolve([[_record("Card", SourceKind.PACKAGE), _record("Button", SourceKind.PACKAGE)]])

    registry = SymbolRegistry.from_records(resolved, key="proj")

    assert registry.names == frozenset({"Button", "Card"})
    assert registry.ordered_names == ("Button", "Card")
    assert "Card" in registry
    assert "Modal" not in registry
    assert len(registry) == 2
    assert registry.get("Card") is resolved["Card"]
    assert [record.name for record in registry.symbols()] == ["Button", "Card"]
    with pytest.raises(TypeError):
        registry.records["Modal"] = resolved["Card"]  # type: ignore[index]
