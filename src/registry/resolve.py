"""Conflict resolution: many candidate records per name down to exactly one."""

from __future__ import annotations

from typing import TYPE_CHECKING

from contract.models import SourceKind, SymbolRecord
from rules.patterns import categorize

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from contract.models import PartialSymbolRecord

# Lower rank wins; kinds not listed rank after all of these.
SOURCE_PRIORITY: dict[SourceKind, int] = {
    SourceKind.LOCAL_FILE: 0,
    SourceKind.MANUAL: 1,
    SourceKind.PACKAGE: 2,
}
_OTHER_RANK = len(SOURCE_PRIORITY)


def source_rank(kind: SourceKind) -> int:
    return SOURCE_PRIORITY.get(kind, _OTHER_RANK)


def group_candidates(
    adapter_outputs: Iterable[Sequence[PartialSymbolRecord]],
) -> dict[str, list[PartialSymbolRecord]]:
    """Key every candidate by name, keeping all of them in first-seen order."""
    candidates: dict[str, list[PartialSymbolRecord]] = {}
    for output in adapter_outputs:
        for record in output:
            candidates.setdefault(record.name, []).append(record)
    return candidates


def pick_winner(candidates: Sequence[PartialSymbolRecord]) -> PartialSymbolRecord:
    """Highest-priority kind wins; within a kind the first-seen candidate wins."""
    # min() returns the first minimal element, which keeps same-kind ties stable.
    return min(candidates, key=lambda record: source_rank(record.source_kind))


def _complete(record: PartialSymbolRecord) -> SymbolRecord:
    return SymbolRecord(
        name=record.name,
        category=record.category or categorize(record.name),
        props=record.props or (),
        slots=record.slots or (),
        source_kind=record.source_kind,
        source_path=record.source_path,
        description=record.description,
        examples=record.examples or (),
    )


def apply_override(
    override: PartialSymbolRecord, current: SymbolRecord | None
) -> SymbolRecord:
    """Replace current with override, carrying forward fields the override left unset."""
    if current is None:
        return _complete(override)

    return SymbolRecord(
        name=override.name,
        category=override.category or current.category,
        props=override.props if override.props is not None else current.props,
        slots=override.slots if override.slots is not None else current.slots,
        source_kind=override.source_kind,
        source_path=override.source_path,
        description=(
            override.description if override.description is not None else current.description
        ),
        examples=override.examples if override.examples is not None else current.examples,
    )


def resolve(
    adapter_outputs: Iterable[Sequence[PartialSymbolRecord]],
    overrides: Iterable[PartialSymbolRecord] = (),
) -> dict[str, SymbolRecord]:
    """Resolve adapter outputs into one record per name.

    Args:
        adapter_outputs: Candidate records per source, in discovery order
        overrides: Manual records applied last and unconditionally

    Returns:
        Mapping of name to resolved record, in first-seen name order
    """
    resolved = {
        name: _complete(pick_winner(candidates))
        for name, candidates in group_candidates(adapter_outputs).items()
    }

    for override in overrides:
        resolved[override.name] = apply_override(override, resolved.get(override.name))

    return resolved


__all__ = [
    "SOURCE_PRIORITY",
    "apply_override",
    "group_candidates",
    "pick_winner",
    "resolve",
    "source_rank",
]
