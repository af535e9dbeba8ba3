"""The immutable symbol registry produced by one discovery pass."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from contract.models import SymbolRecord


@dataclass(frozen=True)
class SymbolRegistry:
    """Resolved records for one project, never mutated after construction.

    ``names`` is the authoritative validation set; ``ordered_names`` is the
    same set sorted, for anything that needs a stable iteration order.
    """

    records: Mapping[str, SymbolRecord]
    names: frozenset[str]
    ordered_names: tuple[str, ...]
    key: str = ""
    built_at: float = 0.0
    source_count: int = field(default=0, compare=False)

    @classmethod
    def from_records(
        cls,
        records: Mapping[str, SymbolRecord],
        *,
        key: str = "",
        built_at: float = 0.0,
        source_count: int = 0,
    ) -> SymbolRegistry:
        frozen = MappingProxyType(dict(records))
        return cls(
            records=frozen,
            names=frozenset(frozen),
            ordered_names=tuple(sorted(frozen)),
            key=key,
            built_at=built_at,
            source_count=source_count,
        )

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ordered_names)

    def get(self, name: str) -> SymbolRecord | None:
        return self.records.get(name)

    def symbols(self) -> list[SymbolRecord]:
        """Records sorted by name."""
        return [self.records[name] for name in self.ordered_names]


__all__ = ["SymbolRegistry"]
