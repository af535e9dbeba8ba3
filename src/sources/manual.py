"""Manual adapter: components declared by hand in ``symbolguard.toml``.

Manual records are discovered like any other source and then applied a
second time as overrides once automatic discovery has been resolved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from contract.models import MANUAL_CONFIG_PATH, PartialSymbolRecord, SourceKind

if TYPE_CHECKING:
    from contract.models import DiscoverySource
    from rules.config import ComponentConfig, SymbolGuardConfig


def _optional_tuple(values: list[str] | None) -> tuple[str, ...] | None:
    return tuple(values) if values is not None else None


def _from_component(component: ComponentConfig) -> PartialSymbolRecord:
    return PartialSymbolRecord(
        name=component.name,
        source_kind=SourceKind.MANUAL,
        source_path=MANUAL_CONFIG_PATH,
        category=component.category,
        props=_optional_tuple(component.props),
        slots=_optional_tuple(component.slots),
        description=component.description,
        examples=_optional_tuple(component.examples),
    )


def manual_overrides(config: SymbolGuardConfig) -> list[PartialSymbolRecord]:
    """Records for every manually declared component, later declarations winning."""
    records: dict[str, PartialSymbolRecord] = {}
    for component in config.components:
        records[component.name] = _from_component(component)

    for name in config.layout_components:
        if name in records:
            continue
        records[name] = PartialSymbolRecord(
            name=name,
            source_kind=SourceKind.MANUAL,
            source_path=MANUAL_CONFIG_PATH,
            category="layout",
            description=f"{name} layout component",
        )
    return list(records.values())


class ManualAdapter:
    def __init__(self, config: SymbolGuardConfig) -> None:
        self.config = config

    @property
    def kind(self) -> SourceKind:
        return SourceKind.MANUAL

    def discover(self, source: DiscoverySource) -> list[PartialSymbolRecord]:
        del source
        return manual_overrides(self.config)


__all__ = ["ManualAdapter", "manual_overrides"]
