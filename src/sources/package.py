"""Package adapter: components exported by an installed design-system package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from contract.models import PartialSymbolRecord, SourceKind
from rules.patterns import categorize
from sources.exports import (
    CuratedEnumerator,
    EnumerationError,
    PackageExport,
    default_dynamic_enumerators,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from contract.models import DiscoverySource
    from sources.exports import ExportEnumerator

logger = logging.getLogger(__name__)


class PackageAdapter:
    """Enumerates a package dynamically, falling back to the curated table.

    Dynamic enumerators are tried in order and the first one that yields
    components wins. Curated metadata (category, description, props) is
    merged into dynamic results for names present in both.
    """

    def __init__(
        self,
        project_root: Path,
        enumerators: Sequence[ExportEnumerator] | None = None,
        curated: ExportEnumerator | None = None,
    ) -> None:
        self.project_root = Path(project_root)
        self.enumerators = (
            tuple(enumerators) if enumerators is not None else default_dynamic_enumerators()
        )
        self.curated = curated if curated is not None else CuratedEnumerator()

    @property
    def kind(self) -> SourceKind:
        return SourceKind.PACKAGE

    def _try(self, enumerator: ExportEnumerator, package: str) -> list[PackageExport]:
        try:
            exports = enumerator.enumerate(package, self.project_root)
        except EnumerationError as exc:
            logger.debug("%s enumeration of %s unavailable: %s", enumerator.name, package, exc)
            return []
        logger.debug("%s enumerated %d exports from %s", enumerator.name, len(exports), package)
        return exports

    def discover(self, source: DiscoverySource) -> list[PartialSymbolRecord]:
        package = source.path

        dynamic: list[PackageExport] = []
        for enumerator in self.enumerators:
            dynamic = self._try(enumerator, package)
            if dynamic:
                break

        curated = self._try(self.curated, package)
        if not dynamic and not curated:
            logger.warning("No components found for package %s", package)
            return []

        if not dynamic:
            exports = curated
        else:
            by_name = {export.name: export for export in curated}
            exports = [_merge(export, by_name.get(export.name)) for export in dynamic]

        records: list[PartialSymbolRecord] = []
        seen: set[str] = set()
        for export in exports:
            if export.name in seen:
                continue
            seen.add(export.name)
            records.append(
                PartialSymbolRecord(
                    name=export.name,
                    source_kind=SourceKind.PACKAGE,
                    source_path=package,
                    category=export.category or categorize(export.name),
                    props=export.props or None,
                    description=export.description or f"{export.name} from {package}",
                )
            )
        return records


def _merge(dynamic: PackageExport, curated: PackageExport | None) -> PackageExport:
    if curated is None:
        return dynamic
    return PackageExport(
        name=dynamic.name,
        kind=dynamic.kind,
        component_path=dynamic.component_path,
        category=dynamic.category or curated.category,
        description=dynamic.description or curated.description,
        props=dynamic.props or curated.props,
    )


__all__ = ["PackageAdapter"]
