"""Source adapter protocol and the failure guard shared by all adapters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from contract.models import DiscoverySource, PartialSymbolRecord, SourceKind

logger = logging.getLogger(__name__)


class SourceAdapter(Protocol):
    """Enumerates candidate symbols from one kind of origin."""

    @property
    def kind(self) -> SourceKind: ...

    def discover(self, source: DiscoverySource) -> list[PartialSymbolRecord]: ...


def discover_safely(
    adapter: SourceAdapter, source: DiscoverySource
) -> list[PartialSymbolRecord]:
    """Run an adapter, degrading any failure to zero results.

    A single unreadable directory, broken package or malformed manifest must
    not abort a discovery pass, so the error is logged and an empty list is
    returned instead.
    """
    try:
        records = adapter.discover(source)
    except Exception:
        logger.warning(
            "Discovery from %s source %s failed; using no results",
            source.kind.value,
            source.path,
            exc_info=True,
        )
        return []

    logger.debug(
        "Discovered %d candidates from %s source %s",
        len(records),
        source.kind.value,
        source.path,
    )
    return records
