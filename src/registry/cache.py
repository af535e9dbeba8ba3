"""TTL-stamped registry cache and the discovery entry point."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from registry.registry import SymbolRegistry
from registry.resolve import resolve
from sources.base import discover_safely
from sources.identify import build_adapters, identify_sources
from sources.manual import manual_overrides

if TYPE_CHECKING:
    from collections.abc import Callable

    from rules.config import SymbolGuardConfig

logger = logging.getLogger(__name__)

MAX_DISCOVERY_WORKERS = 4


@dataclass(frozen=True)
class _Entry:
    registry: SymbolRegistry
    expires_at: float


class RegistryCache:
    """Holds one registry per project key until its TTL runs out.

    Expiry never touches a registry already handed out: a rebuild produces a
    new instance and only the cache slot is swapped.
    """

    def __init__(
        self,
        ttl_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            msg = "ttl_seconds must be positive"
            raise ValueError(msg)
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def get(
        self,
        key: str,
        build: Callable[[float], SymbolRegistry],
        *,
        refresh: bool = False,
    ) -> SymbolRegistry:
        """Return the cached registry for key, building it when missing or stale.

        ``build`` receives the build timestamp from the cache clock.
        """
        with self._lock:
            now = self._clock()
            entry = self._entries.get(key)
            if entry is not None and not refresh and now < entry.expires_at:
                logger.debug("Registry cache hit for %s", key)
                return entry.registry

            logger.debug(
                "Registry cache %s for %s",
                "refresh" if entry is not None else "miss",
                key,
            )
            registry = build(now)
            self._entries[key] = _Entry(registry, now + self.ttl_seconds)
            return registry

    def invalidate(self, key: str | None = None) -> None:
        """Drop one key, or every key when none is given."""
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                self._entries.pop(key, None)


def project_key(root: Path) -> str:
    return Path(root).resolve().as_posix()


def build_registry(
    config: SymbolGuardConfig, root: Path, *, built_at: float = 0.0
) -> SymbolRegistry:
    """Run one discovery pass and resolve it into a fresh registry."""
    root = Path(root)
    sources = identify_sources(config, root)
    adapters = build_adapters(config, root)

    # Adapters only read, so sources run concurrently; map() keeps source order.
    with ThreadPoolExecutor(max_workers=MAX_DISCOVERY_WORKERS) as pool:
        outputs = list(
            pool.map(lambda source: discover_safely(adapters[source.kind], source), sources)
        )

    records = resolve(outputs, overrides=manual_overrides(config))
    registry = SymbolRegistry.from_records(
        records,
        key=project_key(root),
        built_at=built_at,
        source_count=len(sources),
    )
    logger.info(
        "Discovered %d symbols from %d sources in %s",
        len(registry),
        len(sources),
        root,
    )
    return registry


def discover_symbols(
    config: SymbolGuardConfig,
    root: Path,
    *,
    cache: RegistryCache | None = None,
    refresh: bool = False,
) -> SymbolRegistry:
    """Build (or fetch from cache) the symbol registry for a project."""
    if cache is None:
        return build_registry(config, root, built_at=time.monotonic())

    return cache.get(
        project_key(root),
        lambda now: build_registry(config, root, built_at=now),
        refresh=refresh,
    )


__all__ = [
    "RegistryCache",
    "build_registry",
    "discover_symbols",
    "project_key",
]
