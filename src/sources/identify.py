"""Derive discovery sources from configuration and conventional locations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import orjson

from contract.models import MANUAL_CONFIG_PATH, DiscoverySource, SourceKind
from rules.config import resolve_project_path
from scan.files import has_component_files
from sources.custom_elements import CUSTOM_ELEMENTS_MANIFEST, CustomElementsAdapter
from sources.local_files import LocalFileAdapter
from sources.manual import ManualAdapter
from sources.package import PackageAdapter

if TYPE_CHECKING:
    from rules.config import SymbolGuardConfig
    from sources.base import SourceAdapter

logger = logging.getLogger(__name__)

# Probed in order when no local directory is configured.
COMMON_COMPONENT_DIRS = (
    "src/components",
    "src/ui",
    "components",
    "ui",
    "src/lib/components",
    "lib/components",
    "src/shared/components",
    "shared/components",
)

COMPONENT_SUFFIXES = (".tsx", ".jsx", ".vue", ".svelte")

# Import path aliases that conventionally point at ``src/``.
_SRC_ALIASES = ("@/", "~/")


def is_local_import_path(import_path: str) -> bool:
    return import_path.startswith((".", "/", *_SRC_ALIASES))


def _local_import_dir(import_path: str, root: Path) -> Path:
    for alias in _SRC_ALIASES:
        if import_path.startswith(alias):
            return root / "src" / import_path[len(alias) :]
    return resolve_project_path(root, import_path)


def _package_custom_elements(package: str, root: Path) -> Path | None:
    """Manifest referenced by an installed package's ``customElements`` field."""
    manifest_path = root / "node_modules" / package / "package.json"
    if not manifest_path.is_file():
        return None
    try:
        manifest = orjson.loads(manifest_path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as exc:
        logger.debug("Cannot read %s: %s", manifest_path, exc)
        return None

    field = manifest.get("customElements") if isinstance(manifest, dict) else None
    if not isinstance(field, str) or not field:
        return None
    path = manifest_path.parent / field
    return path if path.is_file() else None


def _local_dirs(config: SymbolGuardConfig, root: Path) -> list[Path]:
    explicit = [
        resolve_project_path(root, path)
        for path in [config.components_path, *config.local_component_dirs]
        if path
    ]
    if config.import_path and is_local_import_path(config.import_path):
        explicit.append(_local_import_dir(config.import_path, root))

    if explicit:
        existing = [path for path in explicit if path.is_dir()]
        for path in explicit:
            if not path.is_dir():
                logger.warning("Configured component directory %s does not exist", path)
        return existing

    return [
        root / candidate
        for candidate in COMMON_COMPONENT_DIRS
        if (root / candidate).is_dir() and has_component_files(root / candidate, COMPONENT_SUFFIXES)
    ]


def identify_sources(config: SymbolGuardConfig, root: Path) -> list[DiscoverySource]:
    """List the sources a discovery pass should consult, in a stable order."""
    root = Path(root)
    sources: list[DiscoverySource] = []

    def add(source: DiscoverySource) -> None:
        if all((s.kind, s.path) != (source.kind, source.path) for s in sources):
            sources.append(source)

    package = config.import_path
    if package and not is_local_import_path(package):
        add(DiscoverySource(kind=SourceKind.PACKAGE, path=package))

    for directory in _local_dirs(config, root):
        add(
            DiscoverySource(
                kind=SourceKind.LOCAL_FILE,
                path=directory.as_posix(),
                file_patterns=tuple(config.file_patterns),
            )
        )

    manifests: list[Path] = []
    if config.custom_elements_path:
        manifests.append(resolve_project_path(root, config.custom_elements_path))
    if (root / CUSTOM_ELEMENTS_MANIFEST).is_file():
        manifests.append(root / CUSTOM_ELEMENTS_MANIFEST)
    if package and not is_local_import_path(package):
        package_manifest = _package_custom_elements(package, root)
        if package_manifest is not None:
            manifests.append(package_manifest)
    for manifest in manifests:
        add(DiscoverySource(kind=SourceKind.CUSTOM_ELEMENTS, path=manifest.as_posix()))

    if config.components or config.layout_components:
        add(DiscoverySource(kind=SourceKind.MANUAL, path=MANUAL_CONFIG_PATH))

    logger.debug("Identified %d discovery sources under %s", len(sources), root)
    return sources


def build_adapters(config: SymbolGuardConfig, root: Path) -> dict[SourceKind, SourceAdapter]:
    """One adapter per source kind, configured for this project."""
    return {
        SourceKind.PACKAGE: PackageAdapter(Path(root)),
        SourceKind.LOCAL_FILE: LocalFileAdapter(
            exclude_patterns=list(config.exclude),
            max_depth=config.max_scan_depth,
            nested_gitignore=config.nested_gitignore,
        ),
        SourceKind.CUSTOM_ELEMENTS: CustomElementsAdapter(config.component_prefix),
        SourceKind.MANUAL: ManualAdapter(config),
    }


__all__ = [
    "COMMON_COMPONENT_DIRS",
    "build_adapters",
    "identify_sources",
    "is_local_import_path",
]
