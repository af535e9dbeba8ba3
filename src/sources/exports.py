"""Package export enumeration.

"Enumerate a package's exports" is a capability with several
implementations, tried in order of availability by the package adapter:

* ``NodeRuntimeEnumerator`` loads the installed package in a Node process
  and reports the kind of every runtime export.
* ``InstalledStructureEnumerator`` inspects the installed package on disk
  (``package.json`` exports, declaration files, component subdirectories)
  when it cannot be loaded.
* ``CuratedEnumerator`` answers from a static table and works without
  ``node_modules`` at all.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, Protocol

import orjson

from rules.patterns import extract_declared_exports, is_component_name, is_utility_export
from sources.curated import curated_components

if TYPE_CHECKING:
    from pathlib import Path

    from contract.models import Category

logger = logging.getLogger(__name__)

ExportKind = Literal["function", "class", "component-object", "object", "unknown"]

COMPONENT_EXPORT_KINDS: frozenset[str] = frozenset({"function", "class", "component-object"})

DEFAULT_TYPINGS_PATH = "dist/types/index.d.ts"

_NODE_SCRIPT = r"""
const path = require('path');
const { createRequire } = require('module');
const name = process.argv[1];
const req = createRequire(path.join(process.cwd(), 'package.json'));
const load = async () => {
  try {
    return req(name);
  } catch (err) {
    return await import(name);
  }
};
load().then((mod) => {
  const out = [];
  for (const key of Object.keys(mod || {})) {
    const value = mod[key];
    let kind = 'unknown';
    if (typeof value === 'function') {
      const source = Function.prototype.toString.call(value);
      kind = /^class[\s{]/.test(source) ? 'class' : 'function';
    } else if (value && typeof value === 'object') {
      const wrapped = typeof value.render === 'function'
        || typeof value.component === 'function'
        || typeof value.Component === 'function'
        || value.$$typeof !== undefined;
      kind = wrapped ? 'component-object' : 'object';
    }
    out.push({ name: key, kind });
  }
  process.stdout.write(JSON.stringify(out));
}).catch((err) => {
  process.stderr.write(String((err && err.message) || err));
  process.exit(1);
});
"""


class EnumerationError(Exception):
    """Raised when an enumerator is unavailable or produced nothing usable."""


@dataclass(frozen=True)
class PackageExport:
    name: str
    kind: ExportKind = "unknown"
    component_path: str | None = None
    category: Category | None = None
    description: str | None = None
    props: tuple[str, ...] = field(default_factory=tuple)


class ExportEnumerator(Protocol):
    @property
    def name(self) -> str: ...

    def enumerate(self, package: str, project_root: Path) -> list[PackageExport]: ...


def _package_dir(package: str, project_root: Path) -> Path:
    return project_root / "node_modules" / package


class NodeRuntimeEnumerator:
    """Enumerates runtime exports by loading the package with Node."""

    def __init__(self, node_executable: str = "node", timeout: float = 20.0) -> None:
        self.node_executable = node_executable
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "node-runtime"

    def enumerate(self, package: str, project_root: Path) -> list[PackageExport]:
        node = shutil.which(self.node_executable)
        if node is None:
            msg = f"{self.node_executable!r} is not on PATH"
            raise EnumerationError(msg)

        if not _package_dir(package, project_root).is_dir():
            msg = f"{package} is not installed under {project_root}"
            raise EnumerationError(msg)

        try:
            completed = subprocess.run(
                [node, "-e", _NODE_SCRIPT, package],
                cwd=project_root,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            msg = f"Failed to run node for {package}: {exc}"
            raise EnumerationError(msg) from exc

        if completed.returncode != 0:
            detail = completed.stderr.strip().splitlines()
            msg = f"node could not load {package}: {detail[-1] if detail else 'unknown error'}"
            raise EnumerationError(msg)

        try:
            raw = orjson.loads(completed.stdout)
        except orjson.JSONDecodeError as exc:
            msg = f"Unexpected output while enumerating {package}: {exc}"
            raise EnumerationError(msg) from exc

        exports = [
            PackageExport(name=str(item.get("name", "")), kind=item.get("kind", "unknown"))
            for item in raw
            if isinstance(item, dict)
        ]
        components = [
            export
            for export in exports
            if export.kind in COMPONENT_EXPORT_KINDS
            and is_component_name(export.name)
            and not is_utility_export(export.name)
        ]
        if not components:
            msg = f"{package} has no component-shaped runtime exports"
            raise EnumerationError(msg)
        return components


class InstalledStructureEnumerator:
    """Derives component exports from an installed package's files."""

    @property
    def name(self) -> str:
        return "installed-structure"

    def enumerate(self, package: str, project_root: Path) -> list[PackageExport]:
        package_dir = _package_dir(package, project_root)
        manifest_path = package_dir / "package.json"
        if not manifest_path.is_file():
            msg = f"{package} is not installed under {project_root}"
            raise EnumerationError(msg)

        try:
            manifest = orjson.loads(manifest_path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as exc:
            msg = f"Unreadable package.json for {package}: {exc}"
            raise EnumerationError(msg) from exc

        found: dict[str, PackageExport] = {}
        if isinstance(manifest, dict):
            self._from_exports_field(package, manifest.get("exports"), found)
            typings = manifest.get("types") or manifest.get("typings") or DEFAULT_TYPINGS_PATH
            self._from_declarations(package_dir / str(typings), None, found)

        if not found:
            self._from_subdirectories(package, package_dir, found)

        if not found:
            msg = f"No component exports found in the structure of {package}"
            raise EnumerationError(msg)
        return list(found.values())

    def _from_exports_field(
        self, package: str, exports_field: Any, found: dict[str, PackageExport]
    ) -> None:
        if not isinstance(exports_field, dict):
            return

        for key in exports_field:
            if key in {".", "./index"} or not key.startswith("./") or "*" in key:
                continue
            segment = key.rsplit("/", 1)[-1]
            if is_component_name(segment) and segment not in found:
                found[segment] = PackageExport(
                    name=segment, component_path=f"{package}/{key[2:]}"
                )

    def _from_declarations(
        self,
        declarations_path: Path,
        component_path: str | None,
        found: dict[str, PackageExport],
    ) -> None:
        if not declarations_path.is_file():
            return
        try:
            content = declarations_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping declarations %s: %s", declarations_path, exc)
            return

        for name in extract_declared_exports(content):
            if name not in found:
                found[name] = PackageExport(name=name, component_path=component_path)

    def _from_subdirectories(
        self, package: str, package_dir: Path, found: dict[str, PackageExport]
    ) -> None:
        try:
            entries = sorted(package_dir.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            logger.debug("Cannot list %s: %s", package_dir, exc)
            return

        for entry in entries:
            if not entry.is_dir() or entry.name.startswith(".") or entry.name == "node_modules":
                continue
            self._from_declarations(
                entry / "index.d.ts", f"{package}/{entry.name}", found
            )


class CuratedEnumerator:
    """Answers from the curated table; needs no installed package."""

    @property
    def name(self) -> str:
        return "curated"

    def enumerate(self, package: str, project_root: Path) -> list[PackageExport]:
        del project_root

        curated = curated_components(package)
        if not curated:
            msg = f"No curated component table for {package}"
            raise EnumerationError(msg)

        return [
            PackageExport(
                name=component.name,
                kind="function",
                category=component.category,
                description=component.description,
                props=component.props,
            )
            for component in curated
        ]


def default_dynamic_enumerators() -> tuple[ExportEnumerator, ...]:
    return (NodeRuntimeEnumerator(), InstalledStructureEnumerator())


__all__ = [
    "COMPONENT_EXPORT_KINDS",
    "CuratedEnumerator",
    "EnumerationError",
    "ExportEnumerator",
    "InstalledStructureEnumerator",
    "NodeRuntimeEnumerator",
    "PackageExport",
    "default_dynamic_enumerators",
]
