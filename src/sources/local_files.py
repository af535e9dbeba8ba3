"""Local-file adapter: components defined in the project's own source tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from contract.models import PartialSymbolRecord, SourceKind
from parse.treesitter_components import dialect_for, extract_exported_components, extract_props
from rules.config import DEFAULT_FILE_PATTERNS
from rules.patterns import (
    categorize,
    extract_prop_names,
    extract_slots,
    is_internal_name,
    is_skipped_file,
    looks_like_story_content,
)
from scan.files import find_component_files
from utils import file_stem, tag_to_symbol_name

if TYPE_CHECKING:
    from contract.models import DiscoverySource

logger = logging.getLogger(__name__)

# Single-file component formats the TSX grammar cannot parse.
_SFC_SUFFIXES = frozenset({".vue", ".svelte"})


def _component_name(file_path: Path, content: str) -> str:
    if file_path.suffix not in _SFC_SUFFIXES:
        exported = extract_exported_components(content.encode("utf-8"), dialect_for(file_path))
        if exported:
            return exported[0]

    return tag_to_symbol_name(file_stem(file_path))


def _props(file_path: Path, content: str) -> tuple[str, ...]:
    props: list[str] = []
    if file_path.suffix not in _SFC_SUFFIXES:
        props.extend(extract_props(content.encode("utf-8"), dialect_for(file_path)))
    for prop in extract_prop_names(content):
        if prop not in props:
            props.append(prop)
    return tuple(props)


class LocalFileAdapter:
    def __init__(
        self,
        *,
        exclude_patterns: list[str] | None = None,
        max_depth: int = 10,
        nested_gitignore: bool = False,
    ) -> None:
        self.exclude_patterns = exclude_patterns or []
        self.max_depth = max_depth
        self.nested_gitignore = nested_gitignore

    @property
    def kind(self) -> SourceKind:
        return SourceKind.LOCAL_FILE

    def discover(self, source: DiscoverySource) -> list[PartialSymbolRecord]:
        directory = Path(source.path)
        if not directory.is_dir():
            logger.debug("Local component directory %s does not exist", directory)
            return []

        file_patterns = list(source.file_patterns or DEFAULT_FILE_PATTERNS)
        records: list[PartialSymbolRecord] = []
        for file_path in find_component_files(
            directory,
            file_patterns=file_patterns,
            exclude_patterns=self.exclude_patterns,
            max_depth=self.max_depth,
            nested_gitignore=self.nested_gitignore,
        ):
            record = self._record_for(file_path)
            if record is not None:
                records.append(record)
        return records

    def _record_for(self, file_path: Path) -> PartialSymbolRecord | None:
        if is_skipped_file(file_path.name):
            return None

        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping unreadable file %s: %s", file_path, exc)
            return None

        if looks_like_story_content(content):
            return None

        name = _component_name(file_path, content)
        if not name or is_internal_name(name):
            return None

        return PartialSymbolRecord(
            name=name,
            source_kind=SourceKind.LOCAL_FILE,
            source_path=file_path.as_posix(),
            category=categorize(name, content),
            props=_props(file_path, content),
            slots=extract_slots(content),
            description=f"{name} component",
        )


__all__ = ["LocalFileAdapter"]
