"""File scanning utilities for local component discovery."""

from __future__ import annotations

import logging
from fnmatch import fnmatch
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

logger = logging.getLogger(__name__)

SKIPPED_DIR_NAMES = frozenset({"node_modules"})


def _is_skipped_dir(name: str) -> bool:
    return name.startswith(".") or name in SKIPPED_DIR_NAMES


def _should_include_file(
    path: Path,
    directory: Path,
    gitignore_matches: Callable[[str], bool] | None,
    file_patterns: list[str] | None,
    exclude_patterns: list[str] | None,
) -> bool:
    """Check if a file should be included based on all filtering rules."""
    if not path.is_file() or path.is_symlink():
        return False

    if not _is_within_root(path, directory):
        return False

    try:
        rel_path = path.relative_to(directory)
    except ValueError:
        return False

    rel_path_str = rel_path.as_posix()

    if gitignore_matches is not None and gitignore_matches(str(path)):
        return False

    if file_patterns and not any(fnmatch(path.name, pat) for pat in file_patterns):
        return False

    has_excluded_match = exclude_patterns and any(
        fnmatch(rel_path_str, pat) for pat in exclude_patterns
    )
    return not has_excluded_match


def _is_within_root(path: Path, root: Path) -> bool:
    """Return True when the resolved path stays within the resolved root."""
    try:
        root_resolved = root.resolve()
        path_resolved = path.resolve()
    except OSError:
        return False

    try:
        path_resolved.relative_to(root_resolved)
    except ValueError:
        return False

    return True


def _iter_gitignore_files(root: Path) -> list[Path]:
    """Return sorted list of .gitignore files under root (including root)."""
    gitignore_paths = [root / ".gitignore"]
    gitignore_paths.extend(
        path
        for path in root.rglob(".gitignore")
        if not any(
            _is_skipped_dir(part) for part in path.relative_to(root).parts[:-1]
        )
    )
    unique_paths = {path for path in gitignore_paths if path.is_file()}
    return sorted(unique_paths, key=lambda p: p.relative_to(root).as_posix())


def _build_gitignore_matcher(
    root: Path,
    *,
    nested_gitignore: bool,
) -> Callable[[str], bool] | None:
    if not nested_gitignore:
        gitignore_path = root / ".gitignore"
        if gitignore_path.is_file():
            return cast("Callable[[str], bool]", parse_gitignore(gitignore_path))
        return None

    gitignore_paths = _iter_gitignore_files(root)
    if not gitignore_paths:
        return None

    matchers = [parse_gitignore(path) for path in gitignore_paths]

    def matches(path_str: str) -> bool:
        for matcher in matchers:
            try:
                if matcher(path_str):
                    return True
            except ValueError:
                continue
        return False

    return matches


def _walk(directory: Path, depth: int, max_depth: int) -> Iterator[Path]:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.warning("Cannot read directory %s: %s", directory, exc)
        return

    for entry in entries:
        if entry.is_symlink() or entry.name.startswith("."):
            continue
        if entry.is_dir():
            if _is_skipped_dir(entry.name) or depth >= max_depth:
                continue
            yield from _walk(entry, depth + 1, max_depth)
        else:
            yield entry


def find_component_files(
    directory: Path,
    *,
    file_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    max_depth: int = 10,
    nested_gitignore: bool = False,
) -> Iterator[Path]:
    """Find candidate component files in a directory, respecting .gitignore.

    Hidden directories and ``node_modules`` are never entered, symlinks are
    not followed, and recursion stops ``max_depth`` levels below directory.

    Args:
        directory: Directory to search
        file_patterns: fnmatch patterns matched against the file name; if
            provided, files must match at least one pattern to be included
        exclude_patterns: fnmatch patterns matched against the path relative
            to directory; files matching any pattern are excluded
        max_depth: Maximum number of directory levels to descend
        nested_gitignore: Compose nested .gitignore files, not only the root one

    Yields:
        Path objects for each file found, sorted lexicographically by
        relative path for deterministic ordering.
    """
    gitignore_matches = _build_gitignore_matcher(
        directory,
        nested_gitignore=nested_gitignore,
    )

    matched_files = [
        path
        for path in _walk(directory, 0, max_depth)
        if _should_include_file(
            path,
            directory,
            gitignore_matches,
            file_patterns,
            exclude_patterns,
        )
    ]

    matched_files.sort(key=lambda p: p.relative_to(directory).as_posix())

    yield from matched_files


def has_component_files(directory: Path, suffixes: tuple[str, ...]) -> bool:
    """Return True when directory directly contains a file with a given suffix."""
    try:
        return any(
            entry.is_file() and entry.name.endswith(suffixes)
            for entry in directory.iterdir()
        )
    except OSError:
        return False


__all__ = ["_should_include_file", "find_component_files", "has_component_files"]
