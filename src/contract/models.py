"""Symbol and discovery-source models.

A ``PartialSymbolRecord`` is what a source adapter produces: any field it
could not determine is left as ``None``. Conflict resolution turns the
surviving candidates into fully populated, frozen ``SymbolRecord`` objects.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["layout", "form", "navigation", "feedback", "content", "other"]

MANUAL_CONFIG_PATH = "manual-config"


class SourceKind(str, Enum):
    """Origin of a discovered symbol."""

    PACKAGE = "package"
    LOCAL_FILE = "local-file"
    CUSTOM_ELEMENTS = "custom-elements"
    MANUAL = "manual"


class DiscoverySource(BaseModel):
    """Declarative instruction telling an adapter where to look."""

    model_config = ConfigDict(frozen=True)

    kind: SourceKind
    path: str
    file_patterns: tuple[str, ...] | None = None


class PartialSymbolRecord(BaseModel):
    """A candidate symbol as reported by a single source adapter."""

    model_config = ConfigDict(frozen=True)

    name: str
    source_kind: SourceKind
    source_path: str
    category: Category | None = None
    props: tuple[str, ...] | None = None
    slots: tuple[str, ...] | None = None
    description: str | None = None
    examples: tuple[str, ...] | None = None


class SymbolRecord(BaseModel):
    """A resolved, immutable UI component known to exist."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: Category = "other"
    props: tuple[str, ...] = Field(default_factory=tuple)
    slots: tuple[str, ...] = Field(default_factory=tuple)
    source_kind: SourceKind
    source_path: str
    description: str | None = None
    examples: tuple[str, ...] = Field(default_factory=tuple)


__all__ = [
    "MANUAL_CONFIG_PATH",
    "Category",
    "DiscoverySource",
    "PartialSymbolRecord",
    "SourceKind",
    "SymbolRecord",
]
