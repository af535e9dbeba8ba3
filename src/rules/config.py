from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from contract.models import Category

CONFIG_FILENAME = "symbolguard.toml"

Framework = Literal["react", "vue", "angular", "svelte", "web-components"]

DEFAULT_FILE_PATTERNS = ["*.tsx", "*.jsx", "*.ts", "*.js", "*.vue", "*.svelte"]


class ComponentConfig(BaseModel):
    """A component declared by hand in the project configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(description="Component name as referenced in code")
    description: str | None = Field(default=None)
    category: Category | None = Field(default=None)
    props: list[str] | None = Field(
        default=None,
        description="Known props; unset means inherit from discovery",
    )
    slots: list[str] | None = Field(default=None)
    examples: list[str] | None = Field(default=None)


class SymbolGuardConfig(BaseModel):
    """Configuration for symbol discovery and self-healing."""

    model_config = ConfigDict(extra="forbid")

    import_path: str = Field(
        default="",
        description="Design-system package or import path generated code imports from",
    )
    component_prefix: str = Field(
        default="",
        description="Prefix prepended to names derived from custom element tags",
    )
    framework: Framework = Field(default="react")
    components_path: str | None = Field(
        default=None,
        description="Explicit local component directory",
    )
    local_component_dirs: list[str] = Field(
        default_factory=list,
        description="Additional local component directories (disables probing)",
    )
    custom_elements_path: str | None = Field(
        default=None,
        description="Explicit custom-elements.json manifest",
    )
    components: list[ComponentConfig] = Field(
        default_factory=list,
        description="Manually declared components (always override discovery)",
    )
    layout_components: list[str] = Field(
        default_factory=list,
        description="Manually declared layout components",
    )
    file_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FILE_PATTERNS),
        description="File name patterns scanned in local component directories",
    )
    exclude: list[str] = Field(
        default_factory=list,
        description="Glob patterns (relative to a scanned directory) to skip",
    )
    nested_gitignore: bool = Field(
        default=False,
        description="Honour nested .gitignore files while scanning",
    )
    max_scan_depth: int = Field(default=10, ge=0)
    cache_ttl_seconds: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=3, ge=1)
    known_names_sample: int = Field(
        default=20,
        ge=1,
        description="How many known names a corrective prompt lists",
    )

    @field_validator("layout_components", mode="before")
    @classmethod
    def validate_layout_components(cls, v: Any) -> Any:
        """Accept a single comma-separated string as well as a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v


class ConfigError(Exception):
    """Raised when config file exists but cannot be parsed."""


def resolve_project_path(root: Path, path: str) -> Path:
    """Resolve a config-provided path against the project root."""
    candidate = Path(path).expanduser()
    if candidate.is_absolute():
        return candidate
    return root / candidate


def load_config(root: Path) -> SymbolGuardConfig:
    """Load configuration from symbolguard.toml if it exists."""
    config_path = Path(root) / CONFIG_FILENAME

    if not config_path.is_file():
        return SymbolGuardConfig()

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return SymbolGuardConfig.model_validate(data)
    except Exception as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
