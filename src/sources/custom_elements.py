"""Custom-elements adapter: web components declared in a ``custom-elements.json`` manifest."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson

from contract.models import PartialSymbolRecord, SourceKind
from rules.patterns import categorize
from utils import tag_to_symbol_name

if TYPE_CHECKING:
    from contract.models import DiscoverySource

logger = logging.getLogger(__name__)

CUSTOM_ELEMENTS_MANIFEST = "custom-elements.json"


def _public_fields(declaration: dict[str, Any]) -> tuple[str, ...]:
    names: list[str] = []
    for member in declaration.get("members") or []:
        if not isinstance(member, dict) or member.get("kind") != "field":
            continue
        if member.get("privacy") in {"private", "protected"} or member.get("static"):
            continue
        name = member.get("name")
        if isinstance(name, str) and name and not name.startswith(("_", "#")):
            if name not in names:
                names.append(name)
    return tuple(names)


def _slot_names(declaration: dict[str, Any]) -> tuple[str, ...]:
    names: list[str] = []
    for slot in declaration.get("slots") or []:
        if not isinstance(slot, dict):
            continue
        name = slot.get("name") or "default"
        if name not in names:
            names.append(name)
    return tuple(names)


def _symbol_name(declaration: dict[str, Any], prefix: str) -> str | None:
    tag = declaration.get("tagName")
    if isinstance(tag, str) and tag:
        return tag_to_symbol_name(tag, prefix)
    class_name = declaration.get("name")
    if isinstance(class_name, str) and class_name:
        return prefix + class_name
    return None


def parse_manifest(
    manifest: Any, *, source_path: str, prefix: str = ""
) -> list[PartialSymbolRecord]:
    """Turn a decoded manifest into records, ignoring anything not shaped like one."""
    if not isinstance(manifest, dict):
        return []

    records: list[PartialSymbolRecord] = []
    seen: set[str] = set()
    for module in manifest.get("modules") or []:
        if not isinstance(module, dict):
            continue
        for declaration in module.get("declarations") or []:
            if not isinstance(declaration, dict) or declaration.get("customElement") is not True:
                continue
            name = _symbol_name(declaration, prefix)
            if name is None or name in seen:
                continue
            seen.add(name)

            description = declaration.get("summary") or declaration.get("description")
            records.append(
                PartialSymbolRecord(
                    name=name,
                    source_kind=SourceKind.CUSTOM_ELEMENTS,
                    source_path=source_path,
                    category=categorize(name),
                    props=_public_fields(declaration),
                    slots=_slot_names(declaration),
                    description=description if isinstance(description, str) else None,
                )
            )
    return records


class CustomElementsAdapter:
    def __init__(self, component_prefix: str = "") -> None:
        self.component_prefix = component_prefix

    @property
    def kind(self) -> SourceKind:
        return SourceKind.CUSTOM_ELEMENTS

    def discover(self, source: DiscoverySource) -> list[PartialSymbolRecord]:
        manifest_path = Path(source.path)
        try:
            manifest = orjson.loads(manifest_path.read_bytes())
        except OSError as exc:
            logger.warning("Cannot read custom elements manifest %s: %s", manifest_path, exc)
            return []
        except orjson.JSONDecodeError as exc:
            logger.warning("Malformed custom elements manifest %s: %s", manifest_path, exc)
            return []

        return parse_manifest(
            manifest,
            source_path=manifest_path.as_posix(),
            prefix=self.component_prefix,
        )


__all__ = ["CUSTOM_ELEMENTS_MANIFEST", "CustomElementsAdapter", "parse_manifest"]
