from __future__ import annotations

from pathlib import Path

from contract.models import DiscoverySource, SourceKind
from sources.local_files import LocalFileAdapter

BUTTON_TSX = """\
import React from "react";

export interface ButtonProps {
  label: string;
  onClick?: () => void;
  children?: React.ReactNode;
}

export function Button({ label }: ButtonProps) {
  return <button>{label}</button>;
}
"""

CARD_TSX = """\
export const Card = ({ children }: { children: React.ReactNode }) => (
  <div className="card">{children}</div>
);
"""


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _discover(directory: Path, **kwargs: object) -> dict[str, object]:
    adapter = LocalFileAdapter(**kwargs)  # type: ignore[arg-type]
    source = DiscoverySource(kind=SourceKind.LOCAL_FILE, path=directory.as_posix())
    return {record.name: record for record in adapter.discover(source)}


def test_exported_declarations_name_components(tmp_path: Path) -> None:
    _write(tmp_path / "Button.tsx", BUTTON_TSX)
    _write(tmp_path / "Card" / "Card.tsx", CARD_TSX)

    records = _discover(tmp_path)

    assert sorted(records) == ["Button", "Card"]
    button = records["Button"]
    assert button.source_kind is SourceKind.LOCAL_FILE
    assert button.source_path == (tmp_path / "Button.tsx").as_posix()
    assert button.category == "form"
    assert button.props is not None
    assert list(button.props[:3]) == ["label", "onClick", "children"]
    assert button.slots == ("default",)
    assert button.description == "Button component"


def test_file_name_is_the_fallback(tmp_path: Path) -> None:
    _write(tmp_path / "date-picker.tsx", "const x = 1;\n")
    _write(tmp_path / "Badge.vue", "<template><span><slot /></span></template>\n")

    assert sorted(_discover(tmp_path)) == ["Badge", "DatePicker"]


def test_non_component_files_are_skipped(tmp_path: Path) -> None:
    _write(tmp_path / "Button.tsx", BUTTON_TSX)
    _write(tmp_path / "Button.stories.tsx", "export const Primary = {};\n")
    _write(tmp_path / "Button.test.tsx", "export function ButtonTest() {}\n")
    _write(tmp_path / "index.ts", 'export * from "./Button";\n')
    _write(tmp_path / "types.d.ts", "export declare const Hidden: unknown;\n")
    _write(tmp_path / "Playground.tsx", "const meta = {};\nexport default meta;\n")
    _write(tmp_path / "ButtonExample.tsx", "export function ButtonExample() {}\n")
    _write(tmp_path / "StoryUIPanel.tsx", "export function StoryUIPanel() {}\n")

    assert list(_discover(tmp_path)) == ["Button"]


def test_undecodable_files_are_skipped(tmp_path: Path) -> None:
    _write(tmp_path / "Button.tsx", BUTTON_TSX)
    (tmp_path / "Broken.tsx").write_bytes(b"\xff\xfe\x00export")

    assert list(_discover(tmp_path)) == ["Button"]


def test_exclude_patterns_and_missing_directory(tmp_path: Path) -> None:
    _write(tmp_path / "legacy" / "Old.tsx", "export function Old() {}\n")
    _write(tmp_path / "Card.tsx", CARD_TSX)

    assert list(_discover(tmp_path, exclude_patterns=["legacy/*"])) == ["Card"]
    assert _discover(tmp_path / "missing") == {}


def test_discovery_order_is_lexicographic(tmp_path: Path) -> None:
    _write(tmp_path / "b" / "Shared.tsx", "export function Shared() {}\n")
    _write(tmp_path / "a" / "Shared.tsx", "export function Shared() {}\n")

    adapter = LocalFileAdapter()
    source = DiscoverySource(kind=SourceKind.LOCAL_FILE, path=tmp_path.as_posix())
    paths = [record.source_path for record in adapter.discover(source)]

    assert paths == [
        (tmp_path / "a" / "Shared.tsx").as_posix(),
        (tmp_path / "b" / "Shared.tsx").as_posix(),
    ]
