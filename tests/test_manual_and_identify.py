from __future__ import annotations

from pathlib import Path

import orjson

from contract.models import MANUAL_CONFIG_PATH, SourceKind
from rules.config import ComponentConfig, SymbolGuardConfig
from sources.identify import identify_sources, is_local_import_path
from sources.manual import manual_overrides


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("export function X() {}\n", encoding="utf-8")


def test_manual_records_leave_unset_fields_empty() -> None:
    config = SymbolGuardConfig(
        components=[ComponentConfig(name="Hero", description="Landing hero", props=["title"])],
        layout_components=["Shell", "Hero"],
    )

    records = {record.name: record for record in manual_overrides(config)}

    assert sorted(records) == ["Hero", "Shell"]
    hero = records["Hero"]
    assert hero.source_kind is SourceKind.MANUAL
    assert hero.source_path == MANUAL_CONFIG_PATH
    assert hero.props == ("title",)
    assert hero.slots is None
    assert hero.examples is None
    assert hero.category is None
    assert records["Shell"].category == "layout"


def test_package_source_for_package_import_path(tmp_path: Path) -> None:
    sources = identify_sources(SymbolGuardConfig(import_path="@acme/ui"), tmp_path)

    assert [(source.kind, source.path) for source in sources] == [
        (SourceKind.PACKAGE, "@acme/ui")
    ]


def test_local_import_paths() -> None:
    assert is_local_import_path("./components")
    assert is_local_import_path("@/components/ui")
    assert not is_local_import_path("@acme/ui")
    assert not is_local_import_path("antd")


def test_conventional_directories_are_probed(tmp_path: Path) -> None:
    _touch(tmp_path / "src" / "components" / "Button.tsx")
    _touch(tmp_path / "ui" / "Card.svelte")
    (tmp_path / "components").mkdir()

    sources = identify_sources(SymbolGuardConfig(), tmp_path)

    assert [source.path for source in sources] == [
        (tmp_path / "src" / "components").as_posix(),
        (tmp_path / "ui").as_posix(),
    ]
    assert all(source.kind is SourceKind.LOCAL_FILE for source in sources)
    assert sources[0].file_patterns is not None


def test_explicit_directories_disable_probing(tmp_path: Path) -> None:
    _touch(tmp_path / "src" / "components" / "Button.tsx")
    _touch(tmp_path / "design" / "Card.tsx")

    config = SymbolGuardConfig(local_component_dirs=["design", "missing"])
    sources = identify_sources(config, tmp_path)

    assert [source.path for source in sources] == [(tmp_path / "design").as_posix()]


def test_alias_import_path_maps_to_src(tmp_path: Path) -> None:
    _touch(tmp_path / "src" / "lib" / "ui" / "Button.tsx")

    sources = identify_sources(SymbolGuardConfig(import_path="@/lib/ui"), tmp_path)

    assert [(source.kind, source.path) for source in sources] == [
        (SourceKind.LOCAL_FILE, (tmp_path / "src" / "lib" / "ui").as_posix())
    ]


def test_custom_element_manifests_and_manual_source(tmp_path: Path) -> None:
    (tmp_path / "custom-elements.json").write_text("{}", encoding="utf-8")
    package_dir = tmp_path / "node_modules" / "@shoelace-style" / "shoelace"
    (package_dir / "dist").mkdir(parents=True)
    (package_dir / "dist" / "custom-elements.json").write_text("{}", encoding="utf-8")
    (package_dir / "package.json").write_bytes(
        orjson.dumps({"customElements": "dist/custom-elements.json"})
    )

    config = SymbolGuardConfig(
        import_path="@shoelace-style/shoelace",
        layout_components=["Shell"],
    )
    sources = identify_sources(config, tmp_path)

    assert [(source.kind, source.path) for source in sources] == [
        (SourceKind.PACKAGE, "@shoelace-style/shoelace"),
        (SourceKind.CUSTOM_ELEMENTS, (tmp_path / "custom-elements.json").as_posix()),
        (
            SourceKind.CUSTOM_ELEMENTS,
            (package_dir / "dist" / "custom-elements.json").as_posix(),
        ),
        (SourceKind.MANUAL, MANUAL_CONFIG_PATH),
    ]
