from __future__ import annotations

import pytest

from rules.patterns import (
    base_component_name,
    categorize,
    extract_declared_exports,
    extract_prop_names,
    extract_slots,
    is_component_name,
    is_internal_name,
    is_skipped_file,
    is_utility_export,
    looks_like_story_content,
    skip_reason,
)


@pytest.mark.parametrize(
    ("file_name", "reason"),
    [
        ("Button.stories.tsx", "story"),
        ("Button.test.tsx", "test"),
        ("Button.spec.ts", "test"),
        ("types.d.ts", "type-declaration"),
        ("index.ts", "index"),
        ("Button.mock.tsx", "mock"),
        ("vite.config.ts", "config"),
        ("Button.tsx", None),
    ],
)
def test_skip_file_rules(file_name: str, reason: str | None) -> None:
    assert skip_reason(file_name) == reason
    assert is_skipped_file(file_name) is (reason is not None)


@pytest.mark.parametrize(
    ("name", "internal"),
    [
        ("StoryUIPanel", True),
        ("ButtonStory", True),
        ("CardExample", True),
        ("TableDemo", True),
        ("Button", False),
        ("Storybook", False),
    ],
)
def test_internal_names(name: str, internal: bool) -> None:
    assert is_internal_name(name) is internal


def test_story_content_detection() -> None:
    assert looks_like_story_content("const meta = {};\nexport default meta;\n")
    assert looks_like_story_content("const meta: Meta<typeof Button> = {};")
    assert not looks_like_story_content("export function Button() { return null; }")


@pytest.mark.parametrize(
    ("name", "category"),
    [
        ("Grid", "layout"),
        ("BlockStack", "other"),
        ("Card", "content"),
        ("Button", "form"),
        ("Tabs", "navigation"),
        ("Modal", "feedback"),
        ("Widget", "other"),
    ],
)
def test_categorize_by_name(name: str, category: str) -> None:
    assert categorize(name) == category


def test_categorize_falls_back_to_content() -> None:
    assert categorize("Widget", "return <nav>{children}</nav>;") == "navigation"
    assert categorize("Widget", "<div role=\"dialog\" />") == "feedback"


@pytest.mark.parametrize(
    ("name", "base"),
    [
        ("CardHeader", "Card"),
        ("ModalFooter", "Modal"),
        ("Card.Header", "Card"),
        ("Button", None),
        ("Header", None),
    ],
)
def test_compound_base_names(name: str, base: str | None) -> None:
    assert base_component_name(name) == base


@pytest.mark.parametrize(
    ("name", "utility"),
    [
        ("useTheme", True),
        ("createTheme", True),
        ("ThemeProvider", True),
        ("DEFAULT_THEME", True),
        ("hexToRgb", True),
        ("Button", False),
    ],
)
def test_utility_exports(name: str, utility: bool) -> None:
    assert is_utility_export(name) is utility


@pytest.mark.parametrize(
    ("name", "component"),
    [
        ("Button", True),
        ("ICONS", False),
        ("StyledButton", False),
        ("ThemeContext", False),
        ("ButtonProps", False),
        ("ButtonTypes", False),
        ("button", False),
    ],
)
def test_component_names(name: str, component: bool) -> None:
    assert is_component_name(name) is component


def test_extract_declared_exports() -> None:
    content = """
export declare const Button: React.FC<ButtonProps>;
export declare function Card(props: CardProps): JSX.Element;
export declare class Modal extends React.Component {}
export { Tabs, Tab as TabItem, type TabsProps, ThemeProvider };
export default Layout;
"""

    assert extract_declared_exports(content) == [
        "Button",
        "Card",
        "Modal",
        "Layout",
        "Tabs",
        "TabItem",
    ]


def test_extract_slots_and_prop_names() -> None:
    content = """
interface ButtonProps {
  label: string;
  disabled?: boolean;
  children?: React.ReactNode;
  slotIcon?: React.ReactNode;
}
"""

    assert extract_prop_names(content) == ("label", "disabled", "children", "slotIcon")
    assert extract_slots(content) == ("default", "slotIcon")
