"""Curated component tables for well-known design systems.

Used when a package is not installed (for example in production builds
without ``node_modules``) and as supplementary metadata for names that
dynamic enumeration also finds.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from contract.models import Category


@dataclass(frozen=True)
class CuratedComponent:
    name: str
    category: Category
    description: str
    props: tuple[str, ...] = field(default_factory=tuple)


def _c(
    name: str, category: Category, description: str, *props: str
) -> CuratedComponent:
    return CuratedComponent(name, category, description, tuple(props))


_ANTD = (
    _c("Layout", "layout", "Main layout wrapper"),
    _c("Row", "layout", "Grid row for layouts"),
    _c("Col", "layout", "Grid column for layouts"),
    _c("Grid", "layout", "Grid layout component"),
    _c("Space", "layout", "Spacing component"),
    _c("Divider", "layout", "Divider line"),
    _c("Table", "content", "Data table", "dataSource", "columns", "pagination", "loading"),
    _c("Card", "content", "Card container", "title", "extra", "loading", "bordered"),
    _c("Statistic", "content", "Statistical display", "title", "value", "prefix", "suffix"),
    _c("List", "content", "List display", "dataSource", "renderItem", "loading"),
    _c("Badge", "content", "Badge for status", "count", "dot", "status"),
    _c("Tag", "content", "Tag label", "color", "closable", "icon"),
    _c("Avatar", "content", "User avatar", "src", "size", "shape", "icon"),
    _c("Progress", "content", "Progress bar", "percent", "status", "type"),
    _c("Form", "form", "Form container", "layout", "onFinish", "initialValues"),
    _c("Input", "form", "Text input", "placeholder", "value", "onChange", "size"),
    _c("Select", "form", "Select dropdown", "options", "value", "onChange", "placeholder"),
    _c("Button", "form", "Button", "type", "size", "loading", "icon", "onClick"),
    _c("Switch", "form", "Toggle switch", "checked", "onChange", "size"),
    _c("DatePicker", "form", "Date picker", "value", "onChange", "format"),
    _c("Alert", "feedback", "Alert message", "message", "type", "showIcon", "closable"),
    _c("Modal", "feedback", "Modal dialog", "title", "open", "onOk", "onCancel"),
    _c("Tooltip", "feedback", "Tooltip", "title", "placement"),
    _c("Dropdown", "feedback", "Dropdown menu", "menu", "placement", "trigger"),
    _c("Menu", "navigation", "Navigation menu", "items", "mode", "selectedKeys"),
    _c("Tabs", "navigation", "Tabbed navigation", "items", "activeKey", "onChange"),
    _c("Breadcrumb", "navigation", "Breadcrumb navigation", "items"),
    _c("Pagination", "navigation", "Pagination", "current", "total", "pageSize", "onChange"),
)

_MUI = (
    _c("Box", "layout", "Basic layout box"),
    _c("Container", "layout", "Responsive container"),
    _c("Grid", "layout", "Grid layout", "container", "item", "xs", "sm", "md", "lg", "xl"),
    _c("Stack", "layout", "Stack layout", "direction", "spacing"),
    _c("Card", "content", "Card surface"),
    _c("CardContent", "content", "Card content area"),
    _c("CardHeader", "content", "Card header area", "title", "subheader", "action"),
    _c("Paper", "content", "Paper surface"),
    _c("Typography", "content", "Text typography", "variant", "component"),
    _c("Table", "content", "Data table"),
    _c("Chip", "content", "Chip component", "label", "color", "onDelete"),
    _c("Button", "form", "Button", "variant", "color", "size"),
    _c("TextField", "form", "Text input", "label", "variant", "value", "onChange"),
    _c("Select", "form", "Select dropdown"),
    _c("Switch", "form", "Toggle switch"),
    _c("Alert", "feedback", "Alert message", "severity", "variant"),
    _c("Dialog", "feedback", "Modal dialog", "open", "onClose"),
    _c("Tabs", "navigation", "Tabbed navigation", "value", "onChange"),
)

_CHAKRA = (
    _c("Box", "layout", "Basic layout box"),
    _c("Flex", "layout", "Flexbox layout"),
    _c("Grid", "layout", "CSS Grid layout"),
    _c("SimpleGrid", "layout", "Simple grid layout", "columns", "spacing"),
    _c("Stack", "layout", "Stack layout", "direction", "spacing"),
    _c("HStack", "layout", "Horizontal stack"),
    _c("VStack", "layout", "Vertical stack"),
    _c("Card", "content", "Card container"),
    _c("Text", "content", "Text component"),
    _c("Heading", "content", "Heading text"),
    _c("Badge", "content", "Badge component"),
    _c("Button", "form", "Button", "colorScheme", "size", "variant"),
    _c("Input", "form", "Text input"),
    _c("Select", "form", "Select dropdown"),
)

_MANTINE = (
    _c("Container", "layout", "Centered container", "size"),
    _c("Group", "layout", "Horizontal group", "gap", "justify"),
    _c("Stack", "layout", "Vertical stack", "gap", "align"),
    _c("Grid", "layout", "Grid layout", "columns", "gutter"),
    _c("SimpleGrid", "layout", "Equal-width grid", "cols", "spacing"),
    _c("Card", "content", "Card container", "shadow", "padding", "radius", "withBorder"),
    _c("Text", "content", "Text component", "size", "fw", "c"),
    _c("Title", "content", "Heading text", "order"),
    _c("Badge", "content", "Badge component", "color", "variant"),
    _c("Button", "form", "Button", "variant", "color", "size", "onClick"),
    _c("TextInput", "form", "Text input", "label", "placeholder", "value", "onChange"),
    _c("Select", "form", "Select dropdown", "data", "value", "onChange"),
    _c("Alert", "feedback", "Alert message", "title", "color"),
    _c("Modal", "feedback", "Modal dialog", "opened", "onClose", "title"),
    _c("Tabs", "navigation", "Tabbed navigation", "defaultValue"),
    _c("Menu", "navigation", "Dropdown menu"),
)

_POLARIS = (
    _c("Page", "layout", "Page container", "title", "primaryAction"),
    _c("Layout", "layout", "Page layout sections"),
    _c("BlockStack", "layout", "Vertical stack", "gap", "align"),
    _c("InlineStack", "layout", "Horizontal stack", "gap", "align", "wrap"),
    _c("InlineGrid", "layout", "Responsive grid", "columns", "gap"),
    _c("Box", "layout", "Layout primitive", "padding", "background"),
    _c("LegacyStack", "layout", "Deprecated stack"),
    _c("Card", "content", "Card container"),
    _c("LegacyCard", "content", "Deprecated card", "title", "sectioned"),
    _c("Text", "content", "Typography", "as", "variant", "tone"),
    _c("Badge", "content", "Status badge", "tone", "progress"),
    _c("Button", "form", "Button", "variant", "tone", "onClick"),
    _c("TextField", "form", "Text input", "label", "value", "onChange", "autoComplete"),
    _c("Select", "form", "Select dropdown", "label", "options", "value", "onChange"),
    _c("Banner", "feedback", "Banner message", "title", "tone"),
    _c("Modal", "feedback", "Modal dialog", "open", "onClose", "title"),
    _c("Tabs", "navigation", "Tabbed navigation", "tabs", "selected", "onSelect"),
)

CURATED_COMPONENTS: dict[str, tuple[CuratedComponent, ...]] = {
    "antd": _ANTD,
    "ant-design": _ANTD,
    "@mui/material": _MUI,
    "@chakra-ui/react": _CHAKRA,
    "@mantine/core": _MANTINE,
    "@shopify/polaris": _POLARIS,
}


def curated_components(package_name: str) -> tuple[CuratedComponent, ...]:
    return CURATED_COMPONENTS.get(package_name, ())
