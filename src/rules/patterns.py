"""Tagged pattern tables used by discovery and validation.

Every heuristic is a ``(pattern, result)`` row so the rules can be audited
and tested on their own. Lookups are first-match-wins in table order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from contract.models import Category


@dataclass(frozen=True)
class PatternRule:
    pattern: re.Pattern[str]
    result: str


def _rules(*rows: tuple[str, str], flags: int = 0) -> tuple[PatternRule, ...]:
    return tuple(PatternRule(re.compile(pattern, flags), result) for pattern, result in rows)


# Matched against a file name (not the full path).
SKIP_FILE_RULES = _rules(
    (r"\.(stories|story)\.", "story"),
    (r"\.(test|spec)\.", "test"),
    (r"\.d\.[cm]?ts$", "type-declaration"),
    (r"^index\.", "index"),
    (r"\.mocks?\.", "mock"),
    (r"^mocks?\.", "mock"),
    (r"\.config\.", "config"),
    (r"^(setupTests|jest\.setup|vitest\.setup)\.", "config"),
)

INTERNAL_NAME_RULES = _rules(
    (r"^StoryUI", "self"),
    (r"(Story|Example|Demo)$", "story-export"),
)

STORY_CONTENT_RULES = _rules(
    (r"\bexport\s+default\s+meta\b", "story-meta"),
    (r"\bsatisfies\s+Meta\b", "story-meta"),
    (r":\s*Meta\s*<", "story-meta"),
    (r"\bstoriesOf\s*\(", "story-meta"),
    (r"\bdefineMeta\s*\(", "story-meta"),
)

# Matched against the lower-cased component name.
CATEGORY_RULES = _rules(
    (
        r"^(layout|grid|row|col|column|container|box|flex|stack|section|wrapper|panel)",
        "layout",
    ),
    (
        r"^(form|input|button|select|checkbox|radio|switch|toggle|field|textarea)",
        "form",
    ),
    (r"^(nav|menu|tab|breadcrumb|pagination|link|anchor)", "navigation"),
    (
        r"^(alert|modal|dialog|toast|notification|message|tooltip|popover)",
        "feedback",
    ),
    (
        r"^(card|list|table|badge|tag|chip|avatar|image|text|heading|paragraph)",
        "content",
    ),
)

# Matched against file content when the name alone is inconclusive.
CONTENT_CATEGORY_RULES = _rules(
    (r"<(form|input|select|textarea|button)\b", "form"),
    (r"<nav\b|role=[\"']navigation[\"']", "navigation"),
    (r"role=[\"'](dialog|alert|status|tooltip)[\"']", "feedback"),
    (r"display:\s*[\"']?(flex|grid)|\bgridTemplateColumns\b", "layout"),
)

COMPOUND_NAME_RULES = _rules(
    (r"^(?P<base>[A-Z][A-Za-z0-9]*)\.[A-Za-z0-9.]+$", "base"),
    (
        r"^(?P<base>[A-Z][A-Za-z0-9]*?)"
        r"(Header|Body|Footer|Content|Title|Subtitle|Description|Item|Trigger|"
        r"Section|Group|Label|Actions|Action|Cell|Panel|Media|Image|Overlay|"
        r"Indicator|Separator|Close)$",
        "base",
    ),
)

UTILITY_EXPORT_RULES = _rules(
    (r"^use[A-Z]", "hook"),
    (r"^(create|get|set|handle|on)[A-Z]", "function"),
    (r"(Config|Provider|Context|Value|String)$", "support"),
    (r"^(default|Key)$", "support"),
    (r"^(DEFAULT|SUPPORTED|DATA)_", "constant"),
    (r"_SECRET_", "constant"),
    (r"To(Hex|Rgb|Hsl|Hsb)$", "color-util"),
)

NON_COMPONENT_NAME_RULES = _rules(
    (r"^Styled", "styled"),
    (r"(Provider|Context)$", "context"),
    (r"(Types?|Props)$", "type"),
)

# Names whose capture group holds one or more exported identifiers.
DECLARATION_EXPORT_RULES = _rules(
    (r"export\s+declare\s+const\s+([A-Z][A-Za-z0-9]+)", "const"),
    (r"export\s+declare\s+function\s+([A-Z][A-Za-z0-9]+)", "function"),
    (r"export\s+declare\s+class\s+([A-Z][A-Za-z0-9]+)", "class"),
    (r"export\s+default\s+([A-Z][A-Za-z0-9]+)", "default"),
    (r"export\s+\{([^}]+)\}", "list"),
)

SLOT_RULES = _rules(
    (r"\bchildren\b", "default"),
    (r"\b(slot[A-Z]\w*)", "named"),
)

PROPS_BLOCK_RULES = _rules(
    (r"interface\s+\w*Props\s*(?:extends[^{]*)?\{([^}]*)\}", "interface"),
    (r"type\s+\w*Props\s*=\s*\{([^}]*)\}", "type"),
    (r"\.propTypes\s*=\s*\{([^}]*)\}", "prop-types"),
)

# Matched line by line against generated code; the result is the message.
FORBIDDEN_CODE_RULES = _rules(
    (
        r"UNSAFE_style\s*=\s*\{",
        "The `UNSAFE_style` prop is strictly forbidden. Do not use it for any reason.",
    ),
    (r"UNSAFE_className\s*=\s*['\"]", "The `UNSAFE_className` prop is forbidden."),
    (
        r"<Text\s+as\s*=\s*[\"']h[1-6][\"']",
        'Text component does not support heading elements (h1-h6) in the "as" prop. '
        "Use Heading component instead.",
    ),
    flags=re.IGNORECASE,
)

FRAMEWORK_BUILTINS = frozenset(
    {
        "Fragment",
        "Suspense",
        "StrictMode",
        "Profiler",
        "Story",
        "Meta",
        "Canvas",
        "Template",
        "Teleport",
        "Transition",
        "TransitionGroup",
        "KeepAlive",
        "React",
    }
)


def first_match(rules: Sequence[PatternRule], text: str) -> PatternRule | None:
    """Return the first rule whose pattern matches text."""
    for rule in rules:
        if rule.pattern.search(text):
            return rule
    return None


def skip_reason(file_name: str) -> str | None:
    rule = first_match(SKIP_FILE_RULES, file_name)
    return rule.result if rule else None


def is_skipped_file(file_name: str) -> bool:
    """Check whether a file name is a known non-component file."""
    return skip_reason(file_name) is not None


def is_internal_name(name: str) -> bool:
    """Check whether a symbol name belongs to tooling or story exports."""
    return first_match(INTERNAL_NAME_RULES, name) is not None


def looks_like_story_content(content: str) -> bool:
    return first_match(STORY_CONTENT_RULES, content) is not None


def categorize(name: str, content: str = "") -> Category:
    """Infer a component category from its name, then its content."""
    rule = first_match(CATEGORY_RULES, name.lower())
    if rule is None and content:
        rule = first_match(CONTENT_CATEGORY_RULES, content)
    if rule is None:
        return "other"
    return rule.result  # type: ignore[return-value]


def base_component_name(name: str) -> str | None:
    """Return the base component of a compound name (``CardHeader`` -> ``Card``)."""
    for rule in COMPOUND_NAME_RULES:
        match = rule.pattern.match(name)
        if match:
            return match.group(rule.result)
    return None


def is_utility_export(name: str) -> bool:
    return first_match(UTILITY_EXPORT_RULES, name) is not None


def is_component_name(name: str) -> bool:
    """Check whether an exported name is shaped like a renderable component."""
    if not name or not name[0].isupper():
        return False
    if name.upper() == name:
        return False
    return first_match(NON_COMPONENT_NAME_RULES, name) is None


def extract_declared_exports(content: str) -> list[str]:
    """Collect component-shaped export names from a declaration file."""
    names: list[str] = []
    for rule in DECLARATION_EXPORT_RULES:
        for match in rule.pattern.finditer(content):
            if rule.result == "list":
                candidates = [_export_list_name(item) for item in match.group(1).split(",")]
            else:
                candidates = [match.group(1)]
            for candidate in candidates:
                if candidate and is_component_name(candidate) and candidate not in names:
                    names.append(candidate)
    return names


def _export_list_name(item: str) -> str:
    item = item.strip()
    if item.startswith("type "):
        return ""
    default_alias = re.match(r"default\s+as\s+(\w+)", item)
    if default_alias:
        return default_alias.group(1)
    alias = re.match(r"\w+\s+as\s+(\w+)", item)
    if alias:
        return alias.group(1)
    return item


def extract_slots(content: str) -> tuple[str, ...]:
    slots: list[str] = []
    for rule in SLOT_RULES:
        for match in rule.pattern.finditer(content):
            slot = "default" if rule.result == "default" else match.group(1)
            if slot not in slots:
                slots.append(slot)
    return tuple(slots)


def extract_prop_names(content: str) -> tuple[str, ...]:
    """Collect prop names from ``*Props`` shapes and ``propTypes`` blocks."""
    props: list[str] = []
    for rule in PROPS_BLOCK_RULES:
        block = rule.pattern.search(content)
        if block is None:
            continue
        member = r"^\s*(?:readonly\s+)?(\w+)\??\s*:" if rule.result != "prop-types" else r"(\w+)\s*:"
        for match in re.finditer(member, block.group(1), re.MULTILINE):
            if match.group(1) not in props:
                props.append(match.group(1))
    return tuple(props)
