"""Extract the component symbols a generated artifact references."""

from __future__ import annotations

import re

from rules.patterns import FRAMEWORK_BUILTINS
from utils import tag_to_symbol_name

# A tag name is followed by ``>``, ``/>``, a ``{...}`` spread or an attribute;
# ``n < Limit ? a : b`` is a comparison, not a tag.
_PASCAL_TAG = re.compile(
    r"(?<![\w.$])<\s*([A-Z][A-Za-z0-9_]*(?:\.[A-Z][A-Za-z0-9_]*)*)\b"
    r"(?=\s*(?:/?>|\{|[A-Za-z_$]))"
)
_CUSTOM_ELEMENT_TAG = re.compile(r"<\s*([a-z][a-z0-9]*(?:-[a-z0-9]+)+)(?=[\s/>])")
_IMPORT = re.compile(
    r"import\s+(?P<type_only>type\s+)?(?P<clause>[^;'\"]*?)\s+from\s+['\"](?P<module>[^'\"]+)['\"]",
    re.DOTALL,
)
_NAMED_CLAUSE = re.compile(r"\{([^}]*)\}")
_DEFAULT_CLAUSE = re.compile(r"^\s*([A-Za-z_$][\w$]*)\s*(?:,|$)")
_NAMESPACE_CLAUSE = re.compile(r"\*\s+as\s+([A-Za-z_$][\w$]*)")
_LOCAL_DECLARATION = re.compile(
    r"\b(?:function|class|const|let|var|interface|type|enum)\s+([A-Z][A-Za-z0-9_]*)"
)


def _imported_names(clause: str) -> list[tuple[str, str]]:
    """``(imported, local)`` pairs bound by an import clause."""
    pairs: list[tuple[str, str]] = []

    default = _DEFAULT_CLAUSE.match(clause)
    if default and not clause.lstrip().startswith("{"):
        pairs.append((default.group(1), default.group(1)))

    named = _NAMED_CLAUSE.search(clause)
    if named:
        for item in named.group(1).split(","):
            item = item.strip()
            if not item or item.startswith("type "):
                continue
            imported, _, local = item.partition(" as ")
            pairs.append((imported.strip(), (local or imported).strip()))
    return pairs


def extract_references(
    code: str,
    *,
    framework: str = "react",
    import_path: str = "",
    component_prefix: str = "",
) -> list[str]:
    """Return referenced component names in first-seen order.

    References are PascalCase tags (dot notation kept, e.g. ``Card.Header``),
    kebab-case custom element tags for web components, and component names
    imported from ``import_path``. Names declared in the artifact itself,
    names imported from other modules and framework built-ins are excluded.
    """
    references: list[str] = []
    excluded: set[str] = set(FRAMEWORK_BUILTINS)
    excluded.update(_LOCAL_DECLARATION.findall(code))
    namespaces: set[str] = set()

    for match in _IMPORT.finditer(code):
        if match.group("type_only"):
            continue
        module = match.group("module")
        namespace = _NAMESPACE_CLAUSE.search(match.group("clause"))
        if namespace:
            if import_path and module == import_path:
                namespaces.add(namespace.group(1))
            else:
                excluded.add(namespace.group(1))
        for imported, local in _imported_names(match.group("clause")):
            if import_path and module == import_path:
                if imported[:1].isupper() and imported not in references:
                    references.append(imported)
                # A renamed import is referenced by its local name.
                if local != imported:
                    excluded.add(local)
            else:
                excluded.add(local)

    candidates = [match.group(1) for match in _PASCAL_TAG.finditer(code)]
    if framework == "web-components":
        candidates.extend(
            tag_to_symbol_name(match.group(1), component_prefix)
            for match in _CUSTOM_ELEMENT_TAG.finditer(code)
        )

    for name in candidates:
        root, _, member = name.partition(".")
        if root in namespaces and member:
            name = member
            root = member.split(".", 1)[0]
        if root in excluded or name in references:
            continue
        references.append(name)
    return references


__all__ = ["extract_references"]
