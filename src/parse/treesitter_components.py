"""Tree-sitter based component extraction for TypeScript/JavaScript sources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from tree_sitter import Language, Node, Parser
from tree_sitter_typescript import language_tsx, language_typescript

from utils import is_pascal_case

if TYPE_CHECKING:
    from pathlib import Path

Dialect = Literal["tsx", "typescript"]

_PARSERS: dict[Dialect, Parser] = {}

_DECLARATION_TYPES = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "class_declaration",
        "abstract_class_declaration",
    }
)
_VARIABLE_DECLARATION_TYPES = frozenset({"lexical_declaration", "variable_declaration"})


def _get_parser(dialect: Dialect = "tsx") -> Parser:
    """Initialize and return the Tree-sitter parser for a dialect."""
    parser = _PARSERS.get(dialect)
    if parser is None:
        raw = language_tsx() if dialect == "tsx" else language_typescript()
        parser = Parser(Language(raw))
        _PARSERS[dialect] = parser
    return parser


def dialect_for(file_path: Path) -> Dialect:
    """Plain ``.ts`` files use the TypeScript grammar; everything else TSX."""
    return "typescript" if file_path.suffix in {".ts", ".mts", ".cts"} else "tsx"


def _text(node: Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf8")


def _declared_names(declaration: Node) -> list[str]:
    if declaration.type in _DECLARATION_TYPES:
        return [_text(declaration.child_by_field_name("name"))]

    if declaration.type in _VARIABLE_DECLARATION_TYPES:
        return [
            _text(child.child_by_field_name("name"))
            for child in declaration.named_children
            if child.type == "variable_declarator"
        ]

    return []


def _export_statement_names(node: Node) -> list[str]:
    """Names an ``export`` statement binds in this file (re-exports excluded)."""
    if node.child_by_field_name("source") is not None:
        return []

    declaration = node.child_by_field_name("declaration")
    if declaration is not None:
        return _declared_names(declaration)

    value = node.child_by_field_name("value")
    if value is not None and value.type == "identifier":
        return [_text(value)]

    names: list[str] = []
    for child in node.named_children:
        if child.type != "export_clause":
            continue
        for specifier in child.named_children:
            if specifier.type == "export_specifier":
                names.append(_text(specifier.child_by_field_name("name")))
    return names


def extract_exported_components(source: bytes, dialect: Dialect = "tsx") -> list[str]:
    """Return exported PascalCase identifiers in source order.

    Only top-level ``export`` statements are considered: exported function,
    class and const/let declarations, ``export default Name`` and local
    ``export { Name }`` clauses.
    """
    tree = _get_parser(dialect).parse(source)

    names: list[str] = []
    for node in tree.root_node.named_children:
        if node.type != "export_statement":
            continue
        for name in _export_statement_names(node):
            if is_pascal_case(name) and name.upper() != name and name not in names:
                names.append(name)
    return names


def _property_names(body: Node | None) -> list[str]:
    if body is None:
        return []
    return [
        _text(member.child_by_field_name("name"))
        for member in body.named_children
        if member.type == "property_signature"
    ]


def _props_from_node(node: Node) -> list[str]:
    if node.type == "export_statement":
        declaration = node.child_by_field_name("declaration")
        return _props_from_node(declaration) if declaration is not None else []

    name = _text(node.child_by_field_name("name"))
    if not name.endswith("Props"):
        return []

    if node.type == "interface_declaration":
        return _property_names(node.child_by_field_name("body"))

    if node.type == "type_alias_declaration":
        value = node.child_by_field_name("value")
        if value is not None and value.type == "object_type":
            return _property_names(value)

    return []


def extract_props(source: bytes, dialect: Dialect = "tsx") -> tuple[str, ...]:
    """Collect property names declared on top-level ``*Props`` types."""
    tree = _get_parser(dialect).parse(source)

    props: list[str] = []
    for node in tree.root_node.named_children:
        for prop in _props_from_node(node):
            if prop and prop not in props:
                props.append(prop)
    return tuple(props)


def _collect_errors(node: Node, errors: list[str]) -> None:
    line = node.start_point[0] + 1
    column = node.start_point[1] + 1

    if node.is_missing:
        errors.append(f"Line {line}, Column {column}: Missing '{node.type}'")
        return

    if node.type == "ERROR":
        snippet = _text(node).strip().splitlines()
        near = snippet[0][:40] if snippet else ""
        errors.append(f"Line {line}, Column {column}: Unexpected syntax near '{near}'")
        return

    for child in node.children:
        if child.has_error or child.is_missing:
            _collect_errors(child, errors)


def find_syntax_errors(source: bytes, dialect: Dialect = "tsx") -> list[str]:
    """Report ERROR and MISSING nodes of a parse as human-readable messages."""
    tree = _get_parser(dialect).parse(source)
    root = tree.root_node
    if not root.has_error:
        return []

    errors: list[str] = []
    _collect_errors(root, errors)
    return errors
