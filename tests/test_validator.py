from __future__ import annotations

from validation.checks import PatternViolation, SyntaxCheckResult, check_patterns, check_syntax
from validation.references import extract_references
from validation.validator import is_known_symbol, validate

REGISTRY = frozenset({"Button", "Card", "CardHeader"})


def _no_syntax_errors(code: str) -> SyntaxCheckResult:
    return SyntaxCheckResult(valid=True)


def test_unknown_symbol_end_to_end() -> None:
    code = "export const View = () => (\n  <Card>\n    <Buton>Go</Buton>\n  </Card>\n);\n"

    errors = validate(code, REGISTRY)

    assert errors.import_errors == ("Buton is not a valid component",)
    assert errors.syntax_errors == ()
    assert errors.pattern_errors == ()


def test_known_references_produce_no_errors() -> None:
    code = "<Card><CardHeader /><Button>Save</Button></Card>"

    errors = validate(code, REGISTRY, syntax_check=_no_syntax_errors)

    assert errors.is_valid


def test_compound_names_resolve_to_their_base() -> None:
    assert is_known_symbol("CardFooter", REGISTRY)
    assert is_known_symbol("Card.Body", REGISTRY)
    assert not is_known_symbol("ModalFooter", REGISTRY)


def test_named_imports_from_the_design_system_are_checked() -> None:
    code = (
        'import { Button, Sparkle as Shine } from "@acme/ui";\n'
        'import { Chart } from "./chart";\n'
        "export const View = () => <Chart><Shine /><Button /></Chart>;\n"
    )

    errors = validate(code, REGISTRY, import_path="@acme/ui", syntax_check=_no_syntax_errors)

    assert errors.import_errors == ("Sparkle is not a valid component",)


def test_external_checker_output_is_merged_verbatim() -> None:
    def syntax_check(code: str) -> SyntaxCheckResult:
        return SyntaxCheckResult(valid=False, errors=("Line 1, Column 1: boom",))

    def pattern_check(code: str) -> list[PatternViolation]:
        return [PatternViolation(3, "no inline styles")]

    errors = validate("<Button />", REGISTRY, syntax_check=syntax_check, pattern_check=pattern_check)

    assert errors.syntax_errors == ("Line 1, Column 1: boom",)
    assert errors.pattern_errors == ("Line 3: no inline styles",)
    assert errors.total_count == 2
    assert errors.format_for_log() == "Syntax(1), Pattern(1)"


def test_validate_is_deterministic() -> None:
    code = "<Buton /><Crad /><Buton />"

    first = validate(code, REGISTRY, syntax_check=_no_syntax_errors)
    second = validate(code, REGISTRY, syntax_check=_no_syntax_errors)

    assert first == second
    assert first.import_errors == (
        "Buton is not a valid component",
        "Crad is not a valid component",
    )


def test_reference_extraction_skips_local_and_builtin_names() -> None:
    code = """
import React, { Fragment } from "react";
import * as UI from "@acme/ui";
import { Chart } from "./chart";

function Row() {
  return <UI.Box />;
}

const items: Array<Item> = [];

export const View = () => (
  <Fragment>
    <Row />
    <Chart />
    <UI.Stack.Item />
    <Badge />
  </Fragment>
);
"""

    assert extract_references(code, import_path="@acme/ui") == ["Box", "Stack.Item", "Badge"]


def test_custom_element_tags_for_web_components() -> None:
    code = '<sl-button variant="primary"></sl-button><div></div><sl-card-header />'

    assert extract_references(code, framework="web-components") == ["SlButton", "SlCardHeader"]
    assert extract_references(code, framework="react") == []
    assert extract_references(code, framework="web-components", component_prefix="X") == [
        "XSlButton",
        "XSlCardHeader",
    ]


def test_default_syntax_check_reports_parse_errors() -> None:
    assert check_syntax("export const A = () => <div>ok</div>;\n").valid

    result = check_syntax("export const A = () => <div>;\n")
    assert not result.valid
    assert result.errors
    assert all(error.startswith("Line ") for error in result.errors)

    assert check_syntax("<template><div></template>", framework="vue").valid


def test_forbidden_patterns_report_line_numbers() -> None:
    code = 'const a = 1;\n<Box UNSAFE_style={{ color: "red" }} />\n<Text as="h2">Title</Text>\n'

    violations = check_patterns(code)

    assert [(violation.line, violation.format()[:8]) for violation in violations] == [
        (2, "Line 2: "),
        (3, "Line 3: "),
    ]
    assert "UNSAFE_style" in violations[0].message
    assert "Heading" in violations[1].message


def test_type_only_imports_are_not_component_references() -> None:
    code = (
        'import type { ButtonProps } from "@acme/ui";\n'
        'import { Card } from "@acme/ui";\n'
        "export const Save = (props: ButtonProps) => <Card><Button /></Card>;\n"
    )

    errors = validate(code, REGISTRY, syntax_check=_no_syntax_errors, import_path="@acme/ui")

    assert errors.is_valid
    assert extract_references(code, import_path="@acme/ui") == ["Card", "Button"]


def test_comparisons_are_not_tags() -> None:
    code = (
        "export const Pick = ({ n, Limit }) => (n < Limit ? <Button /> : <Card>{n}</Card>);\n"
        "export const Loop = ({ Max }) => { for (let i = 0; i < Max; i++) {} return <Card />; };\n"
    )

    assert extract_references(code) == ["Button", "Card"]
    assert validate(code, REGISTRY, syntax_check=_no_syntax_errors).is_valid


def test_tags_with_attributes_across_lines_are_references() -> None:
    code = "<Buton\n  label=\"Save\"\n/>\n<Card {...rest}>x</Card>\n"

    assert extract_references(code) == ["Buton", "Card"]
