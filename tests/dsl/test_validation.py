"""Tests for DSL validation: root checks, expression checks and diagnostics."""

from __future__ import annotations

from typing import Any

import pytest

from secexpr.constants.examples import EXAMPLES_BY_ID
from secexpr.constants.validation import DSL001, DSL002
from secexpr.dsl import diagnose_dsl, validate_document, validate_dsl
from secexpr.exceptions import DslSchemaError

from .conftest import dsl_text, nest

SECURITY_MESSAGE = '"security" field is missing or not a valid type in root.'
EXPRESSION_MESSAGE = '"expression" field is missing or not a valid type in root.'


def test_valid_simple_document() -> None:
    """A flat expression with an attribute and a literal is valid."""
    assert validate_dsl(dsl_text({"fn": "*", "a": "sales", "b": 2})) == (True, "")


def test_valid_nested_document() -> None:
    """Nested expressions on both sides are valid."""
    assert validate_dsl(EXAMPLES_BY_ID["nested"].dsl) == (True, "")


@pytest.mark.parametrize("operator", ["+", "-", "*", "/"])
def test_every_operator_is_accepted(operator: str) -> None:
    assert validate_dsl(dsl_text({"fn": operator, "a": 1.5, "b": "eps"})) == (True, "")


def test_invalid_json_is_reported() -> None:
    assert validate_dsl(EXAMPLES_BY_ID["invalid-json"].dsl) == (False, "Invalid JSON.")


def test_null_document_is_invalid_json() -> None:
    assert validate_dsl("null") == (False, "Invalid JSON.")
    assert diagnose_dsl("null").code == DSL001


def test_non_standard_json_constants_are_invalid_json() -> None:
    """NaN and Infinity tokens are not JSON."""
    text = '{"security": "ABC", "expression": {"fn": "+", "a": NaN, "b": 1}}'
    assert validate_dsl(text) == (False, "Invalid JSON.")


def test_bytes_input_is_accepted() -> None:
    assert validate_dsl(dsl_text({"fn": "+", "a": 1, "b": 2}).encode("utf-8")) == (True, "")


def test_missing_expression_at_root() -> None:
    assert validate_dsl(EXAMPLES_BY_ID["invalid-dsl"].dsl) == (False, EXPRESSION_MESSAGE)


@pytest.mark.parametrize(
    "text",
    [
        '{"expression": {"fn": "+", "a": 1, "b": 2}}',
        '{"security": 5, "expression": {"fn": "+", "a": 1, "b": 2}}',
        '{"security": "", "expression": {"fn": "+", "a": 1, "b": 2}}',
        '{"security": null, "expression": {"fn": "+", "a": 1, "b": 2}}',
        "[1, 2]",
        "5",
    ],
    ids=["missing", "number", "empty_string", "null", "array_root", "scalar_root"],
)
def test_security_must_be_a_non_empty_string(text: str) -> None:
    assert validate_dsl(text) == (False, SECURITY_MESSAGE)


@pytest.mark.parametrize(
    "expression",
    [[{"fn": "+", "a": 1, "b": 2}], None, "1 + 2", 3],
    ids=["array", "null", "string", "number"],
)
def test_expression_must_be_an_object(expression: Any) -> None:
    assert validate_dsl(dsl_text(expression)) == (False, EXPRESSION_MESSAGE)


def test_extra_root_key_is_rejected() -> None:
    ok, message = validate_dsl(dsl_text({"fn": "+", "a": 1, "b": 2}, comment="hi"))
    assert ok is False
    assert message == "Too many fields in root."
    assert "root" in message


def test_empty_expression_object_reports_missing_field() -> None:
    assert validate_dsl(dsl_text({})) == (False, 'Missing field in "expression": {}')


def test_missing_operand_reports_serialized_expression() -> None:
    ok, message = validate_dsl(dsl_text({"fn": "+", "a": "sales"}))
    assert ok is False
    assert message == 'Missing field in "expression": {\n "fn": "+",\n "a": "sales"\n}'


@pytest.mark.parametrize(
    "expression",
    [
        {"fn": "+", "a": 0, "b": 1},
        {"fn": "+", "a": 1, "b": 0.0},
        {"fn": "+", "a": "", "b": 1},
        {"fn": "", "a": 1, "b": 1},
        {"fn": "+", "a": False, "b": 1},
        {"fn": "+", "a": None, "b": 1},
    ],
    ids=["zero", "zero_float", "empty_string", "empty_fn", "false", "null"],
)
def test_falsy_values_count_as_missing(expression: dict[str, Any]) -> None:
    """Zero and empty values are treated as absent fields."""
    ok, message = validate_dsl(dsl_text(expression))
    assert ok is False
    assert message.startswith('Missing field in "expression": ')


def test_extra_expression_key_is_rejected() -> None:
    ok, message = validate_dsl(dsl_text({"fn": "+", "a": 1, "b": 2, "c": 3}))
    assert ok is False
    assert message == 'Too many fields in "expression": {\n "fn": "+",\n "a": 1,\n "b": 2,\n "c": 3\n}'


@pytest.mark.parametrize(
    ("fn", "rendered"),
    [
        ("%", "%"),
        ("plus", "plus"),
        (5, "5"),
        (2.0, "2"),
        (1e21, "1e+21"),
        (1.5e-7, "1.5e-7"),
        (0.000001, "0.000001"),
        (True, "true"),
        (["+"], "+"),
    ],
    ids=["percent", "word", "number", "whole_float", "large_float", "small_float", "micro_float", "boolean", "array"],
)
def test_unknown_operator_is_named(fn: Any, rendered: str) -> None:
    ok, message = validate_dsl(dsl_text({"fn": fn, "a": 1, "b": 2}))
    assert ok is False
    assert message == f'"fn" field is not a valid type: {rendered}'


@pytest.mark.parametrize(
    ("expression", "expected"),
    [
        ({"fn": "+", "a": True, "b": 2}, "a field is not a valid type: true"),
        ({"fn": "+", "a": 1, "b": True}, "b field is not a valid type: true"),
        ({"fn": "+", "a": 1, "b": [1, 2]}, "b field is not a valid type: 1,2"),
        ({"fn": "+", "a": [], "b": 2}, "a field is not a valid type: "),
    ],
    ids=["a_bool", "b_bool", "b_array", "a_empty_array"],
)
def test_operand_type_errors_name_the_side(expression: dict[str, Any], expected: str) -> None:
    assert validate_dsl(dsl_text(expression)) == (False, expected)


def test_nested_left_error_is_reported_before_right() -> None:
    expression = {"fn": "+", "a": {"fn": "^", "a": 1, "b": 2}, "b": True}
    assert validate_dsl(dsl_text(expression)) == (False, '"fn" field is not a valid type: ^')


def test_nested_right_error_is_reported() -> None:
    expression = {"fn": "+", "a": 1, "b": {"fn": "-", "a": "x"}}
    ok, message = validate_dsl(dsl_text(expression))
    assert ok is False
    assert message == 'Missing field in "expression": {\n "fn": "-",\n "a": "x"\n}'


def test_deeply_nested_valid_expression() -> None:
    assert validate_dsl(dsl_text(nest(50))) == (True, "")


def test_too_deep_text_is_rejected_without_raising() -> None:
    depth = 100_000
    text = '{"security": "ABC", "expression": ' + '{"fn": "+", "a": ' * depth + "1" + ', "b": 1}' * depth + "}"
    assert validate_dsl(text) == (False, "Invalid JSON.")


def test_too_deep_document_raises_schema_error() -> None:
    with pytest.raises(DslSchemaError, match="nested"):
        validate_document({"security": "ABC", "expression": nest(10_000)})


def test_validate_document_reports_location() -> None:
    with pytest.raises(DslSchemaError, match="Too many fields in root") as excinfo:
        validate_document({"security": "ABC", "expression": {"fn": "+", "a": 1, "b": 2}, "extra": 1})
    assert excinfo.value.location == "root"
    assert excinfo.value.field == "extra"


def test_diagnose_returns_none_for_valid_document() -> None:
    assert diagnose_dsl(EXAMPLES_BY_ID["divide"].dsl) is None


def test_diagnose_invalid_json() -> None:
    error = diagnose_dsl("{")
    assert error is not None
    assert error.code == DSL001
    assert error.format() == "[DSL001] root Invalid JSON."


def test_diagnose_schema_error_in_expression() -> None:
    error = diagnose_dsl(dsl_text({"fn": "+", "a": 1, "b": None}))
    assert error is not None
    assert error.code == DSL002
    assert error.path == "expression"
    assert error.field == "b"


def test_validation_is_idempotent() -> None:
    text = dsl_text({"fn": "+", "a": {"fn": "%", "a": 1, "b": 2}, "b": 3})
    assert validate_dsl(text) == validate_dsl(text)


def test_missing_field_dump_uses_javascript_numbers() -> None:
    ok, message = validate_dsl(dsl_text({"fn": "+", "a": 2.0}))
    assert ok is False
    assert message == 'Missing field in "expression": {\n "fn": "+",\n "a": 2\n}'


def test_missing_field_dump_writes_overflowing_numbers_as_null() -> None:
    text = '{"security": "ABC", "expression": {"fn": "+", "a": 1e400}}'
    ok, message = validate_dsl(text)
    assert ok is False
    assert message == 'Missing field in "expression": {\n "fn": "+",\n "a": null\n}'


def test_too_many_fields_dump_indents_nested_values() -> None:
    ok, message = validate_dsl(dsl_text({"fn": "+", "a": {"fn": "-", "a": 1, "b": 2}, "b": [1.0, 2], "c": 3}))
    assert ok is False
    assert message == (
        'Too many fields in "expression": {\n'
        ' "fn": "+",\n'
        ' "a": {\n  "fn": "-",\n  "a": 1,\n  "b": 2\n },\n'
        ' "b": [\n  1,\n  2\n ],\n'
        ' "c": 3\n}'
    )


def test_diagnose_unknown_operator_carries_hint() -> None:
    error = diagnose_dsl(dsl_text({"fn": "%", "a": 1, "b": 2}))
    assert error is not None
    assert error.field == "fn"
    assert error.hint == "expected one of: * + - /"
    assert error.format().endswith("(expected one of: * + - /)")


def test_diagnose_bad_operand_carries_hint() -> None:
    error = diagnose_dsl(dsl_text({"fn": "+", "a": 1, "b": True}))
    assert error is not None
    assert error.field == "b"
    assert error.hint == "expected a number, an attribute name or a nested expression"
