"""Strict schema validation for DSL documents.

Parses DSL text and checks the decoded document. Raises on the first
violation, depth-first and left operand before right; no
skip-and-continue.
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any

from secexpr.constants.dsl_schema import (
    EXPRESSION_KEYS,
    HINT_OPERAND,
    HINT_OPERATOR,
    MSG_EXPRESSION_INVALID,
    MSG_EXPRESSION_MISSING_FIELD,
    MSG_EXPRESSION_TOO_MANY_FIELDS,
    MSG_INVALID_OPERAND,
    MSG_INVALID_OPERATOR,
    MSG_ROOT_TOO_MANY_FIELDS,
    MSG_SECURITY_INVALID,
    MSG_TOO_DEEP,
    ROOT_KEYS,
    VALID_OPERATORS,
)
from secexpr.exceptions.dsl import DslJsonError, DslSchemaError
from secexpr.types.common import JsonObject

_NON_FINITE: frozenset[str] = frozenset({"NaN", "Infinity", "-Infinity"})


def load_dsl(raw_text: str | bytes) -> JsonObject:
    """Parse and validate DSL text, returning the decoded document."""
    data = parse_dsl(raw_text)
    validate_document(data)
    return data


def parse_dsl(raw_text: str | bytes) -> Any:
    """Decode DSL text as strict JSON. Raises DslJsonError on failure."""
    try:
        return json.loads(raw_text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as exc:
        raise DslJsonError() from exc


def validate_document(data: Any) -> None:
    """Validate a decoded DSL document. Raises DslSchemaError on any violation.

    A ``null`` document raises DslJsonError, matching a browser failing to
    read a field of ``null``.
    """
    if data is None:
        raise DslJsonError()

    if not isinstance(data, dict) or not isinstance(data.get("security"), str) or not data["security"]:
        raise DslSchemaError.at_root(MSG_SECURITY_INVALID, field="security")

    if not isinstance(data.get("expression"), dict):
        raise DslSchemaError.at_root(MSG_EXPRESSION_INVALID, field="expression")

    if len(data) != len(ROOT_KEYS):
        extra = sorted(set(data) - ROOT_KEYS)
        raise DslSchemaError.at_root(MSG_ROOT_TOO_MANY_FIELDS, field=extra[0] if extra else "")

    try:
        validate_expression(data["expression"])
    except RecursionError:
        raise DslSchemaError(MSG_TOO_DEEP, field="expression") from None


def validate_expression(expression: dict[str, Any]) -> None:
    """Validate one expression node and, recursively, its nested operands."""
    missing = [key for key in ("fn", "a", "b") if not _is_truthy(expression.get(key))]
    if missing:
        raise DslSchemaError(MSG_EXPRESSION_MISSING_FIELD + _dump(expression), field=missing[0])

    if len(expression) != len(EXPRESSION_KEYS):
        extra = sorted(set(expression) - EXPRESSION_KEYS)
        raise DslSchemaError(MSG_EXPRESSION_TOO_MANY_FIELDS + _dump(expression), field=extra[0] if extra else "")

    fn = expression["fn"]
    if not isinstance(fn, str) or fn not in VALID_OPERATORS:
        raise DslSchemaError(MSG_INVALID_OPERATOR + _js_text(fn), field="fn", hint=HINT_OPERATOR)

    _validate_side(expression["a"], "a")
    _validate_side(expression["b"], "b")


def _validate_side(value: Any, side: str) -> None:
    if isinstance(value, dict):
        validate_expression(value)
        return
    if isinstance(value, str):
        return
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return
    raise DslSchemaError(
        MSG_INVALID_OPERAND.format(side=side, value=_js_text(value)),
        field=side,
        hint=HINT_OPERAND,
    )


def _is_truthy(value: Any) -> bool:
    """JavaScript truthiness: ``0``, ``""``, ``false`` and ``null`` are falsy; containers never are."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    return True


def _js_text(value: Any) -> str:
    """Render a decoded JSON value the way string interpolation does in a browser."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _js_number(value)
    if isinstance(value, list):
        return ",".join("" if item is None else _js_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def _js_number(value: int | float) -> str:
    """Shortest round-trip form, in exponent notation below 1e-6 and from 1e21 up."""
    if isinstance(value, int) and abs(value) < 10**21:
        return str(value)
    try:
        value = float(value)
    except OverflowError:
        value = math.inf if value > 0 else -math.inf
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k
    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        mantissa = digits[0] if k == 1 else f"{digits[0]}.{digits[1:]}"
        power = n - 1
        body = f"{mantissa}e+{power}" if power > 0 else f"{mantissa}e{power}"
    return f"-{body}" if sign else body


def _dump(value: Any, depth: int = 0) -> str:
    """Serialize like ``JSON.stringify(value, undefined, 1)``."""
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = [
            f"{json.dumps(key, ensure_ascii=False)}: {_dump(item, depth + 1)}" for key, item in value.items()
        ]
        return _dump_block("{", "}", items, depth)
    if isinstance(value, list):
        if not value:
            return "[]"
        return _dump_block("[", "]", [_dump(item, depth + 1) for item in value], depth)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        text = _js_number(value)
        return "null" if text in _NON_FINITE else text
    return json.dumps(value, ensure_ascii=False)


def _dump_block(opener: str, closer: str, items: list[str], depth: int) -> str:
    inner = " " * (depth + 1)
    outer = " " * depth
    return f"{opener}\n{inner}" + f",\n{inner}".join(items) + f"\n{outer}{closer}"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")
