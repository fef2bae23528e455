"""Shared helpers for DSL test modules."""

from __future__ import annotations

import json
from typing import Any


def dsl_text(expression: Any, security: Any = "ABC", **extra: Any) -> str:
    """Serialize a DSL document with optional extra root keys."""
    document: dict[str, Any] = {"expression": expression, "security": security}
    document.update(extra)
    return json.dumps(document)


def nest(depth: int) -> dict[str, Any]:
    """Build a left-leaning chain of additions *depth* levels deep."""
    expression: dict[str, Any] = {"fn": "+", "a": 1, "b": 1}
    for _ in range(depth - 1):
        expression = {"fn": "+", "a": expression, "b": 1}
    return expression
