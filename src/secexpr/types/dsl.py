"""Tagged operand variants for expression evaluation.

Decoded JSON operands carry no explicit tag; :func:`classify_operand`
branches on the JSON type once and returns one of the variants below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from secexpr.types.common import JsonObject, JsonValue


@dataclass(frozen=True)
class Literal:
    """A numeric literal operand."""

    value: int | float


@dataclass(frozen=True)
class Reference:
    """An attribute name resolved against the current security."""

    name: str


@dataclass(frozen=True)
class Nested:
    """A nested expression node."""

    expression: JsonObject


Operand: TypeAlias = Literal | Reference | Nested


def classify_operand(raw: JsonValue) -> Operand:
    """Return the tagged variant for a decoded operand.

    Raises TypeError for booleans, arrays and null, which are not operands.
    """
    if isinstance(raw, dict):
        return Nested(raw)
    if isinstance(raw, str):
        return Reference(raw)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return Literal(raw)
    raise TypeError(f"unsupported operand type: {type(raw).__name__}")
