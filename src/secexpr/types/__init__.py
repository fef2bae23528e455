"""Shared type aliases for secexpr."""

from .common import JsonObject, JsonScalar, JsonValue
from .dsl import Literal, Nested, Operand, Reference, classify_operand

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Literal",
    "Nested",
    "Operand",
    "Reference",
    "classify_operand",
]
