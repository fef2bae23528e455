"""Expression DSL: schema validation and evaluation."""

from __future__ import annotations

from secexpr.dsl.operators import Operator
from secexpr.dsl.runtime import DslEngine, execute
from secexpr.dsl.schema import load_dsl, parse_dsl, validate_document
from secexpr.dsl.validation import diagnose_dsl, validate_dsl

__all__ = [
    "DslEngine",
    "Operator",
    "diagnose_dsl",
    "execute",
    "load_dsl",
    "parse_dsl",
    "validate_document",
    "validate_dsl",
]
