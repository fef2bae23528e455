"""Deterministic DSL evaluator.

Resolves the document's security, then reduces the expression tree to a
number using attribute lookups against a :class:`StaticDataStore`.
Evaluation is depth-first, left operand before right, and stops at the
first failure. Failures are returned as :class:`ExecutionResult` values.
"""

from __future__ import annotations

import logging
from typing import Any

from secexpr.constants.dsl_schema import MSG_UNEXPECTED_FAILURE
from secexpr.constants.validation import DSL199
from secexpr.dsl.operators import Number, Operator
from secexpr.dsl.schema import load_dsl
from secexpr.exceptions.dsl import (
    DslError,
    DslRuntimeError,
    MissingFactError,
    UnknownAttributeError,
    UnknownSecurityError,
)
from secexpr.model import ExecutionResult, Security
from secexpr.store import StaticDataStore, bundled_store
from secexpr.types.dsl import Literal, Nested, Reference, classify_operand

logger = logging.getLogger(__name__)


class DslEngine:
    """Evaluates DSL documents against one immutable data store."""

    def __init__(self, store: StaticDataStore | None = None) -> None:
        self._store = store if store is not None else bundled_store()

    @property
    def store(self) -> StaticDataStore:
        return self._store

    def execute(self, dsl: Any) -> ExecutionResult:
        """Evaluate an already-validated, decoded DSL document."""
        try:
            security = self._resolve_security(dsl["security"])
            value = self._evaluate_expression(dsl["expression"], security.id)
        except DslRuntimeError as exc:
            logger.debug("DSL evaluation failed: %s", exc)
            return ExecutionResult(success=False, value=0, message=str(exc), code=exc.code)
        except Exception:
            logger.warning("Unexpected failure executing DSL", exc_info=True)
            return ExecutionResult(success=False, value=0, message=MSG_UNEXPECTED_FAILURE, code=DSL199)

        logger.debug("DSL for %s evaluated to %r", security.symbol, value)
        return ExecutionResult(success=True, value=value, message="")

    def run(self, raw_text: str | bytes) -> ExecutionResult:
        """Validate DSL text, then execute it when valid."""
        try:
            dsl = load_dsl(raw_text)
        except DslError as exc:
            return ExecutionResult(success=False, value=0, message=str(exc), code=exc.code)
        return self.execute(dsl)

    def _resolve_security(self, symbol: str) -> Security:
        security = self._store.security_by_symbol(symbol)
        if security is None:
            raise UnknownSecurityError(symbol)
        return security

    def _evaluate_expression(self, expression: dict[str, Any], security_id: int) -> Number:
        a = self._evaluate_operand(expression["a"], security_id)
        b = self._evaluate_operand(expression["b"], security_id)
        return Operator(expression["fn"]).apply(a, b)

    def _evaluate_operand(self, raw: Any, security_id: int) -> Number:
        operand = classify_operand(raw)
        if isinstance(operand, Nested):
            return self._evaluate_expression(operand.expression, security_id)
        if isinstance(operand, Reference):
            return self._attribute_value(operand.name, security_id)
        assert isinstance(operand, Literal)
        return operand.value

    def _attribute_value(self, name: str, security_id: int) -> Number:
        attribute = self._store.attribute_by_name(name)
        if attribute is None:
            raise UnknownAttributeError(name)

        fact = self._store.fact_by_attribute_and_security(attribute.id, security_id)
        if fact is None:
            raise MissingFactError(name, security_id)
        return fact.value


def execute(dsl: Any, store: StaticDataStore | None = None) -> ExecutionResult:
    """Evaluate a decoded DSL document against *store* (bundled tables by default)."""
    return DslEngine(store).execute(dsl)
