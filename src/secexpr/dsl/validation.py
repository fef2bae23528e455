"""Value-returning validation entry points.

Wraps :mod:`secexpr.dsl.schema` so callers get results instead of
exceptions, either as ``(valid, message)`` or as a structured
:class:`ValidationError`.
"""

from __future__ import annotations

import logging

from secexpr.constants.dsl_schema import ROOT_LOCATION
from secexpr.dsl.schema import load_dsl
from secexpr.exceptions.dsl import DslJsonError, DslSchemaError
from secexpr.exceptions.validation import ValidationError

logger = logging.getLogger(__name__)


def validate_dsl(raw_text: str | bytes) -> tuple[bool, str]:
    """Validate DSL text. Returns ``(True, "")`` or ``(False, message)``."""
    error = diagnose_dsl(raw_text)
    if error is None:
        return True, ""
    return False, error.message


def diagnose_dsl(raw_text: str | bytes) -> ValidationError | None:
    """Return the first validation error in *raw_text*, or None when valid."""
    try:
        load_dsl(raw_text)
    except DslJsonError as exc:
        logger.debug("DSL rejected: invalid JSON")
        return ValidationError(code=exc.code, path=ROOT_LOCATION, field="", message=str(exc))
    except DslSchemaError as exc:
        logger.debug("DSL rejected at %s: %s", exc.location, exc)
        return ValidationError(
            code=exc.code,
            path=exc.location,
            field=exc.field,
            message=str(exc),
            hint=exc.hint,
        )
    return None
