"""DSL validation and execution exceptions.

Each class carries the stable code it is reported under, so boundary
functions can turn any of them into a value without a lookup table.
"""

from __future__ import annotations

from secexpr.constants.dsl_schema import (
    EXPRESSION_LOCATION,
    MSG_ATTRIBUTE_NOT_FOUND,
    MSG_FACT_NOT_FOUND,
    MSG_INVALID_JSON,
    MSG_SECURITY_NOT_FOUND,
    ROOT_LOCATION,
)
from secexpr.constants.validation import DSL001, DSL002, DSL101, DSL102, DSL103
from secexpr.exceptions.base import SecexprError


class DslError(SecexprError):
    """Base class for DSL errors."""

    code: str = ""


class DslJsonError(DslError, ValueError):
    """Raised when DSL text is not valid JSON."""

    code = DSL001

    def __init__(self) -> None:
        super().__init__(MSG_INVALID_JSON)


class DslSchemaError(DslError, ValueError):
    """Raised when a decoded document does not match the DSL schema."""

    code = DSL002

    def __init__(
        self,
        message: str,
        *,
        location: str = EXPRESSION_LOCATION,
        field: str = "",
        hint: str = "",
    ) -> None:
        super().__init__(message)
        self.location = location
        self.field = field
        self.hint = hint

    @classmethod
    def at_root(cls, message: str, field: str = "") -> DslSchemaError:
        return cls(message, location=ROOT_LOCATION, field=field)


class DslRuntimeError(DslError):
    """Raised when a valid document cannot be evaluated."""


class UnknownSecurityError(DslRuntimeError, LookupError):
    code = DSL101

    def __init__(self, symbol: str) -> None:
        super().__init__(MSG_SECURITY_NOT_FOUND.format(symbol=symbol))
        self.symbol = symbol


class UnknownAttributeError(DslRuntimeError, LookupError):
    code = DSL102

    def __init__(self, name: str) -> None:
        super().__init__(MSG_ATTRIBUTE_NOT_FOUND.format(name=name))
        self.name = name


class MissingFactError(DslRuntimeError, LookupError):
    code = DSL103

    def __init__(self, name: str, security_id: int) -> None:
        super().__init__(MSG_FACT_NOT_FOUND.format(name=name))
        self.name = name
        self.security_id = security_id
