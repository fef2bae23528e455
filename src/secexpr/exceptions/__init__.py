"""Shared exception hierarchy for secexpr."""

from __future__ import annotations

from .base import SecexprError
from .config import ConfigError, DataStoreError
from .dsl import (
    DslError,
    DslJsonError,
    DslRuntimeError,
    DslSchemaError,
    MissingFactError,
    UnknownAttributeError,
    UnknownSecurityError,
)
from .validation import ValidationError

__all__ = [
    "ConfigError",
    "DataStoreError",
    "DslError",
    "DslJsonError",
    "DslRuntimeError",
    "DslSchemaError",
    "MissingFactError",
    "SecexprError",
    "UnknownAttributeError",
    "UnknownSecurityError",
    "ValidationError",
]
