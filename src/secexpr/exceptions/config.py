"""Configuration-related exceptions."""

from __future__ import annotations

from secexpr.exceptions.base import SecexprError


class ConfigError(SecexprError, ValueError):
    """Raised when configuration is invalid."""


class DataStoreError(ConfigError):
    """Raised when a static data table cannot be loaded."""
