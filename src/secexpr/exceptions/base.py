"""Root exception for secexpr."""

from __future__ import annotations


class SecexprError(Exception):
    """Base class for all secexpr errors."""
