"""Configuration loading for secexpr."""

from __future__ import annotations

from secexpr.config.loader import load_config
from secexpr.config.model import SecexprConfig

__all__ = ["SecexprConfig", "load_config"]
