"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "secexpr.yaml"
ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"data_dir", "log_level"})
VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})
DEFAULT_LOG_LEVEL: str = "WARNING"
