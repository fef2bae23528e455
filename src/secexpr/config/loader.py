"""Config loading and normalization."""

from __future__ import annotations

from pathlib import Path

import yaml

from secexpr.config.model import SecexprConfig
from secexpr.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_LOG_LEVEL,
    VALID_LOG_LEVELS,
)
from secexpr.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> SecexprConfig:
    """Load config from ``secexpr.yaml`` under *root* or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SecexprConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

    data_dir_raw = raw.get("data_dir")
    data_dir: Path | None = None
    if data_dir_raw is not None:
        if not isinstance(data_dir_raw, str) or not data_dir_raw.strip():
            raise ConfigError("data_dir must be a non-empty string")
        data_dir = Path(data_dir_raw)
        if not data_dir.is_absolute():
            data_dir = path.parent / data_dir

    log_level = raw.get("log_level", DEFAULT_LOG_LEVEL)
    if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {log_level!r}")

    return SecexprConfig(data_dir=data_dir, log_level=log_level.upper())
