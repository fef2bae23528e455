"""Config data model for secexpr."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from secexpr.constants.config import DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class SecexprConfig:
    """Resolved runtime config."""

    data_dir: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL
