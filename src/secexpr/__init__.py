"""secexpr: a JSON expression language over security attributes."""

from __future__ import annotations

__version__ = "0.1.0"
