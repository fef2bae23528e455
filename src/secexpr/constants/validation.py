"""Stable error codes for DSL validation and execution."""

from __future__ import annotations

DSL001: str = "DSL001"  # input is not valid JSON
DSL002: str = "DSL002"  # schema violation at root or inside an expression
DSL101: str = "DSL101"  # security symbol not found
DSL102: str = "DSL102"  # attribute name not found
DSL103: str = "DSL103"  # no fact for attribute and security
DSL199: str = "DSL199"  # unexpected failure while executing
