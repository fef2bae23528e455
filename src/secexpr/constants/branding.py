"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SECEXPR"
CLI_DESCRIPTION: str = "\n".join(
    (
        ">_ SECEXPR",
        "     // arithmetic over security attributes",
        "",
        f"{BRAND_NAME} expression validator and evaluator",
    )
)
