"""File names and JSON Schemas for the static data tables."""

from __future__ import annotations

from typing import Any

SECURITIES_FILENAME: str = "securities.json"
ATTRIBUTES_FILENAME: str = "attributes.json"
FACTS_FILENAME: str = "facts.json"

_ID: dict[str, Any] = {"type": "integer"}
_NUMBER: dict[str, Any] = {"type": "number"}

SECURITIES_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["id", "symbol"],
        "properties": {"id": _ID, "symbol": {"type": "string"}},
    },
}

ATTRIBUTES_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["id", "name"],
        "properties": {"id": _ID, "name": {"type": "string"}},
    },
}

FACTS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["security_id", "attribute_id", "value"],
        "properties": {
            "security_id": _ID,
            "attribute_id": _ID,
            "value": _NUMBER,
        },
    },
}
