"""Load static data tables from JSON files.

Each table is checked against its JSON Schema before rows are turned
into model objects. Any problem raises :class:`DataStoreError`.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft202012Validator

from secexpr.constants.store import (
    ATTRIBUTES_FILENAME,
    ATTRIBUTES_SCHEMA,
    FACTS_FILENAME,
    FACTS_SCHEMA,
    SECURITIES_FILENAME,
    SECURITIES_SCHEMA,
)
from secexpr.exceptions import DataStoreError
from secexpr.io import load_json_file
from secexpr.model import Attribute, Fact, Security
from secexpr.store.memory import StaticDataStore

logger = logging.getLogger(__name__)

BUNDLED_TABLES_DIR: Path = Path(__file__).parent / "tables"


def load_data_store(data_dir: Path) -> StaticDataStore:
    """Load ``securities.json``, ``attributes.json`` and ``facts.json`` from *data_dir*."""
    data_dir = data_dir.resolve()
    if not data_dir.is_dir():
        raise DataStoreError(f"Data directory does not exist: {data_dir}")

    securities_raw = _load_table(data_dir / SECURITIES_FILENAME, SECURITIES_SCHEMA)
    attributes_raw = _load_table(data_dir / ATTRIBUTES_FILENAME, ATTRIBUTES_SCHEMA)
    facts_raw = _load_table(data_dir / FACTS_FILENAME, FACTS_SCHEMA)

    store = StaticDataStore(
        securities=(
            Security(id=row["id"], symbol=row["symbol"], extra=_extra(row, {"id", "symbol"}))
            for row in securities_raw
        ),
        attributes=(
            Attribute(id=row["id"], name=row["name"], extra=_extra(row, {"id", "name"}))
            for row in attributes_raw
        ),
        facts=(
            Fact(security_id=row["security_id"], attribute_id=row["attribute_id"], value=row["value"])
            for row in facts_raw
        ),
    )
    logger.debug("Loaded data store from %s: %r", data_dir, store)
    return store


@lru_cache(maxsize=1)
def bundled_store() -> StaticDataStore:
    """Return the store built from the tables shipped with the package."""
    return load_data_store(BUNDLED_TABLES_DIR)


def _load_table(path: Path, schema: dict[str, Any]) -> list[dict[str, Any]]:
    try:
        raw = load_json_file(path)
    except OSError as exc:
        raise DataStoreError(f"Failed to read data table {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DataStoreError(f"Invalid JSON in data table {path}: {exc}") from exc

    try:
        Draft202012Validator(schema).validate(raw)
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise DataStoreError(f"Data table {path.name} is malformed at {location}: {exc.message}") from exc

    assert isinstance(raw, list)
    return raw


def _extra(row: dict[str, Any], known: set[str]) -> dict[str, Any]:
    return {key: value for key, value in row.items() if key not in known}
