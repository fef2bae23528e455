"""Shared pytest fixtures for secexpr tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from secexpr.dsl import DslEngine
from secexpr.model import Attribute, Fact, Security
from secexpr.store import StaticDataStore, bundled_store


@pytest.fixture(scope="session")
def store() -> StaticDataStore:
    """Return the bundled data store."""
    return bundled_store()


@pytest.fixture()
def engine(store: StaticDataStore) -> DslEngine:
    """Return an engine over the bundled tables."""
    return DslEngine(store)


@pytest.fixture()
def tiny_store() -> StaticDataStore:
    """Return a two-security store with hand-picked values."""
    return StaticDataStore(
        securities=[Security(id=10, symbol="XYZ"), Security(id=11, symbol="QRS")],
        attributes=[Attribute(id=1, name="price"), Attribute(id=2, name="eps"), Attribute(id=3, name="zero")],
        facts=[
            Fact(security_id=10, attribute_id=1, value=12),
            Fact(security_id=10, attribute_id=2, value=3),
            Fact(security_id=10, attribute_id=3, value=0),
            Fact(security_id=11, attribute_id=1, value=-4.5),
        ],
    )


def write_tables(directory: Path, **overrides: Any) -> Path:
    """Write a valid set of table files to *directory*, merged with *overrides*."""
    tables: dict[str, Any] = {
        "securities": [{"id": 1, "symbol": "AAA", "name": "Triple A"}],
        "attributes": [{"id": 1, "name": "price", "unit": "USD"}],
        "facts": [{"security_id": 1, "attribute_id": 1, "value": 42}],
    }
    tables.update(overrides)
    directory.mkdir(parents=True, exist_ok=True)
    for name, rows in tables.items():
        (directory / f"{name}.json").write_text(json.dumps(rows), encoding="utf-8")
    return directory
