"""Static lookup tables queried by the evaluator."""

from __future__ import annotations

from secexpr.store.loader import BUNDLED_TABLES_DIR, bundled_store, load_data_store
from secexpr.store.memory import StaticDataStore

__all__ = ["BUNDLED_TABLES_DIR", "StaticDataStore", "bundled_store", "load_data_store"]
