"""
Key-value persistence for the hydration state.

Backends never raise to callers: every read and write returns a StoreResult.
"""

from typing import Any

from .base import KeyValueStore, StoreResult, StoreStatus
from .memory_store import MemoryKeyValueStore
from .sqlite_store import SQLiteKeyValueStore


def create_store(storage_config: dict[str, Any]) -> KeyValueStore:
    """
    Build a store from the ``storage`` configuration section.

    Args:
        storage_config: Mapping with ``backend`` and backend-specific keys

    Returns:
        Configured key-value store
    """
    backend = storage_config.get("backend", "sqlite")

    if backend == "memory":
        return MemoryKeyValueStore()
    if backend == "sqlite":
        return SQLiteKeyValueStore(storage_config.get("db_path", "hydration.db"))

    raise ValueError(f"Unsupported storage backend: {backend}")


__all__ = [
    "KeyValueStore",
    "StoreResult",
    "StoreStatus",
    "MemoryKeyValueStore",
    "SQLiteKeyValueStore",
    "create_store",
]
