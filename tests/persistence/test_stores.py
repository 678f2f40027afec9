"""Tests for key-value store backends."""

import pytest
import sqlite3
from unittest.mock import patch

from hydration_app.errors import StorageError
from hydration_app.persistence import (
    MemoryKeyValueStore, SQLiteKeyValueStore, StoreStatus, create_store
)


class TestMemoryKeyValueStore:
    """Test the in-memory backend."""

    def test_absent_key(self, memory_store):
        """Unknown keys report ABSENT."""
        result = memory_store.get("missing")

        assert result.status == StoreStatus.ABSENT
        assert result.ok is True
        assert result.value is None

    def test_set_then_get(self, memory_store):
        """Stored bytes are returned."""
        assert memory_store.set("k", b"value").status == StoreStatus.SUCCESS

        result = memory_store.get("k")

        assert result.status == StoreStatus.SUCCESS
        assert result.value == b"value"

    def test_overwrite(self, memory_store):
        """Last writer wins."""
        memory_store.set("k", b"one")
        memory_store.set("k", b"two")

        assert memory_store.get("k").value == b"two"


class TestStoreFailures:
    """Test StorageError translation to results."""

    def test_read_error_becomes_failed_result(self, memory_store):
        """Errors raised by a backend read are returned, not raised."""
        error = StorageError("boom", operation="get", key="k")
        with patch.object(MemoryKeyValueStore, "_read", side_effect=error):
            result = memory_store.get("k")

        assert result.status == StoreStatus.FAILED
        assert result.ok is False
        assert result.error is error

    def test_write_error_becomes_failed_result(self, memory_store):
        """Errors raised by a backend write are returned, not raised."""
        error = StorageError("boom", operation="set", key="k")
        with patch.object(MemoryKeyValueStore, "_write", side_effect=error):
            result = memory_store.set("k", b"v")

        assert result.status == StoreStatus.FAILED
        assert result.error.degraded_functionality == "durability"


class TestSQLiteKeyValueStore:
    """Test the SQLite backend."""

    def test_creates_database_on_first_use(self, tmp_path):
        """The database file and table are created lazily."""
        db_path = tmp_path / "kv.db"
        store = SQLiteKeyValueStore(db_path)

        assert store.get("k").status == StoreStatus.ABSENT
        assert db_path.exists()

    def test_persists_across_instances(self, tmp_path):
        """Values survive reopening the database."""
        db_path = tmp_path / "kv.db"
        SQLiteKeyValueStore(db_path).set("k", b'{"a": 1}')

        result = SQLiteKeyValueStore(db_path).get("k")

        assert result.status == StoreStatus.SUCCESS
        assert result.value == b'{"a": 1}'

    def test_overwrite_keeps_single_row(self, tmp_path):
        """Writes replace the previous value in place."""
        db_path = tmp_path / "kv.db"
        store = SQLiteKeyValueStore(db_path)
        store.set("k", b"one")
        store.set("k", b"two")

        with sqlite3.connect(db_path) as conn:
            rows = conn.execute("SELECT key, value FROM kv_store").fetchall()

        assert len(rows) == 1
        assert bytes(rows[0][1]) == b"two"

    def test_unwritable_location_fails_softly(self, tmp_path):
        """A database path in a missing directory yields FAILED results."""
        store = SQLiteKeyValueStore(tmp_path / "missing" / "kv.db")

        read = store.get("k")
        write = store.set("k", b"v")

        assert read.status == StoreStatus.FAILED
        assert write.status == StoreStatus.FAILED
        assert isinstance(write.error, StorageError)
        assert write.error.operation == "set"


class TestCreateStore:
    """Test the store factory."""

    def test_memory(self):
        assert isinstance(create_store({"backend": "memory"}), MemoryKeyValueStore)

    def test_sqlite(self, tmp_path):
        store = create_store({"backend": "sqlite", "db_path": str(tmp_path / "x.db")})

        assert isinstance(store, SQLiteKeyValueStore)
        assert store.db_path == tmp_path / "x.db"

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_store({"backend": "redis"})
