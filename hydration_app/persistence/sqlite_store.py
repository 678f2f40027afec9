"""SQLite-backed key-value store."""

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from ..errors import StorageError
from .base import KeyValueStore


class SQLiteKeyValueStore(KeyValueStore):
    """Single-table SQLite persistence layer."""

    def __init__(self, db_path: Union[str, Path] = "hydration.db", name: str = "sqlite"):
        super().__init__(name)
        self.db_path = Path(db_path)
        self._schema_ready = False

    def _init_database(self, conn: sqlite3.Connection) -> None:
        """Initialize database schema."""
        conn.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value BLOB NOT NULL,
                updated_at TEXT NOT NULL
            )
        """)
        conn.commit()
        self._schema_ready = True

    @contextmanager
    def _get_connection(self, operation: str, key: str):
        """Get database connection, translating sqlite errors to StorageError."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
            if not self._schema_ready:
                self._init_database(conn)
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            raise StorageError(
                f"Database error: {str(e)}",
                operation=operation,
                key=key
            ) from e
        finally:
            if conn:
                conn.close()

    def _read(self, key: str) -> Optional[bytes]:
        with self._get_connection("get", key) as conn:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()

        if row is None:
            return None

        value = row[0]
        return value.encode("utf-8") if isinstance(value, str) else bytes(value)

    def _write(self, key: str, value: bytes) -> None:
        now = datetime.now(timezone.utc).isoformat()

        with self._get_connection("set", key) as conn:
            conn.execute("""
                INSERT OR REPLACE INTO kv_store (key, value, updated_at)
                VALUES (?, ?, ?)
            """, (key, sqlite3.Binary(value), now))
            conn.commit()
