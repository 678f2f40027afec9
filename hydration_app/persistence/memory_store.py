"""In-memory key-value store."""

from typing import Optional

from .base import KeyValueStore


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and sessions that need no durability."""

    def __init__(self, name: str = "memory"):
        super().__init__(name)
        self._data: dict[str, bytes] = {}

    def _read(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def _write(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)
