"""Base classes for key-value storage backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import StorageError
from ..logging.config import get_storage_logger


class StoreStatus(Enum):
    """Outcome of a storage call."""
    SUCCESS = "success"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass
class StoreResult:
    """Result of a storage read or write."""
    status: StoreStatus
    key: str
    value: Optional[bytes] = None
    error: Optional[StorageError] = None

    @property
    def ok(self) -> bool:
        return self.status != StoreStatus.FAILED


class KeyValueStore(ABC):
    """
    Durable key-value store.

    Subclasses implement ``_read`` and ``_write`` and raise StorageError on
    failure. The public ``get`` and ``set`` convert failures into results.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = get_storage_logger(f"hydration.store.{name}")

    @abstractmethod
    def _read(self, key: str) -> Optional[bytes]:
        """Return the stored bytes, or None if the key is absent."""
        pass

    @abstractmethod
    def _write(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        pass

    def get(self, key: str) -> StoreResult:
        """Read a key. Empty payloads count as absent."""
        try:
            value = self._read(key)
        except StorageError as e:
            self.logger.warning("Storage read failed", store=self.name, key=key, error=str(e))
            return StoreResult(status=StoreStatus.FAILED, key=key, error=e)

        if not value:
            return StoreResult(status=StoreStatus.ABSENT, key=key)

        return StoreResult(status=StoreStatus.SUCCESS, key=key, value=value)

    def set(self, key: str, value: bytes) -> StoreResult:
        """Write a key, overwriting unconditionally."""
        try:
            self._write(key, value)
        except StorageError as e:
            self.logger.warning("Storage write failed", store=self.name, key=key, error=str(e))
            return StoreResult(status=StoreStatus.FAILED, key=key, error=e)

        self.logger.debug("Value stored", store=self.name, key=key, size=len(value))
        return StoreResult(status=StoreStatus.SUCCESS, key=key, value=value)
