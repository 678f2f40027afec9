"""
Recovery strategy classifications for error handling.

Errors in this module allow the tracker to keep running with reduced
functionality.
"""

from typing import Optional


class GracefulDegradationError(Exception):
    """Mixin for errors that allow continued operation with reduced functionality."""

    def __init__(self, message: str, degraded_functionality: Optional[str] = None,
                 fallback_strategy: Optional[str] = None, **kwargs):
        super().__init__(message)
        self.degraded_functionality = degraded_functionality
        self.fallback_strategy = fallback_strategy
        self.allows_degradation = True


class StorageError(GracefulDegradationError):
    """Key-value store read or write failure.

    The in-memory state stays authoritative; durability is lost until the
    next successful write.
    """

    def __init__(self, message: str, operation: Optional[str] = None,
                 key: Optional[str] = None, **kwargs):
        kwargs.setdefault("degraded_functionality", "durability")
        kwargs.setdefault("fallback_strategy", "in_memory_state")
        super().__init__(message, **kwargs)
        self.operation = operation
        self.key = key
