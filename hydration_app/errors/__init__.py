"""
Error classification system for the hydration tracker.

Structured exception hierarchy separating bad stored data, degraded storage
and configuration failures.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)
from .recovery import (
    GracefulDegradationError,
    StorageError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
    # Recovery Categories
    "GracefulDegradationError",
    "StorageError",
]
