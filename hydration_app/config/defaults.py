"""Default configuration parameters for the hydration tracker."""

from dataclasses import dataclass

from ..state.models import STORAGE_KEY


@dataclass(frozen=True)
class StorageParams:
    """Key-value store parameters."""
    backend: str = "sqlite"                          # sqlite | memory
    db_path: str = "hydration.db"                    # SQLite file, relative to cwd
    key: str = STORAGE_KEY                           # Key holding the serialized state


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    storage: StorageParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        storage=StorageParams(),
        logging=LoggingParams(),
    )
