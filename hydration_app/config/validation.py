"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

SUPPORTED_BACKENDS = ("sqlite", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate storage parameters."""
        errors = []

        backend = params.get("backend")
        if backend not in SUPPORTED_BACKENDS:
            errors.append(ValidationError(
                field="storage.backend",
                message=f"Must be one of {', '.join(SUPPORTED_BACKENDS)}",
                value=backend
            ))

        if backend == "sqlite":
            db_path = params.get("db_path")
            if not isinstance(db_path, str) or not db_path.strip():
                errors.append(ValidationError(
                    field="storage.db_path",
                    message="Must be a non-empty path",
                    value=db_path
                ))

        key = params.get("key")
        if not isinstance(key, str) or not key.strip():
            errors.append(ValidationError(
                field="storage.key",
                message="Must be a non-empty string",
                value=key
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        level = params.get("level")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            errors.append(ValidationError(
                field="logging.level",
                message=f"Must be one of {', '.join(LOG_LEVELS)}",
                value=level
            ))

        format_json = params.get("format_json")
        if not isinstance(format_json, bool):
            errors.append(ValidationError(
                field="logging.format_json",
                message="Must be a boolean",
                value=format_json
            ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "storage" in config:
            errors.extend(cls.validate_storage_params(config["storage"]))

        if "logging" in config:
            errors.extend(cls.validate_logging_params(config["logging"]))

        return errors
