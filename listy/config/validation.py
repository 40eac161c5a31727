"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import FormatterParams, LoggingParams

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
    def validate_formatter_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate formatter parameters."""
        errors = []

        if "placeholder" in params:
            value = params["placeholder"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(ValidationError(
                    field="placeholder",
                    message="Must be a single-character string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params:
                value = params[flag]
                if not isinstance(value, bool):
                    errors.append(ValidationError(
                        field=flag,
                        message="Must be a boolean",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_known_fields(section: str, params: Any, known: type) -> list[ValidationError]:
        """Flag keys that do not correspond to a parameter dataclass field."""
        if not isinstance(params, dict):
            return [ValidationError(
                field=section,
                message="Must be a mapping",
                value=params
            )]

        allowed = {f.name for f in fields(known)}
        return [
            ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=value)
            for key, value in params.items()
            if key not in allowed
        ]

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        # Field checks below assume mappings with known keys only
        for section, known in (("formatter", FormatterParams), ("logging", LoggingParams)):
            if section in config:
                errors.extend(ConfigValidator.validate_known_fields(section, config[section], known))
        if errors:
            return errors

        if "formatter" in config:
            errors.extend(ConfigValidator.validate_formatter_params(config["formatter"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
