"""Default configuration parameters for the listy formatter and logging."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatterParams:
    """Template formatting parameters."""
    placeholder: str = "%"                  # Marker replaced by the next argument


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters passed to configure_logging."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    formatter: FormatterParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        formatter=FormatterParams(),
        logging=LoggingParams(),
    )
