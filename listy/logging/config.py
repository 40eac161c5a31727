"""
Centralized logging configuration for the listy package.

This module configures structlog on top of the standard library logging
backend. Core sequence functions never log; the formatter service layer
uses the loggers defined here so every formatting event has the same
structure.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from listy.config.defaults import LoggingParams


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def ensure_logging_configured() -> None:
    """Apply the package default logging settings unless structlog is already configured."""
    if not structlog.is_configured():
        defaults = LoggingParams()
        configure_logging(
            level=defaults.level,
            format_json=defaults.format_json,
            include_timestamp=defaults.include_timestamp,
            include_caller=defaults.include_caller,
        )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    ensure_logging_configured()
    return structlog.get_logger(name)


def get_formatter_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the formatter subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for formatting events
    """
    logger = get_logger(name)

    return logger.bind(subsystem="formatter")


def log_format_call(
    logger: FilteringBoundLogger,
    template_length: int,
    placeholders: int,
    provided: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed formatting call with standardized fields.

    Args:
        logger: Structlog logger instance
        template_length: Number of characters in the template
        placeholders: Number of placeholders that were filled
        provided: Number of substitution values supplied
        context: Additional context data
    """
    bound_logger = logger.bind(
        template_length=template_length,
        placeholders=placeholders,
        provided=provided,
        ignored=max(provided - placeholders, 0),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Template formatted")
