"""Tests for logging configuration and helpers."""

import logging
from unittest.mock import Mock

import pytest
import structlog

from listy.logging.config import (
    configure_logging, ensure_logging_configured, get_formatter_logger, get_logger,
    log_format_call
)


class TestConfigureLogging:
    """Test structlog configuration."""

    @pytest.mark.parametrize("format_json", [True, False])
    def test_configure_sets_level(self, format_json):
        """Test that the root level follows the requested level."""
        configure_logging(level="DEBUG", format_json=format_json)
        assert logging.getLogger().level == logging.DEBUG

        configure_logging(level="warning", format_json=format_json, include_caller=True)
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level(self):
        """Test that an unknown level name is rejected."""
        with pytest.raises(AttributeError):
            configure_logging(level="LOUD")

    def test_extra_processors_run(self):
        """Test that extra processors are part of the chain."""
        seen = []

        def record(logger, method_name, event_dict):
            seen.append(event_dict["event"])
            return event_dict

        structlog.reset_defaults()
        configure_logging(level="INFO", extra_processors=[record])
        get_logger("listy.test").info("hello")

        assert seen == ["hello"]
        structlog.reset_defaults()


class TestLoggers:
    """Test logger factories."""

    def test_get_logger_applies_defaults(self):
        """Test that first use configures structlog at the default WARNING level."""
        structlog.reset_defaults()
        logging.getLogger().setLevel(logging.DEBUG)

        get_logger(__name__)

        assert structlog.is_configured()
        assert logging.getLogger().level == logging.WARNING

    def test_existing_configuration_is_kept(self):
        """Test that an explicit configuration is not overridden."""
        configure_logging(level="DEBUG")

        ensure_logging_configured()
        get_logger(__name__)

        assert logging.getLogger().level == logging.DEBUG
        configure_logging()

    def test_get_logger(self):
        """Test that a usable logger is returned."""
        logger = get_logger(__name__)
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_formatter_logger_is_bound(self):
        """Test that the formatter logger carries its subsystem."""
        logger = get_formatter_logger(__name__)
        assert structlog.get_context(logger)["subsystem"] == "formatter"


class TestLogFormatCall:
    """Test the standardized formatting event."""

    def test_log_format_call(self):
        """Test the bound fields and message."""
        logger = Mock()

        log_format_call(logger, template_length=5, placeholders=2, provided=2)

        logger.bind.assert_called_once_with(
            template_length=5, placeholders=2, provided=2, ignored=0
        )
        logger.bind.return_value.debug.assert_called_once_with("Template formatted")

    def test_log_format_call_with_context(self):
        """Test that extra context is bound separately."""
        logger = Mock()

        log_format_call(logger, 1, 0, 3, context={"caller": "test"})

        bound = logger.bind.return_value
        bound.bind.assert_called_once_with(context={"caller": "test"})
        bound.bind.return_value.debug.assert_called_once_with("Template formatted")
        assert logger.bind.call_args.kwargs["ignored"] == 3
