"""
Logging configuration and utilities for the listy package.
"""
from .config import configure_logging, get_formatter_logger, get_logger, log_format_call

__all__ = ["configure_logging", "get_formatter_logger", "get_logger", "log_format_call"]
