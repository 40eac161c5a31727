"""Configuration defaults, loading and validation"""

from .defaults import DefaultConfig, FormatterParams, LoggingParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "FormatterParams",
    "LoggingParams",
    "ValidationError",
    "get_default_config",
]
