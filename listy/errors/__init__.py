"""
Error classification for sequence and formatting operations.

Every operation in this package is a pure function of its inputs, so
errors are reported once to the caller and never retried or masked.
"""

from .arguments import (
    ArgumentCountMismatchError,
    InvalidArgumentError,
    ListyError,
)
from .configuration import ConfigurationError

__all__ = [
    "ListyError",
    "InvalidArgumentError",
    "ArgumentCountMismatchError",
    "ConfigurationError",
]
