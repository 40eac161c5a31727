"""
Argument error classifications for sequence and formatter calls.

These exceptions describe malformed input to an otherwise total
operation: bad indices, non-sequence operands, or a template that asks
for more substitution values than were supplied.
"""

from typing import Any, Dict, Optional


class ListyError(Exception):
    """Base class for all errors raised by the listy package."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidArgumentError(ListyError):
    """Malformed parameter such as a negative index or a non-sequence operand."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value


class ArgumentCountMismatchError(ListyError):
    """Template placeholders outnumber the supplied substitution values."""

    def __init__(self, message: str, placeholders: Optional[int] = None,
                 provided: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.placeholders = placeholders
        self.provided = provided
