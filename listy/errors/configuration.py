"""Configuration error raised when loaded settings fail validation."""

from typing import Optional

from .arguments import ListyError


class ConfigurationError(ListyError):
    """Merged configuration did not pass validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
