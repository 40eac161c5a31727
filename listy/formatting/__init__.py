"""Placeholder formatting built on the sequence operations"""

from .conversion import to_chars, to_text
from .formatter import TemplateFormatter, count_placeholders, format_string, format_template

__all__ = [
    "TemplateFormatter",
    "count_placeholders",
    "format_string",
    "format_template",
    "to_chars",
    "to_text",
]
