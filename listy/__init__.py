"""
Listy - immutable sequence operations and placeholder formatting

A small library of generic operations over persistent singly-linked
sequences (length, reverse, positional sub-sequence extraction) and a
placeholder-substitution string formatter built on top of them.
"""

from .formatting import TemplateFormatter, format_string, format_template
from .sequence import (
    EMPTY,
    Empty,
    Node,
    Sequence,
    from_iterable,
    length,
    of,
    reverse,
    sublist,
    sublist_from,
    sublist_of_length,
    to_list,
    to_str,
)

__version__ = "0.1.0"
__author__ = "Listy Team"

__all__ = [
    "EMPTY",
    "Empty",
    "Node",
    "Sequence",
    "TemplateFormatter",
    "format_string",
    "format_template",
    "from_iterable",
    "length",
    "of",
    "reverse",
    "sublist",
    "sublist_from",
    "sublist_of_length",
    "to_list",
    "to_str",
]
