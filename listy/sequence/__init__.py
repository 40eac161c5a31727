"""Persistent sequence model, primitives and core operations"""

from .core import length, reverse, sublist, sublist_from, sublist_of_length
from .models import EMPTY, Empty, Node, Sequence, from_iterable, of, to_list, to_str
from .primitives import append, car, cdr, cons, equals, is_nil

__all__ = [
    "EMPTY",
    "Empty",
    "Node",
    "Sequence",
    "from_iterable",
    "of",
    "to_list",
    "to_str",
    "cons",
    "car",
    "cdr",
    "is_nil",
    "append",
    "equals",
    "length",
    "reverse",
    "sublist",
    "sublist_from",
    "sublist_of_length",
]
