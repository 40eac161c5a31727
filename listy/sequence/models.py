"""
Persistent singly-linked sequence model.

This module defines the immutable data structure every other operation
works on: a sequence is either the empty marker or a node holding a head
element and a reference to the remaining sequence. Nodes are frozen, so
tails can be shared between any number of sequences and cycles cannot be
built.
"""

from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Generic, Iterable, Iterator, TypeVar

from listy.errors import InvalidArgumentError

T = TypeVar("T")

_MISSING = object()


class Sequence(Generic[T]):
    """Common protocol for both sequence variants.

    Iteration, equality and hashing walk the nodes with a loop so that
    arbitrarily long sequences never hit the interpreter recursion limit.
    """

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        node = self
        while isinstance(node, Node):
            yield node.head
            node = node.tail

    def __len__(self) -> int:
        from .core import length
        return length(self)

    def __bool__(self) -> bool:
        return isinstance(self, Node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence):
            return NotImplemented
        if self is other:
            return True
        for left, right in zip_longest(self, other, fillvalue=_MISSING):
            if left is _MISSING or right is _MISSING or left != right:
                return False
        return True

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Sequence({list(self)!r})"


@dataclass(frozen=True, eq=False, repr=False)
class Empty(Sequence[Any]):
    """The empty sequence marker terminating every chain of nodes."""


@dataclass(frozen=True, eq=False, repr=False)
class Node(Sequence[T]):
    """Head element plus the (possibly shared) remaining sequence."""
    head: T
    tail: Sequence[T]

    def __post_init__(self):
        """Reject tails that are not sequences."""
        if not isinstance(self.tail, Sequence):
            raise InvalidArgumentError(
                f"Sequence tail must be a Sequence, got {type(self.tail).__name__}",
                parameter="tail",
                value=self.tail,
            )


EMPTY: Sequence[Any] = Empty()


def from_iterable(items: Iterable[T]) -> Sequence[T]:
    """
    Build a sequence holding the given items in order.

    Args:
        items: Any finite iterable, including a Python string

    Returns:
        New sequence, or EMPTY when items is empty
    """
    result: Sequence[T] = EMPTY
    for item in reversed(list(items)):
        result = Node(item, result)
    return result


def of(*items: T) -> Sequence[T]:
    """Build a sequence from positional arguments."""
    return from_iterable(items)


def to_list(seq: Sequence[T]) -> list[T]:
    """Collect the elements of a sequence into a Python list."""
    ensure_sequence(seq)
    return list(seq)


def to_str(seq: Sequence[str]) -> str:
    """
    Join a character sequence into a Python string.

    Raises:
        InvalidArgumentError: If an element is not a string
    """
    ensure_sequence(seq)
    parts = []
    for element in seq:
        if not isinstance(element, str):
            raise InvalidArgumentError(
                f"Character sequence contains non-string element {element!r}",
                parameter="seq",
                value=element,
            )
        parts.append(element)
    return "".join(parts)


def ensure_sequence(value: Any, parameter: str = "seq") -> None:
    """Raise InvalidArgumentError unless value is a Sequence."""
    if not isinstance(value, Sequence):
        raise InvalidArgumentError(
            f"Expected a Sequence for '{parameter}', got {type(value).__name__}",
            parameter=parameter,
            value=value,
        )
