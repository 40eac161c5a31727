"""Building blocks for listy values: cons, car, cdr, nil?, append and =."""

from typing import TypeVar

from listy.errors import InvalidArgumentError

from .core import reverse
from .models import EMPTY, Node, Sequence, ensure_sequence

T = TypeVar("T")


def cons(head: T, tail: Sequence[T]) -> Sequence[T]:
    """Prepend head to tail without copying tail."""
    ensure_sequence(tail, "tail")
    return Node(head, tail)


def car(seq: Sequence[T]) -> T:
    """
    First element of a non-empty sequence.

    Raises:
        InvalidArgumentError: If seq is empty
    """
    ensure_sequence(seq)
    if not isinstance(seq, Node):
        raise InvalidArgumentError("car of an empty sequence", parameter="seq", value=seq)
    return seq.head


def cdr(seq: Sequence[T]) -> Sequence[T]:
    """Everything after the first element; the empty sequence stays empty."""
    ensure_sequence(seq)
    if not isinstance(seq, Node):
        return EMPTY
    return seq.tail


def is_nil(seq: Sequence[T]) -> bool:
    ensure_sequence(seq)
    return not isinstance(seq, Node)


def append(first: Sequence[T], second: Sequence[T]) -> Sequence[T]:
    """
    Elements of first followed by elements of second.

    Only first is rebuilt; second becomes the shared tail of the result.
    """
    ensure_sequence(first, "first")
    ensure_sequence(second, "second")

    result = second
    node = reverse(first)
    while isinstance(node, Node):
        result = Node(node.head, result)
        node = node.tail
    return result


def equals(left: Sequence[T], right: Sequence[T]) -> bool:
    """Element-wise equality of two sequences."""
    ensure_sequence(left, "left")
    ensure_sequence(right, "right")
    return left == right
