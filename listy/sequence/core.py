"""
Length, reverse and sub-sequence extraction over persistent sequences.

All operations are pure and walk the nodes with explicit loops. Results
share structure with their inputs wherever a suffix can be reused as is:
``sublist_from`` hands back an existing tail rather than a copy.
"""

from typing import Any, Optional, TypeVar

from listy.errors import InvalidArgumentError

from .models import EMPTY, Node, Sequence, ensure_sequence

T = TypeVar("T")


def _check_count(value: Any, parameter: str) -> None:
    """Validate a non-negative integer index or count."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"'{parameter}' must be an integer, got {type(value).__name__}",
            parameter=parameter,
            value=value,
        )
    if value < 0:
        raise InvalidArgumentError(
            f"'{parameter}' must be non-negative, got {value}",
            parameter=parameter,
            value=value,
        )


def length(seq: Sequence[T]) -> int:
    """
    Count the elements of a sequence.

    Args:
        seq: Sequence to measure

    Returns:
        Number of nodes before the empty marker
    """
    ensure_sequence(seq)
    count = 0
    node = seq
    while isinstance(node, Node):
        count += 1
        node = node.tail
    return count


def reverse(seq: Sequence[T]) -> Sequence[T]:
    """
    Build a new sequence with the elements in opposite order.

    Args:
        seq: Sequence to reverse

    Returns:
        Reversed sequence; EMPTY for an empty input
    """
    ensure_sequence(seq)
    result: Sequence[T] = EMPTY
    node = seq
    while isinstance(node, Node):
        result = Node(node.head, result)
        node = node.tail
    return result


def sublist_from(seq: Sequence[T], start: int) -> Sequence[T]:
    """
    Drop the first ``start`` elements and return the remaining suffix.

    The suffix is the original tail object. ``start == 0`` returns ``seq``
    itself and ``start >= length(seq)`` returns the empty marker.

    Args:
        seq: Source sequence
        start: Number of leading elements to drop

    Returns:
        Remaining suffix of seq

    Raises:
        InvalidArgumentError: If start is negative or not an integer
    """
    ensure_sequence(seq)
    _check_count(start, "start")

    node = seq
    remaining = start
    while remaining > 0 and isinstance(node, Node):
        node = node.tail
        remaining -= 1
    return node


def sublist_of_length(seq: Sequence[T], count: int) -> Sequence[T]:
    """
    Keep the last ``count`` elements of a sequence, in original order.

    Sequences shorter than ``count`` are returned unchanged. Otherwise the
    sequence is reversed, ``length(seq) - count`` elements are dropped from
    the front with ``sublist_from``, and the result is reversed back.

    Args:
        seq: Source sequence
        count: Size of the trailing window

    Returns:
        Trailing window of seq

    Raises:
        InvalidArgumentError: If count is negative or not an integer
    """
    ensure_sequence(seq)
    _check_count(count, "count")

    total = length(seq)
    if total < count:
        return seq
    return reverse(sublist_from(reverse(seq), total - count))


def sublist(seq: Sequence[T], start: int, count: Optional[int] = None) -> Sequence[T]:
    """
    Select a contiguous range of a sequence.

    With ``count`` omitted this is everything from ``start`` to the end.
    With ``count`` given, it is the last ``count`` elements of that
    remainder, so ``count=0`` yields EMPTY while ``count=None`` does not.

    Args:
        seq: Source sequence
        start: Number of leading elements to drop
        count: Optional size of the trailing window of the remainder

    Returns:
        Selected sub-sequence
    """
    remainder = sublist_from(seq, start)
    if count is None:
        return remainder
    return sublist_of_length(remainder, count)
