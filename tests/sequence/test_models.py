"""Tests for the persistent sequence data model."""

import dataclasses

import pytest

from listy.errors import InvalidArgumentError
from listy.sequence.models import (
    EMPTY, Empty, Node, Sequence, from_iterable, of, to_list, to_str
)


class TestConstruction:
    """Test building sequences."""

    def test_empty_is_falsy(self):
        """Test that the empty marker is falsy and has no elements."""
        assert not EMPTY
        assert list(EMPTY) == []
        assert isinstance(EMPTY, Sequence)

    def test_node_holds_head_and_tail(self):
        """Test that a node exposes its head and tail."""
        node = Node("a", EMPTY)
        assert node.head == "a"
        assert node.tail is EMPTY
        assert node

    def test_node_rejects_non_sequence_tail(self):
        """Test that a tail must itself be a sequence."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            Node("a", ["b"])
        assert exc_info.value.parameter == "tail"

    def test_from_iterable_preserves_order(self):
        """Test conversion from a Python iterable."""
        seq = from_iterable(["a", "b", "c"])
        assert seq.head == "a"
        assert seq.tail.head == "b"
        assert seq.tail.tail.head == "c"
        assert seq.tail.tail.tail == EMPTY

    def test_from_iterable_accepts_strings_and_generators(self):
        """Test that strings split into characters and generators are consumed."""
        assert to_list(from_iterable("xyz")) == ["x", "y", "z"]
        assert to_list(from_iterable(i * 2 for i in range(3))) == [0, 2, 4]

    def test_from_empty_iterable(self):
        """Test that an empty iterable yields the shared empty marker."""
        assert from_iterable([]) is EMPTY

    def test_of_is_variadic(self):
        """Test that of() mirrors from_iterable()."""
        assert of(1, 2, 3) == from_iterable([1, 2, 3])
        assert of() is EMPTY


class TestImmutability:
    """Test that sequences cannot be modified in place."""

    def test_node_is_frozen(self):
        """Test that node fields cannot be reassigned."""
        node = of("a", "b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.head = "z"
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.tail = EMPTY

    def test_shared_tail(self):
        """Test that two sequences may share one tail."""
        tail = of("b", "c")
        first = Node("a", tail)
        second = Node("z", tail)
        assert first.tail is second.tail
        assert to_list(first) == ["a", "b", "c"]
        assert to_list(second) == ["z", "b", "c"]


class TestProtocol:
    """Test Python protocol support."""

    def test_iteration(self, abcd):
        """Test iterating over a sequence."""
        assert list(abcd) == ["a", "b", "c", "d"]

    def test_len(self, abcd):
        """Test that len() counts elements."""
        assert len(abcd) == 4
        assert len(EMPTY) == 0

    def test_equality(self):
        """Test element-wise equality."""
        assert of(1, 2, 3) == of(1, 2, 3)
        assert of(1, 2, 3) != of(1, 2)
        assert of(1, 2) != of(1, 2, 3)
        assert of(1, 2, 3) != of(1, 2, 4)
        assert Empty() == EMPTY

    def test_not_equal_to_python_list(self):
        """Test that a sequence never equals a plain list."""
        assert of("a") != ["a"]
        assert EMPTY != []

    def test_equality_with_none_elements(self):
        """Test that None elements do not confuse length comparison."""
        assert of(None) != EMPTY
        assert of(None, None) == of(None, None)

    def test_hash_consistent_with_equality(self):
        """Test hashing equal sequences."""
        assert hash(of("a", "b")) == hash(of("a", "b"))
        assert len({of("a", "b"), of("a", "b"), of("b")}) == 2

    def test_repr(self):
        """Test the readable representation."""
        assert repr(of("a", "b")) == "Sequence(['a', 'b'])"
        assert repr(EMPTY) == "Sequence([])"


class TestConversion:
    """Test conversion back to Python values."""

    def test_to_list(self, abcd):
        """Test collecting elements into a list."""
        assert to_list(abcd) == ["a", "b", "c", "d"]

    def test_to_list_rejects_non_sequence(self):
        """Test that to_list requires a sequence."""
        with pytest.raises(InvalidArgumentError):
            to_list(["a"])

    def test_to_str(self, abcd):
        """Test joining a character sequence."""
        assert to_str(abcd) == "abcd"
        assert to_str(EMPTY) == ""

    def test_to_str_rejects_non_string_elements(self):
        """Test that every element must be a string."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_str(of("a", 1))
        assert exc_info.value.value == 1
