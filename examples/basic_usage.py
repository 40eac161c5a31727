#!/usr/bin/env python3
"""
Basic Usage Example - Listy sequences and formatting

This script demonstrates the basic usage of the listy package. It shows how to:
- Build persistent sequences and share their tails
- Measure, reverse and slice sequences
- Format templates with placeholder substitution
- Handle argument errors

Run: python examples/basic_usage.py
"""

from listy.errors import ArgumentCountMismatchError, InvalidArgumentError
from listy.formatting import TemplateFormatter, format_string
from listy.sequence import (
    cons, from_iterable, length, of, reverse, sublist, sublist_from, sublist_of_length, to_list, to_str
)


def show(label: str, value) -> None:
    """Print a labelled value."""
    print(f"   {label:<28} {value}")


def main():
    """Main demonstration function."""
    print("🚀 Listy - Basic Usage Demo")
    print("=" * 60)

    print("1. Building sequences...")
    letters = of("a", "b", "c", "d")
    shared = cons("z", letters.tail)
    show("letters", letters)
    show("cons('z', letters.tail)", shared)
    show("tails shared", shared.tail is letters.tail)
    print()

    print("2. Core operations...")
    show("length(letters)", length(letters))
    show("reverse(letters)", to_list(reverse(letters)))
    show("sublist_from(letters, 1)", to_list(sublist_from(letters, 1)))
    show("sublist_of_length(letters, 2)", to_list(sublist_of_length(letters, 2)))
    show("sublist(letters, 1, 2)", to_list(sublist(letters, 1, 2)))
    show("sublist(letters, 1)", to_list(sublist(letters, 1)))
    print()

    print("3. Formatting...")
    show("format_string('%-%', x, y)", format_string("%-%", "x", "y"))
    show("format_string('abc')", format_string("abc"))

    formatter = TemplateFormatter.from_config()
    template = from_iterable("% items, % left, done=%")
    result = formatter.format(template, [4, 2.0, False])
    show("TemplateFormatter.format", to_str(result))
    print()

    print("4. Error handling...")
    try:
        sublist_from(letters, -1)
    except InvalidArgumentError as e:
        show("InvalidArgumentError", f"{e} (parameter={e.parameter})")

    try:
        format_string("% and %", "only one")
    except ArgumentCountMismatchError as e:
        show("ArgumentCountMismatchError", f"{e.placeholders} placeholders, {e.provided} given")

    print()
    print("✅ Demo complete")


if __name__ == "__main__":
    main()
