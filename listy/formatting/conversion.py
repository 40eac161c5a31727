"""
Character-sequence conversion for substituted values.

Lists and sequences render as the concatenation of their elements,
booleans as lowercase words and integral floats without a fractional
part, so ``3.0`` renders as ``3``. Other finite floats use positional
notation, never an exponent: ``1e-07`` renders as ``0.0000001``.
"""

import math
from decimal import Decimal
from typing import Any

from listy.sequence import Sequence, from_iterable


def to_text(value: Any) -> str:
    """
    Render a value as a Python string.

    Args:
        value: Any value supplied as a substitution argument

    Returns:
        Text form of the value
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return repr(value)
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    if isinstance(value, (Sequence, list, tuple)):
        return "".join(to_text(item) for item in value)
    return str(value)


def to_chars(value: Any) -> Sequence[str]:
    """Render a value as a character sequence."""
    return from_iterable(to_text(value))
