"""
Numeric Helpers
===============
Fixed-width integer arithmetic and integer formatting.
"""

import numbers
from functools import singledispatch
from typing import Any

from ..config import INT64_MAX, INT64_MIN, UINT64_MAX


def saturating_sub(a: int, b: int) -> int:
    """
    Compute a - b for an unsigned 64-bit a and signed 64-bit b.

    A negative b adds |b| (wrapping modulo 2**64). A b larger than a
    clamps to 0 instead of underflowing.

    Raises:
        TypeError: If a or b is not an int
        ValueError: If a or b is outside its 64-bit range
    """
    if not isinstance(a, int) or not isinstance(b, int):
        raise TypeError(f"expected ints, got {type(a).__name__} and {type(b).__name__}")
    if not 0 <= a <= UINT64_MAX:
        raise ValueError(f"a out of uint64 range: {a}")
    if not INT64_MIN <= b <= INT64_MAX:
        raise ValueError(f"b out of int64 range: {b}")

    if b < 0:
        return (a - b) & UINT64_MAX
    if a < b:
        return 0
    return a - b


@singledispatch
def format_integer(value: Any) -> str:
    """
    Render an integer in base 10.

    Anything that is not an integer (bool included) gives "".
    """
    return ""


@format_integer.register(numbers.Integral)
def _format_integral(value: numbers.Integral) -> str:
    return str(int(value))


@format_integer.register(bool)
def _format_bool(value: bool) -> str:
    return ""
