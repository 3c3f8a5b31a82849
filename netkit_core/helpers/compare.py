"""
Comparison Helpers
==================
Three-way comparison and ternary selection.
"""

from typing import Callable, TypeVar

T = TypeVar("T")


def _is_nan(x) -> bool:
    # Only NaN is unequal to itself
    return x != x


def compare3(x: T, y: T) -> int:
    """
    Three-way compare x and y.

    Returns -1 if x < y, 0 if equal, +1 if x > y. A NaN is less than any
    non-NaN, two NaNs are equal, and -0.0 equals 0.0.
    """
    x_nan = _is_nan(x)
    y_nan = _is_nan(y)
    if x_nan:
        if y_nan:
            return 0
        return -1
    if y_nan:
        return +1
    if x < y:
        return -1
    if x > y:
        return +1
    return 0


def select_value(condition: bool, when_true: T, when_false: T) -> T:
    """Return when_true if condition holds, else when_false."""
    return when_true if condition else when_false


def select_computed(
    condition: bool,
    when_true: Callable[[], T],
    when_false: Callable[[], T],
) -> T:
    """Call and return only the branch chosen by condition."""
    if condition:
        return when_true()
    return when_false()
