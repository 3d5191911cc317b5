"""Integer division rounding and bit helpers."""

from __future__ import annotations


def floor_div(a: int, b: int) -> int:
    """Divide and round towards negative infinity."""
    return a // b


def ceil_div(a: int, b: int) -> int:
    """Divide and round towards positive infinity."""
    return -(-a // b)


def highest_bit(x: int) -> int:
    """Return the position of the highest set bit, or -1 for zero."""
    if x < 0:
        raise ValueError("highest_bit is defined for non-negative integers only")
    return x.bit_length() - 1