"""Exact integer helpers for Nanospan.

Python's ``//`` and ``%`` floor toward negative infinity. Duration math
needs truncating division instead, where the quotient rounds toward zero
and the remainder carries the dividend's sign.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Literal


def is_even(value: int) -> bool:
    """Return True if value is divisible by two."""
    return value % 2 == 0


def absolute(x: int) -> int:
    return -x if x < 0 else x


def compare(x: int, y: int) -> Literal[-1, 0, 1]:
    """Three-way comparison.

    Returns:
        -1 if x < y, 1 if x > y, 0 otherwise.
    """
    if x < y:
        return -1
    if x > y:
        return 1
    return 0


def trunc_divmod(x: int, y: int) -> tuple[int, int]:
    """Divide with truncation toward zero.

    Args:
        x: The dividend.
        y: The divisor (must be nonzero).

    Returns:
        Tuple of (quotient, remainder) with ``quotient * y + remainder == x``
        and the remainder either zero or of the same sign as x.

    Raises:
        ZeroDivisionError: If y is zero.

    Examples:
        >>> trunc_divmod(7, 2)
        (3, 1)
        >>> trunc_divmod(-7, 2)
        (-3, -1)
        >>> divmod(-7, 2)  # floor semantics, for contrast
        (-4, 1)
    """
    quotient = absolute(x) // absolute(y)
    if (x < 0) != (y < 0):
        quotient = -quotient
    return quotient, x - quotient * y


def long_division_digits(remainder: int, divisor: int, precision: int) -> str:
    """Expand remainder / divisor into decimal digits by long division.

    Works on exact integers only. Stops when the remainder reaches zero or
    after `precision` digits; the last digit is truncated, never rounded.

    Args:
        remainder: The remainder left after integer division.
        divisor: The nonzero divisor.
        precision: Maximum number of digits to produce.

    Returns:
        The fractional digits as a string, possibly empty.

    Examples:
        >>> long_division_digits(1, 4, 50)
        '25'
        >>> long_division_digits(-2, 3, 5)
        '66666'
    """
    digits: list[str] = []
    while remainder != 0 and len(digits) < precision:
        remainder *= 10
        digit, remainder = trunc_divmod(remainder, divisor)
        digits.append(str(absolute(digit)))
    return "".join(digits)


__all__ = [
    "is_even",
    "absolute",
    "compare",
    "trunc_divmod",
    "long_division_digits",
]
