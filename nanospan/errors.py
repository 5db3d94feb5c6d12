"""Nanospan exception hierarchy.

Recoverable errors inherit from NanospanError. Contract violations raise
InvariantError, which is an AssertionError and not a NanospanError.
"""

from __future__ import annotations


class NanospanError(Exception):
    """Base exception for all recoverable Nanospan errors."""

    pass


class RangeError(NanospanError):
    """Duration arithmetic exceeded the representable range.

    Raised when a sum, difference, rounding, or component total would
    produce a duration whose magnitude is larger than the maximum.

    Attributes:
        operation: Name of the operation that overflowed ("sum",
            "difference", "total", "rounding").
        limit: The maximum magnitude in nanoseconds.
    """

    def __init__(self, operation: str, limit: int) -> None:
        self.operation = operation
        self.limit = limit
        super().__init__(
            f"{operation} of duration time units cannot exceed {limit} s"
        )


class InvariantError(AssertionError):
    """A programmer-contract violation.

    Raised for non-integer inputs where integers are required, explicit
    division by zero, and magnitudes beyond the maximum on the unchecked
    construction paths. Not meant to be caught by normal control flow.
    """

    pass


__all__ = [
    "NanospanError",
    "RangeError",
    "InvariantError",
]
