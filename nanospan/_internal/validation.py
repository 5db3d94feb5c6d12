"""Validation utilities for Nanospan.

This module provides the two failure paths used by the library:
    - require(): contract checks that raise InvariantError
    - validate_duration_range(): user-facing range check that raises RangeError

This module is not part of the public API.
"""

from __future__ import annotations

import logging

from nanospan._internal.constants import MAX_DURATION_NS
from nanospan._internal.intmath import absolute
from nanospan.errors import InvariantError, RangeError

logger = logging.getLogger(__name__)


def require(condition: bool, message: str) -> None:
    """Raise InvariantError if condition is false.

    Unlike the ``assert`` statement, this check is never stripped by
    ``python -O``.

    Args:
        condition: The precondition that must hold.
        message: Description of the violated contract.

    Raises:
        InvariantError: If condition is false.

    Examples:
        >>> require(1 + 1 == 2, "arithmetic is broken")
        >>> require(False, "division by zero")
        Traceback (most recent call last):
        ...
        InvariantError: division by zero
    """
    if not condition:
        logger.debug("invariant violated: %s", message)
        raise InvariantError(message)


def is_integer(value: object) -> bool:
    """Return True for int values, excluding bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def require_integer(value: object, message: str) -> None:
    require(is_integer(value), message)


def validate_duration_range(total_ns: int, operation: str) -> None:
    """Validate that a nanosecond total is within the duration range.

    Args:
        total_ns: The candidate nanosecond count.
        operation: Name of the operation producing the value, used in the
            error message.

    Raises:
        RangeError: If ``abs(total_ns)`` exceeds MAX_DURATION_NS.
    """
    if absolute(total_ns) > MAX_DURATION_NS:
        logger.debug("%s out of range: %d ns", operation, total_ns)
        raise RangeError(operation, MAX_DURATION_NS)


__all__ = [
    "require",
    "is_integer",
    "require_integer",
    "validate_duration_range",
]
