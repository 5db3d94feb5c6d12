"""Nanospan: exact nanosecond durations for date/time arithmetic.

Nanospan provides a signed time span stored as an exact integer count of
nanoseconds, with arithmetic, truncating division, display-only ratios, and
rounding to arbitrary increments. No operation uses floating point except
``Duration.fdiv``, whose result is for display only.

Core Types:
    Duration: Immutable nanosecond time span, bounded by MAX_DURATION_NS
    ZERO: The zero-length Duration

Units:
    TimeUnit: Fixed-length units (NANOSECOND .. DAY)
    RoundingMode: Symbolic rounding modes ("halfExpand", "floor", ...)
    UnsignedRoundingMode: Sign-agnostic rounding policies
    RoundingResolver: Protocol for the rounding table

Exceptions:
    NanospanError: Base exception
    RangeError: Duration arithmetic out of range
    InvariantError: Programmer-contract violation (an AssertionError)

Example:
    >>> from nanospan import Duration
    >>> d = Duration.from_components(seconds=1, milliseconds=500)
    >>> d.round(1_000_000_000, "halfEven")
    Duration(total_ns=2000000000)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from nanospan.core.duration import ZERO, Duration

# Constants
from nanospan._internal.constants import MAX_DURATION_NS

# Units
from nanospan.units.rounding import (
    RoundingMode,
    RoundingResolver,
    TemporalRoundingResolver,
    UnsignedRoundingMode,
)
from nanospan.units.timeunit import TimeUnit

# Exceptions
from nanospan.errors import InvariantError, NanospanError, RangeError

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "ZERO",
    # Constants
    "MAX_DURATION_NS",
    # Units
    "RoundingMode",
    "RoundingResolver",
    "TemporalRoundingResolver",
    "UnsignedRoundingMode",
    "TimeUnit",
    # Exceptions
    "NanospanError",
    "RangeError",
    "InvariantError",
]
