"""Internal constants for Nanospan.

These constants define the limits and scale factors used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

ZERO: int = 0
ONE: int = 1
TWO: int = 2
TEN: int = 10

# Scale factors
THOUSAND: int = 1_000
MILLION: int = 1_000_000
BILLION: int = 1_000_000_000

# Time unit conversions
NANOS_PER_MICROSECOND: int = THOUSAND
NANOS_PER_MILLISECOND: int = MILLION
NANOS_PER_SECOND: int = BILLION
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 3600 * NANOS_PER_SECOND
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

# Largest integer a double represents exactly (2**53 - 1)
MAX_SAFE_INTEGER: int = 9_007_199_254_740_991

# MAX_DURATION_NS // NANOS_PER_SECOND == MAX_SAFE_INTEGER
MAX_DURATION_NS: int = 9_007_199_254_740_991_999_999_999

MAX_SUBSEC_NANOS: int = 999_999_999

# Fractional digits produced by Duration.fdiv
FDIV_PRECISION: int = 50


__all__ = [
    "ZERO",
    "ONE",
    "TWO",
    "TEN",
    "THOUSAND",
    "MILLION",
    "BILLION",
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "MAX_SAFE_INTEGER",
    "MAX_DURATION_NS",
    "MAX_SUBSEC_NANOS",
    "FDIV_PRECISION",
]
