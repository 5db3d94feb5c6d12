"""Units and rounding modes for Nanospan."""

from __future__ import annotations

from nanospan.units.rounding import (
    RoundingMode,
    RoundingResolver,
    TemporalRoundingResolver,
    UnsignedRoundingMode,
)
from nanospan.units.timeunit import TimeUnit

__all__: list[str] = [
    "RoundingMode",
    "RoundingResolver",
    "TemporalRoundingResolver",
    "UnsignedRoundingMode",
    "TimeUnit",
]
