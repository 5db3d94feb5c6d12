"""TimeUnit enumeration for fixed-length time units.

This module provides the TimeUnit enum representing the exact units a
duration can be measured and rounded in, from nanoseconds up to 24-hour
days.
"""

from __future__ import annotations

from enum import Enum

from nanospan._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)


class TimeUnit(Enum):
    """Fixed-length time units.

    Calendar units (weeks, months, years) have no fixed length in
    nanoseconds and are not represented. DAY is always 24 hours.

    Examples:
        >>> TimeUnit.HOUR.nanoseconds
        3600000000000

        >>> TimeUnit("millisecond")
        <TimeUnit.MILLISECOND: 'millisecond'>
    """

    NANOSECOND = "nanosecond"
    MICROSECOND = "microsecond"
    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"

    @property
    def nanoseconds(self) -> int:
        """Return the exact length of one unit in nanoseconds."""
        conversions: dict[TimeUnit, int] = {
            TimeUnit.NANOSECOND: 1,
            TimeUnit.MICROSECOND: NANOS_PER_MICROSECOND,
            TimeUnit.MILLISECOND: NANOS_PER_MILLISECOND,
            TimeUnit.SECOND: NANOS_PER_SECOND,
            TimeUnit.MINUTE: NANOS_PER_MINUTE,
            TimeUnit.HOUR: NANOS_PER_HOUR,
            TimeUnit.DAY: NANOS_PER_DAY,
        }
        return conversions[self]


__all__ = ["TimeUnit"]
