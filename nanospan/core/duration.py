"""Duration class representing an exact span of time.

This module provides the Duration class, a signed nanosecond count bounded
by MAX_DURATION_NS, along with exact arithmetic, division, and rounding.
"""

from __future__ import annotations

from typing import ClassVar

from nanospan._internal.constants import (
    BILLION,
    FDIV_PRECISION,
    MAX_DURATION_NS,
    MAX_SAFE_INTEGER,
    MAX_SUBSEC_NANOS,
    MILLION,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    ONE,
    THOUSAND,
    TWO,
)
from nanospan._internal.intmath import (
    absolute,
    compare,
    is_even,
    long_division_digits,
    trunc_divmod,
)
from nanospan._internal.validation import (
    require,
    require_integer,
    validate_duration_range,
)
from nanospan.units.rounding import (
    DEFAULT_RESOLVER,
    RoundingMode,
    RoundingResolver,
    Sign,
    to_rounding_mode,
)
from nanospan.units.timeunit import TimeUnit


class Duration:
    """An immutable, exact span of time in nanoseconds.

    The nanosecond total is the only stored quantity; ``seconds`` and
    ``subsec_nanos`` are its truncating decomposition, so both carry the
    sign of the total. The magnitude never exceeds MAX_DURATION_NS, which
    keeps ``seconds`` within the exactly representable range of a double.

    Calling ``Duration(n)`` directly is the unchecked path: an out-of-range
    ``n`` is a contract violation (InvariantError). Operations reachable
    from user input go through ``Duration.validated``, which raises
    RangeError instead.

    Attributes:
        total_ns: The signed nanosecond count.
        seconds: Whole seconds, truncated toward zero.
        subsec_nanos: Nanoseconds beyond ``seconds``, same sign as total_ns.

    Examples:
        >>> d = Duration.from_components(0, 0, 1, 500, 0, 0)
        >>> d.total_ns
        1500000000
        >>> d.seconds, d.subsec_nanos
        (1, 500000000)

        >>> Duration(-1_500_000_000).subsec_nanos
        -500000000
    """

    __slots__ = ("_total_ns", "_seconds", "_subsec")

    MAX: ClassVar[int] = MAX_DURATION_NS
    ZERO: ClassVar[Duration]

    def __init__(self, total_ns: int) -> None:
        """Create a Duration from a raw nanosecond count.

        Args:
            total_ns: Signed nanosecond count, ``abs(total_ns) <= MAX``.

        Raises:
            InvariantError: If total_ns is not an int or is out of range.
        """
        require_integer(total_ns, "big integer required")
        require(absolute(total_ns) <= MAX_DURATION_NS, "integer too big")

        seconds, subsec = trunc_divmod(total_ns, BILLION)
        require(absolute(seconds) <= MAX_SAFE_INTEGER, "seconds too big")
        require(absolute(subsec) <= MAX_SUBSEC_NANOS, "subseconds too big")

        self._total_ns = total_ns
        self._seconds = seconds
        self._subsec = subsec

    @classmethod
    def from_raw_nanos(cls, total_ns: int) -> Duration:
        """Create a Duration on the unchecked path. Same as ``Duration(n)``."""
        return cls(total_ns)

    @classmethod
    def validated(cls, total_ns: int, operation: str) -> Duration:
        """Create a Duration, raising RangeError if out of range.

        Args:
            total_ns: Signed nanosecond count.
            operation: Operation name reported in the error, such as
                "sum" or "rounding".

        Returns:
            A new Duration.

        Raises:
            RangeError: If ``abs(total_ns)`` exceeds MAX.

        Examples:
            >>> Duration.validated(Duration.MAX + 1, "sum")
            Traceback (most recent call last):
            ...
            nanospan.errors.RangeError: sum of duration time units cannot exceed ...
        """
        validate_duration_range(total_ns, operation)
        return cls(total_ns)

    @classmethod
    def from_epoch_ns_diff(cls, epoch_ns1: int, epoch_ns2: int) -> Duration:
        """Create the Duration between two epoch-nanosecond timestamps.

        The difference goes through the unchecked constructor: a result out
        of range is an InvariantError, not a RangeError.

        Args:
            epoch_ns1: The later (minuend) timestamp.
            epoch_ns2: The earlier (subtrahend) timestamp.

        Returns:
            A Duration of ``epoch_ns1 - epoch_ns2`` nanoseconds.
        """
        # No range validation here; callers hold timestamps within limits
        return cls(epoch_ns1 - epoch_ns2)

    @classmethod
    def from_components(
        cls,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> Duration:
        """Create a Duration from time components.

        Every component is independent and may have any sign or magnitude;
        only the combined total is range checked.

        Args:
            hours: Number of hours.
            minutes: Number of minutes.
            seconds: Number of seconds.
            milliseconds: Number of milliseconds.
            microseconds: Number of microseconds.
            nanoseconds: Number of nanoseconds.

        Returns:
            A new Duration.

        Raises:
            InvariantError: If any component is not an int.
            RangeError: If the combined total exceeds MAX.

        Examples:
            >>> Duration.from_components(hours=1, minutes=-30).total_ns
            1800000000000
        """
        components = (hours, minutes, seconds, milliseconds, microseconds, nanoseconds)
        for value in components:
            require_integer(value, "duration components must be integers")

        total_ns = (
            nanoseconds
            + microseconds * THOUSAND
            + milliseconds * MILLION
            + seconds * BILLION
            + minutes * NANOS_PER_MINUTE
            + hours * NANOS_PER_HOUR
        )
        return cls.validated(total_ns, "total")

    @property
    def total_ns(self) -> int:
        """Return the signed nanosecond count."""
        return self._total_ns

    @property
    def seconds(self) -> int:
        """Return whole seconds, truncated toward zero."""
        return self._seconds

    @property
    def subsec_nanos(self) -> int:
        """Return the sub-second remainder in nanoseconds.

        Its magnitude is at most 999,999,999 and it shares the sign of
        ``total_ns`` (or is zero).
        """
        return self._subsec

    def abs(self) -> Duration:
        """Return the magnitude of this duration."""
        return Duration(absolute(self._total_ns))

    def negate(self) -> Duration:
        """Return this duration with the opposite sign."""
        return Duration(-self._total_ns)

    def add(self, other: Duration) -> Duration:
        """Add another duration.

        Raises:
            RangeError: If the sum exceeds MAX.
        """
        return Duration.validated(self._total_ns + other._total_ns, "sum")

    def subtract(self, other: Duration) -> Duration:
        """Subtract another duration.

        Raises:
            RangeError: If the difference exceeds MAX.
        """
        return Duration.validated(self._total_ns - other._total_ns, "difference")

    def add_24_hour_days(self, days: int) -> Duration:
        """Add a number of days, each exactly 24 hours long.

        Args:
            days: Number of days to add (can be negative).

        Returns:
            A new Duration.

        Raises:
            InvariantError: If days is not an int.
            RangeError: If the sum exceeds MAX.

        Examples:
            >>> Duration.ZERO.add_24_hour_days(1).total_ns
            86400000000000
        """
        require_integer(days, "days must be an integer")
        return Duration.validated(self._total_ns + days * NANOS_PER_DAY, "sum")

    def add_to_epoch_ns(self, epoch_ns: int) -> int:
        """Return the epoch-nanosecond timestamp offset by this duration.

        The result is a plain int and is not range checked.
        """
        return epoch_ns + self._total_ns

    def cmp(self, other: Duration) -> int:
        """Compare with another duration.

        Returns:
            -1, 0, or 1 as this duration is shorter, equal, or longer.
        """
        return compare(self._total_ns, other._total_ns)

    def sign(self) -> int:
        """Return -1, 0, or 1 according to the sign of this duration."""
        return self.cmp(ZERO)

    def is_zero(self) -> bool:
        return self._total_ns == 0

    def divmod(self, n: int) -> tuple[int, Duration]:
        """Divide into whole units of ``n`` nanoseconds and a remainder.

        Uses truncating division: the quotient rounds toward zero and the
        remainder has the sign of this duration.

        Args:
            n: Nonzero divisor in nanoseconds.

        Returns:
            Tuple of (quotient, remainder Duration).

        Raises:
            InvariantError: If n is zero or not an int.

        Examples:
            >>> q, r = Duration(1_500_000_000).divmod(1_000_000_000)
            >>> q, r.total_ns
            (1, 500000000)

            >>> q, r = Duration(-7).divmod(2)
            >>> q, r.total_ns
            (-3, -1)
        """
        require_integer(n, "divisor must be an integer")
        require(n != 0, "division by zero")
        quotient, remainder = trunc_divmod(self._total_ns, n)
        return quotient, Duration(remainder)

    def fdiv(self, n: int) -> float:
        """Divide by ``n`` and return the ratio as a float.

        The integer part and the remainder are computed exactly, then the
        remainder is expanded by long division to at most FDIV_PRECISION
        digits (truncated) before the single conversion to float. The
        result is meant for display, never for further exact arithmetic.

        Args:
            n: Nonzero divisor.

        Returns:
            The signed ratio ``total_ns / n``.

        Raises:
            InvariantError: If n is zero or not an int.

        Examples:
            >>> Duration(1_000_000_000).fdiv(3)
            333333333.3333333
            >>> Duration(-3).fdiv(2)
            -1.5
        """
        require_integer(n, "divisor must be an integer")
        require(n != 0, "division by zero")
        quotient, remainder = trunc_divmod(self._total_ns, n)

        sign = (-1 if self._total_ns < 0 else 1) * (-1 if n < 0 else 1)
        digits = long_division_digits(remainder, n, FDIV_PRECISION)
        return sign * float(f"{absolute(quotient)}.{digits}")

    def total(self, unit: TimeUnit | str) -> float:
        """Return this duration measured in a time unit, for display.

        Examples:
            >>> Duration.from_components(minutes=90).total(TimeUnit.HOUR)
            1.5
        """
        return self.fdiv(TimeUnit(unit).nanoseconds)

    def round(
        self,
        increment: int,
        mode: RoundingMode | str,
        *,
        resolver: RoundingResolver | None = None,
    ) -> Duration:
        """Round to a multiple of ``increment`` nanoseconds.

        Args:
            increment: Positive rounding increment in nanoseconds.
            mode: The rounding mode, as a RoundingMode or its name
                (e.g. "halfEven").
            resolver: Rounding table to use. Defaults to the standard
                TemporalRoundingResolver.

        Returns:
            The rounded Duration. An increment of 1 returns self.

        Raises:
            InvariantError: If increment is not a positive int.
            ValueError: If mode is not a known rounding mode.
            RangeError: If the rounded value exceeds MAX.

        Examples:
            >>> Duration(1_500_000_000).round(1_000_000_000, "halfEven").total_ns
            2000000000
            >>> Duration(-1_500_000_000).round(1_000_000_000, "floor").total_ns
            -2000000000
        """
        require_integer(increment, "rounding increment must be an integer")
        require(increment > 0, "rounding increment must be positive")
        rounding_mode = to_rounding_mode(mode)
        if increment == ONE:
            return self
        if resolver is None:
            resolver = DEFAULT_RESOLVER

        quotient, remainder = trunc_divmod(self._total_ns, increment)
        sign: Sign = "negative" if self._total_ns < 0 else "positive"
        r1 = absolute(quotient) * increment
        r2 = r1 + increment
        cmp = compare(absolute(remainder * TWO), increment)
        unsigned_mode = resolver.unsigned_mode(rounding_mode, sign)

        if remainder == 0:
            rounded = r1
        else:
            rounded = resolver.pick(r1, r2, cmp, is_even(quotient), unsigned_mode)
        result = rounded if sign == "positive" else -rounded
        return Duration.validated(result, "rounding")

    def round_to(
        self,
        unit: TimeUnit | str,
        increment: int = 1,
        mode: RoundingMode | str = RoundingMode.HALF_EXPAND,
    ) -> Duration:
        """Round to a multiple of ``increment`` units.

        Examples:
            >>> d = Duration.from_components(minutes=1, seconds=30)
            >>> d.round_to(TimeUnit.MINUTE).total_ns == 2 * 60 * 10**9
            True
        """
        require_integer(increment, "rounding increment must be an integer")
        return self.round(increment * TimeUnit(unit).nanoseconds, mode)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Duration:
        return self.negate()

    def __abs__(self) -> Duration:
        return self.abs()

    def __divmod__(self, other: object) -> tuple[int, Duration]:
        """Support ``divmod(duration, n)`` with truncating semantics."""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.divmod(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total_ns == other._total_ns

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.cmp(other) >= 0

    def __hash__(self) -> int:
        return hash(self._total_ns)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"Duration(total_ns={self._total_ns})"

    def __str__(self) -> str:
        """Return the duration in seconds, like "1.5s" or "-0.000000001s"."""
        sign = "-" if self._total_ns < 0 else ""
        text = f"{sign}{absolute(self._seconds)}"
        if self._subsec:
            text += f".{absolute(self._subsec):09d}".rstrip("0")
        return text + "s"


ZERO = Duration(0)
Duration.ZERO = ZERO


__all__ = ["Duration", "ZERO"]
