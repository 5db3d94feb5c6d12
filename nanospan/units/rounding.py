"""Rounding modes and the rounding resolver.

Rounding a duration happens in two steps. First the symbolic RoundingMode
and the sign of the value select an UnsignedRoundingMode. Then the unsigned
mode picks between the two candidate magnitudes that bracket the value.

The table lives behind the RoundingResolver protocol so Duration never
hard-codes tie-breaking rules.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Protocol

Sign = Literal["positive", "negative"]


class RoundingMode(Enum):
    """Symbolic rounding modes.

    Examples:
        >>> RoundingMode("halfEven")
        <RoundingMode.HALF_EVEN: 'halfEven'>
    """

    CEIL = "ceil"
    FLOOR = "floor"
    EXPAND = "expand"
    TRUNC = "trunc"
    HALF_CEIL = "halfCeil"
    HALF_FLOOR = "halfFloor"
    HALF_EXPAND = "halfExpand"
    HALF_TRUNC = "halfTrunc"
    HALF_EVEN = "halfEven"


class UnsignedRoundingMode(Enum):
    """Sign-agnostic rounding policies over magnitudes."""

    INFINITY = "infinity"
    ZERO = "zero"
    HALF_INFINITY = "half-infinity"
    HALF_ZERO = "half-zero"
    HALF_EVEN = "half-even"


class RoundingResolver(Protocol):
    """Resolves rounding modes and picks between rounding candidates."""

    def unsigned_mode(self, mode: RoundingMode, sign: Sign) -> UnsignedRoundingMode:
        ...

    def pick(
        self,
        r1: int,
        r2: int,
        cmp: int,
        even_cardinality: bool,
        unsigned_mode: UnsignedRoundingMode,
    ) -> int:
        ...


_POSITIVE: dict[RoundingMode, UnsignedRoundingMode] = {
    RoundingMode.CEIL: UnsignedRoundingMode.INFINITY,
    RoundingMode.FLOOR: UnsignedRoundingMode.ZERO,
    RoundingMode.EXPAND: UnsignedRoundingMode.INFINITY,
    RoundingMode.TRUNC: UnsignedRoundingMode.ZERO,
    RoundingMode.HALF_CEIL: UnsignedRoundingMode.HALF_INFINITY,
    RoundingMode.HALF_FLOOR: UnsignedRoundingMode.HALF_ZERO,
    RoundingMode.HALF_EXPAND: UnsignedRoundingMode.HALF_INFINITY,
    RoundingMode.HALF_TRUNC: UnsignedRoundingMode.HALF_ZERO,
    RoundingMode.HALF_EVEN: UnsignedRoundingMode.HALF_EVEN,
}

# Only the directional modes flip for negative values
_NEGATIVE: dict[RoundingMode, UnsignedRoundingMode] = {
    **_POSITIVE,
    RoundingMode.CEIL: UnsignedRoundingMode.ZERO,
    RoundingMode.FLOOR: UnsignedRoundingMode.INFINITY,
    RoundingMode.HALF_CEIL: UnsignedRoundingMode.HALF_ZERO,
    RoundingMode.HALF_FLOOR: UnsignedRoundingMode.HALF_INFINITY,
}


class TemporalRoundingResolver:
    """The rounding table used by ISO 8601 date/time arithmetic.

    Examples:
        >>> resolver = TemporalRoundingResolver()
        >>> resolver.unsigned_mode(RoundingMode.FLOOR, "negative")
        <UnsignedRoundingMode.INFINITY: 'infinity'>
        >>> resolver.pick(10, 20, 0, False, UnsignedRoundingMode.HALF_EVEN)
        20
    """

    def unsigned_mode(self, mode: RoundingMode, sign: Sign) -> UnsignedRoundingMode:
        """Select the unsigned rounding mode for a mode and sign bucket.

        Args:
            mode: The symbolic rounding mode.
            sign: "positive" or "negative" (zero counts as positive).

        Returns:
            The UnsignedRoundingMode to apply to the value's magnitude.
        """
        table = _NEGATIVE if sign == "negative" else _POSITIVE
        return table[mode]

    def pick(
        self,
        r1: int,
        r2: int,
        cmp: int,
        even_cardinality: bool,
        unsigned_mode: UnsignedRoundingMode,
    ) -> int:
        """Pick between the lower and upper candidate magnitudes.

        Args:
            r1: The candidate closer to zero.
            r2: The candidate further from zero.
            cmp: Comparison of twice the remainder against the increment:
                -1 closer to r1, 1 closer to r2, 0 exactly halfway.
            even_cardinality: True if r1 is an even multiple of the increment.
            unsigned_mode: The resolved unsigned rounding mode.

        Returns:
            Either r1 or r2.
        """
        if unsigned_mode is UnsignedRoundingMode.ZERO:
            return r1
        if unsigned_mode is UnsignedRoundingMode.INFINITY:
            return r2
        if cmp < 0:
            return r1
        if cmp > 0:
            return r2
        if unsigned_mode is UnsignedRoundingMode.HALF_ZERO:
            return r1
        if unsigned_mode is UnsignedRoundingMode.HALF_INFINITY:
            return r2
        return r1 if even_cardinality else r2


DEFAULT_RESOLVER: RoundingResolver = TemporalRoundingResolver()


def to_rounding_mode(mode: RoundingMode | str) -> RoundingMode:
    """Coerce a mode name such as "halfExpand" to a RoundingMode.

    Raises:
        ValueError: If the name is not a known rounding mode.
    """
    if isinstance(mode, RoundingMode):
        return mode
    return RoundingMode(mode)


def get_unsigned_rounding_mode(
    mode: RoundingMode | str, sign: Sign
) -> UnsignedRoundingMode:
    return DEFAULT_RESOLVER.unsigned_mode(to_rounding_mode(mode), sign)


def apply_unsigned_rounding_mode(
    r1: int,
    r2: int,
    cmp: int,
    even_cardinality: bool,
    unsigned_mode: UnsignedRoundingMode,
) -> int:
    return DEFAULT_RESOLVER.pick(r1, r2, cmp, even_cardinality, unsigned_mode)


__all__ = [
    "Sign",
    "RoundingMode",
    "UnsignedRoundingMode",
    "RoundingResolver",
    "TemporalRoundingResolver",
    "DEFAULT_RESOLVER",
    "to_rounding_mode",
    "get_unsigned_rounding_mode",
    "apply_unsigned_rounding_mode",
]
