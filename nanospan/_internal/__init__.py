"""Internal utilities for Nanospan.

This module contains private implementation details:
    - Constants and scale factors
    - Truncating integer arithmetic
    - Contract and range validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from nanospan._internal.intmath import absolute, compare, is_even, trunc_divmod
from nanospan._internal.validation import (
    require,
    require_integer,
    validate_duration_range,
)

__all__: list[str] = [
    "absolute",
    "compare",
    "is_even",
    "trunc_divmod",
    "require",
    "require_integer",
    "validate_duration_range",
]
