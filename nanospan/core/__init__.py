"""Core value types.

This module provides:
    - Duration: Exact, range-bounded time span in nanoseconds
    - ZERO: The zero-length Duration
"""

from __future__ import annotations

from nanospan.core.duration import ZERO, Duration

__all__: list[str] = [
    "Duration",
    "ZERO",
]
