"""Pytest configuration and fixtures for Nanospan tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so nanospan can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from nanospan._internal.constants import MAX_DURATION_NS  # noqa: E402

# Nanosecond counts spread across the whole range, both signs
SAMPLE_NANOS: list[int] = [
    0,
    1,
    -1,
    999_999_999,
    -999_999_999,
    1_000_000_000,
    -1_500_000_000,
    86_400_000_000_123,
    -3_600_000_000_001,
    123_456_789_012_345_678,
    MAX_DURATION_NS,
    -MAX_DURATION_NS,
]


@pytest.fixture(params=SAMPLE_NANOS, ids=str)
def sample_ns(request: pytest.FixtureRequest) -> int:
    """A nanosecond count within the duration range."""
    return request.param
