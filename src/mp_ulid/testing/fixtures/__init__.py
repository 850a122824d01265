"""Testing fixtures – pytest fixtures for the provider fakes.

Enable in ``conftest.py``::

    pytest_plugins = ["mp_ulid.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from mp_ulid.kernel.time import FrozenClock
from mp_ulid.testing.fakes import FakeClock, FixedRandomSource


@pytest.fixture
def frozen_clock() -> FrozenClock:
    """A FrozenClock pinned to 2026-01-01 00:00 UTC."""
    return FakeClock()


@pytest.fixture
def fixed_random_source() -> FixedRandomSource:
    """A randomness provider that always returns bytes 1..10."""
    return FixedRandomSource()


__all__ = ["fixed_random_source", "frozen_clock"]
