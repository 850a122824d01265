"""Unit tests for kernel time and random ports."""

from __future__ import annotations

import time
from datetime import UTC, datetime

import pytest

from mp_ulid.kernel.random import RANDOM_SIZE, OsRandomSource, RandomSource
from mp_ulid.kernel.time import (
    Clock,
    FrozenClock,
    SystemClock,
    datetime_to_millis,
    millis_to_datetime,
)


# ---------------------------------------------------------------------------
# SystemClock
# ---------------------------------------------------------------------------


class TestSystemClock:
    def test_returns_int(self) -> None:
        assert isinstance(SystemClock().now_millis(), int)

    def test_close_to_wall_clock(self) -> None:
        expected = int(time.time() * 1000)
        assert abs(SystemClock().now_millis() - expected) < 1000

    def test_fits_48_bits(self) -> None:
        assert 0 < SystemClock().now_millis() < 2**48


# ---------------------------------------------------------------------------
# FrozenClock
# ---------------------------------------------------------------------------


class TestFrozenClock:
    def test_returns_fixed_reading(self) -> None:
        clk = FrozenClock(1234)
        assert clk.now_millis() == 1234
        assert clk.now_millis() == 1234

    def test_default_is_zero(self) -> None:
        assert FrozenClock().now_millis() == 0

    def test_advance(self) -> None:
        clk = FrozenClock(100)
        clk.advance()
        assert clk.now_millis() == 101
        clk.advance(10)
        assert clk.now_millis() == 111

    def test_advance_backwards(self) -> None:
        clk = FrozenClock(100)
        clk.advance(-5)
        assert clk.now_millis() == 95

    def test_set(self) -> None:
        clk = FrozenClock(100)
        clk.set(7)
        assert clk.now_millis() == 7

    def test_frozen_clock_is_clock(self) -> None:
        clk: Clock = FrozenClock(5)
        assert clk.now_millis() == 5


# ---------------------------------------------------------------------------
# Conversions
# ---------------------------------------------------------------------------


class TestConversions:
    def test_epoch(self) -> None:
        assert millis_to_datetime(0) == datetime(1970, 1, 1, tzinfo=UTC)

    def test_millis_preserved(self) -> None:
        dt = millis_to_datetime(1_469_922_850_259)
        assert dt == datetime(2016, 7, 30, 23, 54, 10, 259000, tzinfo=UTC)
        assert datetime_to_millis(dt) == 1_469_922_850_259

    def test_naive_datetime_treated_as_utc(self) -> None:
        assert datetime_to_millis(datetime(1970, 1, 1, 0, 0, 1)) == 1000

    def test_beyond_year_9999_overflows(self) -> None:
        with pytest.raises(OverflowError):
            millis_to_datetime(2**48 - 1)


# ---------------------------------------------------------------------------
# OsRandomSource
# ---------------------------------------------------------------------------


class TestOsRandomSource:
    def test_fills_ten_bytes(self) -> None:
        data = OsRandomSource().fill_random()
        assert isinstance(data, bytes)
        assert len(data) == RANDOM_SIZE == 10

    def test_draws_differ(self) -> None:
        src: RandomSource = OsRandomSource()
        assert len({src.fill_random() for _ in range(20)}) == 20
