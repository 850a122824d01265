"""Kernel time – millisecond Clock protocol + implementations."""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class Clock(Protocol):
    """Port: source of the current Unix time in milliseconds.

    Implementations signal failure by raising; the generator wraps whatever
    they raise into :class:`~mp_ulid.kernel.errors.ClockUnavailableError`.
    """

    def now_millis(self) -> int: ...


class SystemClock:
    """Production clock backed by the wall clock (``CLOCK_REALTIME``)."""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000


class FrozenClock:
    """Test clock pinned to a fixed millisecond reading."""

    def __init__(self, millis: int = 0) -> None:
        self._millis = millis

    def now_millis(self) -> int:
        return self._millis

    def advance(self, millis: int = 1) -> None:
        """Move the frozen reading forward (or backward, if negative)."""
        self._millis += millis

    def set(self, millis: int) -> None:
        self._millis = millis


def millis_to_datetime(millis: int) -> datetime:
    """Convert Unix epoch milliseconds to an aware UTC ``datetime``.

    Readings past year 9999 raise ``OverflowError``.
    """
    return _EPOCH + timedelta(milliseconds=millis)


def datetime_to_millis(value: datetime) -> int:
    """Convert an aware ``datetime`` to Unix epoch milliseconds."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    delta = value - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


__all__ = ["Clock", "FrozenClock", "SystemClock", "datetime_to_millis", "millis_to_datetime"]
