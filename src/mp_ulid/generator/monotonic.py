"""Generator – UlidGenerator.

Two modes, chosen at construction:

* **stateless**: every call packs a fresh clock reading with a fresh
  80-bit random draw.
* **monotonic**: while the clock reads at or before the last stored
  timestamp, the stored random value is incremented instead of redrawn and
  the stored timestamp is reused.  Identifiers from one generator are then
  strictly increasing in call order, even across clock regressions.

A generator instance is not thread-safe; wrap it in
:class:`~mp_ulid.generator.synchronized.SynchronizedGenerator` to share it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from mp_ulid.codec import base32, fields
from mp_ulid.kernel.errors import (
    ClockUnavailableError,
    GenerationError,
    RandomnessExhaustedError,
    RandomnessUnavailableError,
)
from mp_ulid.kernel.random import OsRandomSource, RandomSource
from mp_ulid.kernel.time import Clock, SystemClock
from mp_ulid.kernel.types import Ulid
from mp_ulid.observability.logging import get_logger

if TYPE_CHECKING:
    from mp_ulid.config.settings import GeneratorSettings

logger = get_logger(__name__)


class UlidGenerator:
    """Produce ULIDs from a clock and a randomness provider.

    Parameters
    ----------
    clock:
        Millisecond clock.  Defaults to :class:`~mp_ulid.kernel.time.SystemClock`.
    random_source:
        Supplier of 10 random bytes.  Defaults to
        :class:`~mp_ulid.kernel.random.OsRandomSource`.
    monotonic:
        Enable same-millisecond counting (default ``True``).

    Example::

        gen = UlidGenerator()
        a = gen.generate()
        b = gen.generate()
        assert a < b
    """

    def __init__(
        self,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
        *,
        monotonic: bool = True,
    ) -> None:
        self._clock = clock or SystemClock()
        self._random_source = random_source or OsRandomSource()
        self._monotonic = monotonic
        self._has_previous = False
        self._last_timestamp_ms = 0
        self._last_random = 0

    @classmethod
    def from_settings(
        cls,
        settings: "GeneratorSettings",
        *,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
    ) -> "UlidGenerator":
        """Build a generator whose mode follows *settings*."""
        if clock is None and settings.clock == "system":
            clock = SystemClock()
        return cls(clock, random_source, monotonic=settings.monotonic)

    @property
    def monotonic(self) -> bool:
        return self._monotonic

    def reset(self) -> None:
        """Forget the previous identifier; the next call draws fresh randomness."""
        self._has_previous = False
        self._last_timestamp_ms = 0
        self._last_random = 0

    # ------------------------------------------------------------------
    # Provider access
    # ------------------------------------------------------------------

    def _read_clock(self) -> int:
        try:
            millis = self._clock.now_millis()
        except GenerationError:
            raise
        except Exception as exc:
            raise ClockUnavailableError(cause=exc) from exc
        if not isinstance(millis, int) or not 0 <= millis <= fields.TIMESTAMP_MAX:
            raise ClockUnavailableError(
                f"Clock reading {millis!r} is outside the 48-bit millisecond range"
            )
        return millis

    def _draw_random(self) -> bytes:
        try:
            data = self._random_source.fill_random()
        except GenerationError:
            raise
        except Exception as exc:
            raise RandomnessUnavailableError(cause=exc) from exc
        if not isinstance(data, (bytes, bytearray)) or len(data) != fields.RANDOM_SIZE:
            size = len(data) if isinstance(data, (bytes, bytearray)) else None
            raise RandomnessUnavailableError(
                f"Randomness provider returned {size} bytes, expected {fields.RANDOM_SIZE}",
                detail={"size": size},
            )
        return bytes(data)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_bytes(self) -> bytes:
        """Return the next identifier as 16 raw bytes.

        Raises:
            ClockUnavailableError: the clock failed.
            RandomnessUnavailableError: the randomness provider failed.
            RandomnessExhaustedError: monotonic mode, same millisecond, and
                the random component is already at its 80-bit maximum.
        """
        now = self._read_clock()

        if not self._monotonic:
            return fields.pack_bytes(now, self._draw_random())

        if self._has_previous and now <= self._last_timestamp_ms:
            if self._last_random == fields.RANDOM_MAX:
                logger.warning(
                    "ulid_randomness_exhausted",
                    timestamp_ms=self._last_timestamp_ms,
                )
                raise RandomnessExhaustedError(self._last_timestamp_ms)
            if now < self._last_timestamp_ms:
                logger.debug(
                    "ulid_clock_regression",
                    clock_ms=now,
                    last_timestamp_ms=self._last_timestamp_ms,
                )
            self._last_random += 1
            return fields.pack(self._last_timestamp_ms, self._last_random)

        random_bytes = self._draw_random()
        self._has_previous = True
        self._last_timestamp_ms = now
        self._last_random = int.from_bytes(random_bytes, "big")
        return fields.pack_bytes(now, random_bytes)

    def generate(self) -> Ulid:
        """Return the next identifier as a :class:`~mp_ulid.kernel.types.Ulid`."""
        return Ulid(self.generate_bytes())

    def generate_string(self) -> str:
        """Return the next identifier in its 26-character form."""
        return base32.encode(self.generate_bytes())


__all__ = ["UlidGenerator"]
