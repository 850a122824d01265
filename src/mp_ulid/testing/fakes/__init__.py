"""Testing fakes – in-memory doubles for the clock and randomness ports."""
from mp_ulid.kernel.time import FrozenClock
from mp_ulid.testing.fakes.clock import FailingClock, FakeClock, SequenceClock, StepClock
from mp_ulid.testing.fakes.random import (
    FailingRandomSource,
    FixedRandomSource,
    SequenceRandomSource,
)

__all__ = [
    "FailingClock",
    "FailingRandomSource",
    "FakeClock",
    "FixedRandomSource",
    "FrozenClock",
    "SequenceClock",
    "SequenceRandomSource",
    "StepClock",
]
