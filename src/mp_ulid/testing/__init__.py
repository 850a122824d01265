"""Testing support – fakes and property-based strategies.

Import fixtures in your ``conftest.py``::

    pytest_plugins = ["mp_ulid.testing.fixtures"]
"""

from mp_ulid.testing.fakes import (
    FailingClock,
    FailingRandomSource,
    FakeClock,
    FixedRandomSource,
    FrozenClock,
    SequenceClock,
    SequenceRandomSource,
    StepClock,
)
from mp_ulid.testing.generators import (
    raw_ulid_strategy,
    ulid_strategy,
    ulid_string_strategy,
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
    "raw_ulid_strategy",
    "ulid_strategy",
    "ulid_string_strategy",
]
