"""Kernel time – Clock port + implementations."""
from mp_ulid.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    datetime_to_millis,
    millis_to_datetime,
)

__all__ = ["Clock", "FrozenClock", "SystemClock", "datetime_to_millis", "millis_to_datetime"]
