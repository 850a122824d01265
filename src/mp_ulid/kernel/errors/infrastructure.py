"""Infrastructure errors — clock and randomness provider failures."""

from __future__ import annotations

from typing import Any

from mp_ulid.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a format violation."""

    default_code = "infrastructure_error"


class GenerationError(InfrastructureError):
    """A new identifier could not be produced."""

    default_code = "generation_error"


class ClockUnavailableError(GenerationError):
    """The clock provider failed or returned an unusable reading."""

    default_code = "clock_unavailable"

    def __init__(self, message: str = "Clock provider failed", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class RandomnessUnavailableError(GenerationError):
    """The randomness provider failed or did not fill all 10 bytes."""

    default_code = "randomness_unavailable"

    def __init__(self, message: str = "Randomness provider failed", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class RandomnessExhaustedError(GenerationError):
    """The 80-bit monotonic counter would wrap within one millisecond."""

    default_code = "randomness_exhausted"

    def __init__(self, timestamp_ms: int, **kwargs: Any) -> None:
        super().__init__(
            f"Random component exhausted for timestamp {timestamp_ms}",
            detail={"timestamp_ms": timestamp_ms},
            **kwargs,
        )
        self.timestamp_ms = timestamp_ms


__all__ = [
    "ClockUnavailableError",
    "GenerationError",
    "InfrastructureError",
    "RandomnessExhaustedError",
    "RandomnessUnavailableError",
]
