"""Kernel – errors, provider ports and the Ulid value object."""

from mp_ulid.kernel.errors import (
    ApplicationError,
    BaseError,
    ClockUnavailableError,
    DecodeError,
    DomainError,
    FieldRangeError,
    GenerationError,
    InfrastructureError,
    InvalidCharacterError,
    InvalidLengthError,
    RandomnessExhaustedError,
    RandomnessUnavailableError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ClockUnavailableError",
    "DecodeError",
    "DomainError",
    "FieldRangeError",
    "GenerationError",
    "InfrastructureError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "RandomnessExhaustedError",
    "RandomnessUnavailableError",
]
