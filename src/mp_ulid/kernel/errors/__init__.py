"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError               (domain.py)
    │   ├── DecodeError
    │   │   ├── InvalidLengthError
    │   │   └── InvalidCharacterError
    │   └── FieldRangeError
    ├── ApplicationError          (application.py)
    └── InfrastructureError       (infrastructure.py)
        └── GenerationError
            ├── ClockUnavailableError
            ├── RandomnessUnavailableError
            └── RandomnessExhaustedError
"""

from mp_ulid.kernel.errors.application import ApplicationError
from mp_ulid.kernel.errors.base import BaseError
from mp_ulid.kernel.errors.domain import (
    DecodeError,
    DomainError,
    FieldRangeError,
    InvalidCharacterError,
    InvalidLengthError,
)
from mp_ulid.kernel.errors.infrastructure import (
    ClockUnavailableError,
    GenerationError,
    InfrastructureError,
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
