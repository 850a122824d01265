"""Generator – stateless and monotonic ULID generation."""
from mp_ulid.generator.default import (
    build_generator,
    default_generator,
    new,
    new_string,
    set_default_generator,
)
from mp_ulid.generator.monotonic import UlidGenerator
from mp_ulid.generator.synchronized import SynchronizedGenerator

__all__ = [
    "SynchronizedGenerator",
    "UlidGenerator",
    "build_generator",
    "default_generator",
    "new",
    "new_string",
    "set_default_generator",
]
