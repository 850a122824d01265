"""Kernel random – RandomSource protocol + OS-backed implementation."""
from __future__ import annotations

import secrets
from typing import Protocol

RANDOM_SIZE = 10


class RandomSource(Protocol):
    """Port: supplier of the 80-bit random component.

    ``fill_random`` must return exactly 10 bytes or raise.  A shorter or
    longer result is treated as a failed fill by the generator.
    """

    def fill_random(self) -> bytes: ...


class OsRandomSource:
    """Production source reading from the OS CSPRNG."""

    def fill_random(self) -> bytes:
        return secrets.token_bytes(RANDOM_SIZE)


__all__ = ["RANDOM_SIZE", "OsRandomSource", "RandomSource"]
