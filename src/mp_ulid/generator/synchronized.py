"""Generator – SynchronizedGenerator."""
from __future__ import annotations

import threading

from mp_ulid.generator.monotonic import UlidGenerator
from mp_ulid.kernel.types import Ulid


class SynchronizedGenerator:
    """Serialise calls to one :class:`UlidGenerator` with a lock.

    The whole read-clock / compare / update sequence runs under the lock, so
    a single monotonic stream can be shared by several threads.
    """

    def __init__(self, generator: UlidGenerator | None = None) -> None:
        self._generator = generator or UlidGenerator()
        self._lock = threading.Lock()

    @property
    def monotonic(self) -> bool:
        return self._generator.monotonic

    def generate_bytes(self) -> bytes:
        with self._lock:
            return self._generator.generate_bytes()

    def generate(self) -> Ulid:
        return Ulid(self.generate_bytes())

    def generate_string(self) -> str:
        return str(self.generate())

    def reset(self) -> None:
        with self._lock:
            self._generator.reset()


__all__ = ["SynchronizedGenerator"]
