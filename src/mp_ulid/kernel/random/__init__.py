"""Kernel random – RandomSource port + implementations."""
from mp_ulid.kernel.random.source import RANDOM_SIZE, OsRandomSource, RandomSource

__all__ = ["RANDOM_SIZE", "OsRandomSource", "RandomSource"]
