"""Testing generators – property-based strategies."""
from mp_ulid.testing.generators.strategies import (
    raw_ulid_strategy,
    ulid_strategy,
    ulid_string_strategy,
)

__all__ = ["raw_ulid_strategy", "ulid_strategy", "ulid_string_strategy"]
