"""Shared pytest fixtures."""

from mp_ulid.testing.fixtures import fixed_random_source, frozen_clock  # noqa: F401
