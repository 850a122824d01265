"""Kernel value-object types — public re-export surface.

Modules:
  ulid.py — Ulid
"""

from mp_ulid.kernel.types.ulid import Ulid

__all__ = ["Ulid"]
