"""Codec – byte-wise ULID ordering."""
from __future__ import annotations

from typing import SupportsBytes

from mp_ulid.codec.fields import check_raw


def compare(a: bytes | SupportsBytes, b: bytes | SupportsBytes) -> int:
    """Return ``-1``, ``0`` or ``1`` as *a* sorts before, equal to or after *b*.

    Unsigned lexicographic order over all 16 bytes; this is the same order
    as comparing the encoded strings.
    """
    a = check_raw(a)
    b = check_raw(b)
    return (a > b) - (a < b)


__all__ = ["compare"]
