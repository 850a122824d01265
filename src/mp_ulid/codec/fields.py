"""Codec – Field Codec.

Packs the 48-bit millisecond timestamp and the 80-bit random component into
the 16-byte raw layout and back.  Both fields are big-endian, timestamp
first, so byte order of the raw value equals numeric order of
``(timestamp, random)``.

Layout::

    byte  0 ........ 5 | 6 .................... 15
          timestamp_ms |        random
            48 bits    |        80 bits
"""
from __future__ import annotations

from typing import SupportsBytes

from mp_ulid.kernel.errors import FieldRangeError, InvalidLengthError

TIMESTAMP_BITS = 48
RANDOM_BITS = 80

TIMESTAMP_SIZE = TIMESTAMP_BITS // 8
RANDOM_SIZE = RANDOM_BITS // 8
ULID_SIZE = TIMESTAMP_SIZE + RANDOM_SIZE

TIMESTAMP_MAX = (1 << TIMESTAMP_BITS) - 1
RANDOM_MAX = (1 << RANDOM_BITS) - 1


def _check_range(field: str, value: int, bits: int, truncate: bool) -> int:
    limit = (1 << bits) - 1
    if truncate:
        return value & limit
    if value < 0 or value > limit:
        raise FieldRangeError(field, value, bits)
    return value


def check_raw(raw: bytes | SupportsBytes) -> bytes:
    """Return *raw* as ``bytes`` if it is exactly 16 bytes long.

    Objects implementing ``__bytes__`` (such as ``Ulid``) are accepted too.
    """
    if isinstance(raw, int):
        raise TypeError("raw ULID must be bytes-like, not int")
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raw = bytes(raw)
    if len(raw) != ULID_SIZE:
        raise InvalidLengthError(len(raw), ULID_SIZE, unit="bytes")
    return bytes(raw)


def pack(timestamp_ms: int, random: int, *, truncate: bool = False) -> bytes:
    """Assemble a raw ULID from its two integer fields.

    Values outside ``0..2**48-1`` / ``0..2**80-1`` raise
    :class:`~mp_ulid.kernel.errors.FieldRangeError` unless *truncate* is
    set, in which case only the low 48 / 80 bits are kept.
    """
    timestamp_ms = _check_range("timestamp_ms", timestamp_ms, TIMESTAMP_BITS, truncate)
    random = _check_range("random", random, RANDOM_BITS, truncate)
    return timestamp_ms.to_bytes(TIMESTAMP_SIZE, "big") + random.to_bytes(RANDOM_SIZE, "big")


def pack_bytes(timestamp_ms: int, random_bytes: bytes, *, truncate: bool = False) -> bytes:
    """Like :func:`pack` but takes the random component as 10 raw bytes."""
    if len(random_bytes) != RANDOM_SIZE:
        raise InvalidLengthError(len(random_bytes), RANDOM_SIZE, unit="bytes")
    timestamp_ms = _check_range("timestamp_ms", timestamp_ms, TIMESTAMP_BITS, truncate)
    return timestamp_ms.to_bytes(TIMESTAMP_SIZE, "big") + bytes(random_bytes)


def unpack(raw: bytes) -> tuple[int, int]:
    """Split a raw ULID into ``(timestamp_ms, random)``.

    Any 16-byte value is structurally valid.
    """
    raw = check_raw(raw)
    return (
        int.from_bytes(raw[:TIMESTAMP_SIZE], "big"),
        int.from_bytes(raw[TIMESTAMP_SIZE:], "big"),
    )


def timestamp_of(raw: bytes) -> int:
    return int.from_bytes(check_raw(raw)[:TIMESTAMP_SIZE], "big")


def random_bytes_of(raw: bytes) -> bytes:
    return check_raw(raw)[TIMESTAMP_SIZE:]


__all__ = [
    "RANDOM_BITS",
    "RANDOM_MAX",
    "RANDOM_SIZE",
    "TIMESTAMP_BITS",
    "TIMESTAMP_MAX",
    "TIMESTAMP_SIZE",
    "ULID_SIZE",
    "check_raw",
    "pack",
    "pack_bytes",
    "random_bytes_of",
    "timestamp_of",
    "unpack",
]
