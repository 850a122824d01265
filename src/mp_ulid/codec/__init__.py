"""Codec – pure, stateless conversions between ULID representations.

Modules:
  fields.py  — pack / unpack of the timestamp and random fields
  base32.py  — Crockford base32 encode / decode
  compare.py — byte-wise ordering
"""

from mp_ulid.codec.base32 import ALPHABET, ULID_STR_SIZE, decode, encode, is_valid
from mp_ulid.codec.compare import compare
from mp_ulid.codec.fields import (
    RANDOM_BITS,
    RANDOM_MAX,
    RANDOM_SIZE,
    TIMESTAMP_BITS,
    TIMESTAMP_MAX,
    TIMESTAMP_SIZE,
    ULID_SIZE,
    pack,
    pack_bytes,
    unpack,
)

__all__ = [
    "ALPHABET",
    "RANDOM_BITS",
    "RANDOM_MAX",
    "RANDOM_SIZE",
    "TIMESTAMP_BITS",
    "TIMESTAMP_MAX",
    "TIMESTAMP_SIZE",
    "ULID_SIZE",
    "ULID_STR_SIZE",
    "compare",
    "decode",
    "encode",
    "is_valid",
    "pack",
    "pack_bytes",
    "unpack",
]
