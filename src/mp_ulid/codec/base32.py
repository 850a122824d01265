"""Codec – Crockford base32 text codec.

A raw ULID is 128 bits; the text form is 26 symbols of 5 bits each
(130 bits), so the leading symbol only carries the top 3 bits of byte 0
and is limited to ``0``-``7``.  Encoding always produces uppercase;
decoding is case-insensitive and rejects the excluded letters
``I``, ``L``, ``O`` and ``U`` instead of remapping them.
"""
from __future__ import annotations

from mp_ulid.codec.fields import ULID_SIZE, check_raw
from mp_ulid.kernel.errors import InvalidCharacterError, InvalidLengthError

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ULID_STR_SIZE = 26
MAX_LEADING_VALUE = 7

_SYMBOL_BITS = 5
_SYMBOL_MASK = 0x1F

_DECODE_MAP: dict[str, int] = {}
for _value, _char in enumerate(ALPHABET):
    _DECODE_MAP[_char] = _value
    _DECODE_MAP[_char.lower()] = _value
del _value, _char


def symbol_value(char: str) -> int | None:
    """Return the 5-bit value of *char*, or ``None`` if it is not a symbol."""
    return _DECODE_MAP.get(char)


def encode(raw: bytes) -> str:
    """Encode 16 raw bytes as a 26-character uppercase ULID string."""
    value = int.from_bytes(check_raw(raw), "big")
    chars = []
    for _ in range(ULID_STR_SIZE):
        chars.append(ALPHABET[value & _SYMBOL_MASK])
        value >>= _SYMBOL_BITS
    chars.reverse()
    return "".join(chars)


def _symbols(text: str) -> list[int]:
    """Validate *text* completely and return its symbol values."""
    if len(text) != ULID_STR_SIZE:
        raise InvalidLengthError(len(text), ULID_STR_SIZE)
    values: list[int] = []
    for position, char in enumerate(text):
        value = _DECODE_MAP.get(char)
        if value is None:
            raise InvalidCharacterError(char, position)
        values.append(value)
    if values[0] > MAX_LEADING_VALUE:
        raise InvalidCharacterError(
            text[0], 0, reason="leading character must be in range 0-7"
        )
    return values


def decode(text: str | bytes) -> bytes:
    """Decode a 26-character ULID string into 16 raw bytes.

    The whole input is validated before any output is assembled.

    Raises:
        InvalidLengthError: input is not exactly 26 characters.
        InvalidCharacterError: a character is outside the alphabet, or the
            leading character is above ``7``.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")
    value = 0
    for symbol in _symbols(text):
        value = (value << _SYMBOL_BITS) | symbol
    return value.to_bytes(ULID_SIZE, "big")


def is_valid(text: str | bytes) -> bool:
    """Return ``True`` if :func:`decode` would accept *text*."""
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")
    try:
        _symbols(text)
    except (InvalidLengthError, InvalidCharacterError):
        return False
    return True


__all__ = [
    "ALPHABET",
    "MAX_LEADING_VALUE",
    "ULID_STR_SIZE",
    "decode",
    "encode",
    "is_valid",
    "symbol_value",
]
