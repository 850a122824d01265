"""Domain errors — malformed identifiers and out-of-range fields."""

from __future__ import annotations

from typing import Any

from mp_ulid.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an identifier value breaks a format rule."""

    default_code = "domain_error"


class DecodeError(DomainError):
    """Text or binary input is not a well-formed ULID."""

    default_code = "decode_error"


class InvalidLengthError(DecodeError):
    """Input has the wrong number of characters / bytes.

    ``length`` is what was received, ``expected`` what the codec needs.
    """

    default_code = "invalid_length"

    def __init__(
        self,
        length: int,
        expected: int,
        *,
        unit: str = "characters",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Expected {expected} {unit}, got {length}",
            detail={"length": length, "expected": expected},
            **kwargs,
        )
        self.length = length
        self.expected = expected


class InvalidCharacterError(DecodeError):
    """A character is outside the Crockford alphabet or not allowed at its position."""

    default_code = "invalid_character"

    def __init__(
        self,
        character: str,
        position: int,
        *,
        reason: str = "not in the Crockford base32 alphabet",
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Invalid character {character!r} at position {position}: {reason}",
            detail={"character": character, "position": position},
            **kwargs,
        )
        self.character = character
        self.position = position


class FieldRangeError(DomainError):
    """A timestamp or random value does not fit its bit width."""

    default_code = "field_range"

    def __init__(self, field: str, value: int, bits: int, **kwargs: Any) -> None:
        super().__init__(
            f"{field} must be in range 0..2**{bits}-1, got {value}",
            detail={"field": field, "value": value, "bits": bits},
            **kwargs,
        )
        self.field = field
        self.value = value
        self.bits = bits


__all__ = [
    "DecodeError",
    "DomainError",
    "FieldRangeError",
    "InvalidCharacterError",
    "InvalidLengthError",
]
