"""ULID value object."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from mp_ulid.codec import base32, fields
from mp_ulid.codec.compare import compare
from mp_ulid.kernel.errors import DecodeError, FieldRangeError, InvalidLengthError
from mp_ulid.kernel.time import datetime_to_millis, millis_to_datetime

_ULID_BITS = 128


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class Ulid:
    """ULID as an immutable value object over its 16 raw bytes.

    Ordering, equality and hashing all follow the raw bytes, which is the
    same order as the canonical string form.

    Examples::

        u = Ulid.from_str("01ARZ3NDEKTSV4RRFFQ69G5FAV")
        u.timestamp_ms      # 1469922850259
        str(u)              # '01ARZ3NDEKTSV4RRFFQ69G5FAV'
        Ulid.from_parts(u.timestamp_ms, 0) < u   # True
    """

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise TypeError(f"Ulid expects bytes, got {type(self.value).__name__}")
        if len(self.value) != fields.ULID_SIZE:
            raise InvalidLengthError(len(self.value), fields.ULID_SIZE, unit="bytes")
        object.__setattr__(self, "value", bytes(self.value))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_str(cls, text: str) -> "Ulid":
        """Parse the 26-character form (case-insensitive)."""
        return cls(base32.decode(text))

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Ulid":
        return cls(raw)

    @classmethod
    def from_int(cls, number: int) -> "Ulid":
        if number < 0 or number >> _ULID_BITS:
            raise FieldRangeError("value", number, _ULID_BITS)
        return cls(number.to_bytes(fields.ULID_SIZE, "big"))

    @classmethod
    def from_parts(cls, timestamp_ms: int, random: int | bytes) -> "Ulid":
        """Assemble from a millisecond timestamp and an 80-bit random part.

        *random* may be an integer or exactly 10 bytes.
        """
        if isinstance(random, int):
            return cls(fields.pack(timestamp_ms, random))
        return cls(fields.pack_bytes(timestamp_ms, random))

    @classmethod
    def from_datetime(cls, value: datetime, random: int | bytes = 0) -> "Ulid":
        return cls.from_parts(datetime_to_millis(value), random)

    @classmethod
    def generate(cls) -> "Ulid":
        """Return a new ULID from the process-wide monotonic generator."""
        from mp_ulid.generator.default import default_generator

        return default_generator().generate()

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def timestamp_ms(self) -> int:
        return fields.timestamp_of(self.value)

    @property
    def random(self) -> int:
        return fields.unpack(self.value)[1]

    @property
    def random_bytes(self) -> bytes:
        return fields.random_bytes_of(self.value)

    @property
    def datetime(self) -> datetime:
        """Timestamp field as an aware UTC ``datetime``."""
        return millis_to_datetime(self.timestamp_ms)

    @property
    def hex(self) -> str:
        return self.value.hex()

    def with_timestamp(self, timestamp_ms: int) -> "Ulid":
        """Return a copy with the timestamp field replaced."""
        return Ulid(fields.pack_bytes(timestamp_ms, self.random_bytes))

    def with_random(self, random: int | bytes) -> "Ulid":
        """Return a copy with the random field replaced."""
        return Ulid.from_parts(self.timestamp_ms, random)

    def compare(self, other: "Ulid | bytes") -> int:
        return compare(self.value, other)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return base32.encode(self.value)

    def __bytes__(self) -> bytes:
        return self.value

    def __int__(self) -> int:
        return int.from_bytes(self.value, "big")

    def __repr__(self) -> str:
        return f"Ulid({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: Any,
    ) -> Any:
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def _coerce(cls, value: Any) -> "Ulid":
        # pydantic reports ValueError as a validation error
        if isinstance(value, cls):
            return value
        try:
            if isinstance(value, str):
                return cls.from_str(value)
            if isinstance(value, (bytes, bytearray)):
                return cls(bytes(value))
        except DecodeError as exc:
            raise ValueError(exc.message) from exc
        raise ValueError(f"Cannot build Ulid from {type(value).__name__}")


__all__ = ["Ulid"]
