"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from mp_ulid.kernel.errors import (
    ApplicationError,
    BaseError,
    ClockUnavailableError,
    DecodeError,
    DomainError,
    FieldRangeError,
    GenerationError,
    InfrastructureError,
    InvalidCharacterError,
    InvalidLengthError,
    RandomnessExhaustedError,
    RandomnessUnavailableError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


# ---------------------------------------------------------------------------
# Decode errors
# ---------------------------------------------------------------------------


class TestDecodeErrors:
    def test_invalid_length_fields(self) -> None:
        err = InvalidLengthError(25, 26)
        assert err.length == 25
        assert err.expected == 26
        assert err.code == "invalid_length"
        assert err.detail == {"length": 25, "expected": 26}
        assert "26 characters" in err.message

    def test_invalid_length_unit(self) -> None:
        assert "16 bytes" in InvalidLengthError(15, 16, unit="bytes").message

    def test_invalid_character_fields(self) -> None:
        err = InvalidCharacterError("U", 3)
        assert err.character == "U"
        assert err.position == 3
        assert err.code == "invalid_character"
        assert "'U'" in err.message

    def test_invalid_character_custom_reason(self) -> None:
        err = InvalidCharacterError("8", 0, reason="leading character must be in range 0-7")
        assert "0-7" in err.message

    def test_field_range(self) -> None:
        err = FieldRangeError("timestamp_ms", -1, 48)
        assert (err.field, err.value, err.bits) == ("timestamp_ms", -1, 48)
        assert err.code == "field_range"

    @pytest.mark.parametrize("cls", [InvalidLengthError, InvalidCharacterError])
    def test_decode_errors_are_domain_errors(self, cls: type) -> None:
        assert issubclass(cls, DecodeError)
        assert issubclass(cls, DomainError)
        assert issubclass(cls, BaseError)


# ---------------------------------------------------------------------------
# Generation errors
# ---------------------------------------------------------------------------


class TestGenerationErrors:
    @pytest.mark.parametrize(
        "cls",
        [ClockUnavailableError, RandomnessUnavailableError],
    )
    def test_provider_errors_have_default_message(self, cls: type) -> None:
        err = cls()
        assert err.message
        assert isinstance(err, GenerationError)
        assert isinstance(err, InfrastructureError)

    def test_provider_error_keeps_cause(self) -> None:
        cause = OSError("no entropy")
        err = RandomnessUnavailableError(cause=cause)
        assert err.__cause__ is cause
        assert err.code == "randomness_unavailable"

    def test_exhausted(self) -> None:
        err = RandomnessExhaustedError(100)
        assert err.timestamp_ms == 100
        assert err.detail == {"timestamp_ms": 100}
        assert err.code == "randomness_exhausted"
        assert isinstance(err, GenerationError)

    def test_generation_errors_are_not_domain_errors(self) -> None:
        assert not issubclass(GenerationError, DomainError)
        assert not issubclass(GenerationError, ApplicationError)


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("mp_ulid.kernel.errors")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} listed in __all__ but not found"
