"""Config settings – GeneratorSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_ulid.config.settings.base import Settings
from mp_ulid.config.validation import InvalidSettingValueError

SUPPORTED_CLOCKS = frozenset({"system"})


@dataclasses.dataclass
class GeneratorSettings(Settings):
    """Settings for the process-default generator.

    Read from ``ULID_MONOTONIC``, ``ULID_THREAD_SAFE`` and ``ULID_CLOCK`` by
    :class:`~mp_ulid.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "ULID"

    monotonic: bool = True
    thread_safe: bool = True
    clock: str = "system"

    def _validate(self) -> None:
        if self.clock not in SUPPORTED_CLOCKS:
            raise InvalidSettingValueError(
                "clock", self.clock, f"expected one of {sorted(SUPPORTED_CLOCKS)}"
            )


__all__ = ["GeneratorSettings", "SUPPORTED_CLOCKS"]
