"""Generator – process-wide default generator and shortcuts."""
from __future__ import annotations

import threading

from mp_ulid.config.settings import EnvSettingsLoader, GeneratorSettings
from mp_ulid.generator.monotonic import UlidGenerator
from mp_ulid.generator.synchronized import SynchronizedGenerator
from mp_ulid.kernel.types import Ulid

_default: UlidGenerator | SynchronizedGenerator | None = None
_default_lock = threading.Lock()


def build_generator(settings: GeneratorSettings) -> UlidGenerator | SynchronizedGenerator:
    """Build a generator from *settings*, wrapped in a lock when ``thread_safe``."""
    generator = UlidGenerator.from_settings(settings)
    if settings.thread_safe:
        return SynchronizedGenerator(generator)
    return generator


def default_generator() -> UlidGenerator | SynchronizedGenerator:
    """Return the process-wide generator, building it from ``ULID_*`` env vars on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = build_generator(EnvSettingsLoader().load(GeneratorSettings))
    return _default


def set_default_generator(generator: UlidGenerator | SynchronizedGenerator | None) -> None:
    """Replace the process-wide generator (``None`` rebuilds it lazily)."""
    global _default
    with _default_lock:
        _default = generator


def new() -> Ulid:
    """Shortcut for ``default_generator().generate()``."""
    return default_generator().generate()


def new_string() -> str:
    """Shortcut for ``default_generator().generate_string()``."""
    return default_generator().generate_string()


__all__ = ["build_generator", "default_generator", "new", "new_string", "set_default_generator"]
