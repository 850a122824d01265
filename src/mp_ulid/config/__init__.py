"""Config – 12-factor settings and loaders."""

from mp_ulid.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    GeneratorSettings,
    Settings,
    SettingsLoader,
)
from mp_ulid.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GeneratorSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
