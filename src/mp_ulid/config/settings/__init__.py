"""Config settings – 12-factor env-based configuration."""
from mp_ulid.config.settings.base import Settings
from mp_ulid.config.settings.generator import GeneratorSettings
from mp_ulid.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "GeneratorSettings", "Settings", "SettingsLoader"]
