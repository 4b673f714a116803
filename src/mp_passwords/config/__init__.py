"""Config – env settings loaders and validation errors."""

from mp_passwords.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from mp_passwords.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
