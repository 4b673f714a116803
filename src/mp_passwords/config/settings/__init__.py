"""Config settings – env-based configuration."""
from mp_passwords.config.settings.base import Settings
from mp_passwords.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
