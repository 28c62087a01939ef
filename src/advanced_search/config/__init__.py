"""Config – builder settings, env loader and configuration errors."""

from advanced_search.config.settings import BuilderSettings, EnvSettingsLoader, Settings, SettingsLoader
from advanced_search.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "BuilderSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
