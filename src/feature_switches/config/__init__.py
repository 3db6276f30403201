"""Config – library settings and their environment loader."""

from feature_switches.config.settings import (
    EnvSettingsLoader,
    FeatureSwitchesSettings,
    Settings,
    SettingsLoader,
)
from feature_switches.config.validation import (
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingParseError,
    SettingsError,
)

__all__ = [
    "EnvSettingsLoader",
    "FeatureSwitchesSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingParseError",
    "Settings",
    "SettingsError",
    "SettingsLoader",
]
