"""Config validation errors."""
from feature_switches.config.validation.errors import (
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingParseError,
    SettingsError,
)

__all__ = [
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingParseError",
    "SettingsError",
]
