"""Config validation – errors raised while loading library settings."""
from __future__ import annotations

from typing import Any

from feature_switches.kernel.errors import ConfigurationError


class SettingsError(ConfigurationError):
    """The library settings could not be loaded or are inconsistent."""
    default_code = "settings_error"


class MissingRequiredSettingError(SettingsError):
    """No environment variable for a settings field without a default."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Environment variable '{setting_name}' is required",
            detail={"setting": setting_name},
            **kwargs,
        )
        self.setting_name = setting_name


class SettingParseError(SettingsError):
    """An environment variable cannot be parsed as the field type."""
    default_code = "setting_parse_error"

    def __init__(self, setting_name: str, raw: str, type_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Environment variable '{setting_name}'={raw!r} is not a valid {type_name}",
            detail={"setting": setting_name, "type": type_name},
            **kwargs,
        )
        self.setting_name = setting_name
        self.raw = raw


class InvalidSettingValueError(SettingsError):
    """A parsed setting is outside its allowed range."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}'={value!r} {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value


__all__ = [
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingParseError",
    "SettingsError",
]
