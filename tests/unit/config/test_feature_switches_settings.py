"""Unit tests for FeatureSwitchesSettings and EnvSettingsLoader."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

import pytest

from feature_switches.config import (
    EnvSettingsLoader,
    FeatureSwitchesSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    SettingParseError,
    Settings,
    SettingsError,
)
from feature_switches.kernel.errors import ConfigurationError


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    name: str
    retries: int = 3


# ---------------------------------------------------------------------------
# FeatureSwitchesSettings
# ---------------------------------------------------------------------------


class TestFeatureSwitchesSettings:
    def test_defaults(self) -> None:
        settings = FeatureSwitchesSettings()
        assert settings.strict_values is True
        assert settings.cache_enabled is True
        assert settings.cache_ttl_seconds == 0.0
        assert settings.cache_ttl is None
        assert settings.log_evaluations is False

    def test_cache_ttl(self) -> None:
        settings = FeatureSwitchesSettings(cache_ttl_seconds=30)
        assert settings.cache_ttl == timedelta(seconds=30)

    def test_negative_ttl_is_invalid(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            FeatureSwitchesSettings(cache_ttl_seconds=-1)
        assert exc_info.value.setting_name == "cache_ttl_seconds"
        assert isinstance(exc_info.value, ConfigurationError)

    def test_env_key(self) -> None:
        assert FeatureSwitchesSettings.env_key("strict_values") == "FEATURE_SWITCHES_STRICT_VALUES"
        assert Settings.env_key("debug") == "DEBUG"


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEATURE_SWITCHES_STRICT_VALUES", "false")
        monkeypatch.setenv("FEATURE_SWITCHES_CACHE_TTL_SECONDS", "2.5")
        settings = EnvSettingsLoader().load(FeatureSwitchesSettings)
        assert settings.strict_values is False
        assert settings.cache_ttl_seconds == 2.5
        assert settings.cache_enabled is True

    def test_from_env_with_mapping(self) -> None:
        settings = FeatureSwitchesSettings.from_env({"FEATURE_SWITCHES_LOG_EVALUATIONS": "yes"})
        assert settings.log_evaluations is True

    @pytest.mark.parametrize(("raw", "expected"), [("1", True), ("On", True), ("0", False), ("no", False)])
    def test_bool_spellings(self, raw: str, expected: bool) -> None:
        settings = FeatureSwitchesSettings.from_env({"FEATURE_SWITCHES_CACHE_ENABLED": raw})
        assert settings.cache_enabled is expected

    def test_unknown_bool_spelling(self) -> None:
        with pytest.raises(SettingParseError) as exc_info:
            FeatureSwitchesSettings.from_env({"FEATURE_SWITCHES_CACHE_ENABLED": "maybe"})
        assert exc_info.value.setting_name == "FEATURE_SWITCHES_CACHE_ENABLED"

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_NAME"

    def test_unparseable_value(self) -> None:
        loader = EnvSettingsLoader({"REQ_NAME": "x", "REQ_RETRIES": "many"})
        with pytest.raises(SettingsError):
            loader.load(RequiredSettings)

    def test_validation_error_propagates(self) -> None:
        loader = EnvSettingsLoader({"FEATURE_SWITCHES_CACHE_TTL_SECONDS": "-5"})
        with pytest.raises(InvalidSettingValueError):
            loader.load(FeatureSwitchesSettings)
