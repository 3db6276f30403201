"""Config settings – 12-factor env-based configuration."""
from feature_switches.config.settings.base import Settings
from feature_switches.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from feature_switches.config.settings.switches import FeatureSwitchesSettings

__all__ = ["EnvSettingsLoader", "FeatureSwitchesSettings", "Settings", "SettingsLoader"]
