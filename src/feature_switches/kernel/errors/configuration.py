"""Configuration errors: definition mutations that reference missing prerequisites."""

from __future__ import annotations

from typing import Any

from feature_switches.kernel.errors.base import FeatureSwitchesError


class ConfigurationError(FeatureSwitchesError):
    """A feature definition is being built or loaded in an invalid way."""

    default_code = "configuration_error"


class UndefinedFeatureError(ConfigurationError):
    """A mutation targets a feature that has not been defined."""

    default_code = "undefined_feature"

    def __init__(self, feature: str, **kwargs: Any) -> None:
        super().__init__(
            f"Feature '{feature}' must be defined first",
            detail={"feature": feature},
            **kwargs,
        )


class UndefinedGroupError(ConfigurationError):
    """A filter or toggle references a group that is not defined on the feature."""

    default_code = "undefined_group"

    def __init__(self, feature: str, group: str, **kwargs: Any) -> None:
        super().__init__(
            f"Feature group '{group}' must be defined first for feature '{feature}'",
            detail={"feature": feature, "group": group},
            **kwargs,
        )
        self.group = group


class InvalidFilterSettingsError(ConfigurationError):
    """A filter settings payload cannot be interpreted in the expected shape."""

    default_code = "invalid_filter_settings"

    def __init__(
        self,
        filter_name: str,
        feature: str | None = None,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        msg = f"Invalid settings for filter '{filter_name}'"
        if feature is not None:
            msg += f" on feature '{feature}'"
        if reason:
            msg += f": {reason}"
        super().__init__(
            msg,
            detail={"filter": filter_name, "feature": feature},
            **kwargs,
        )
        self.filter_name = filter_name


__all__ = [
    "ConfigurationError",
    "InvalidFilterSettingsError",
    "UndefinedFeatureError",
    "UndefinedGroupError",
]
