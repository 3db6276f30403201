"""Kernel – framework-agnostic building blocks (errors, time)."""

from feature_switches.kernel.errors import (
    ConfigurationError,
    EvaluationError,
    InvalidEvaluationContextError,
    FeatureSwitchesError,
    InvalidFilterSettingsError,
    SerializationError,
    UndefinedFeatureError,
    UndefinedGroupError,
    UnknownFilterError,
    ValueConversionError,
)
from feature_switches.kernel.time import Clock, FrozenClock, SystemClock

__all__ = [
    "Clock",
    "ConfigurationError",
    "EvaluationError",
    "InvalidEvaluationContextError",
    "FeatureSwitchesError",
    "FrozenClock",
    "InvalidFilterSettingsError",
    "SerializationError",
    "SystemClock",
    "UndefinedFeatureError",
    "UndefinedGroupError",
    "UnknownFilterError",
    "ValueConversionError",
]
