"""Kernel error hierarchy.

Hierarchy::

    FeatureSwitchesError
    ├── ConfigurationError           (configuration.py)
    │   ├── UndefinedFeatureError
    │   ├── UndefinedGroupError
    │   └── InvalidFilterSettingsError
    ├── EvaluationError              (evaluation.py)
    │   ├── UnknownFilterError
    │   ├── InvalidEvaluationContextError
    │   └── ValueConversionError
    └── SerializationError           (serialization.py)

Library settings errors (``feature_switches.config``) derive from
``ConfigurationError`` as well.
"""

from feature_switches.kernel.errors.base import FeatureSwitchesError
from feature_switches.kernel.errors.configuration import (
    ConfigurationError,
    InvalidFilterSettingsError,
    UndefinedFeatureError,
    UndefinedGroupError,
)
from feature_switches.kernel.errors.evaluation import (
    EvaluationError,
    InvalidEvaluationContextError,
    UnknownFilterError,
    ValueConversionError,
)
from feature_switches.kernel.errors.serialization import SerializationError

__all__ = [
    "ConfigurationError",
    "EvaluationError",
    "InvalidEvaluationContextError",
    "FeatureSwitchesError",
    "InvalidFilterSettingsError",
    "SerializationError",
    "UndefinedFeatureError",
    "UndefinedGroupError",
    "UnknownFilterError",
    "ValueConversionError",
]
