"""Definitions – feature definition models, provider port and in-memory store."""
from feature_switches.definitions.models import (
    FeatureDefinition,
    FilterDefinition,
    FilterGroupDefinition,
)
from feature_switches.definitions.provider import (
    ChangeListener,
    FeatureDefinitionChanged,
    FeatureDefinitionProvider,
)
from feature_switches.definitions.in_memory import InMemoryFeatureDefinitionProvider

__all__ = [
    "ChangeListener",
    "FeatureDefinition",
    "FeatureDefinitionChanged",
    "FeatureDefinitionProvider",
    "FilterDefinition",
    "FilterGroupDefinition",
    "InMemoryFeatureDefinitionProvider",
]
