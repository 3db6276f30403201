"""Filters – filter contracts, built-in filters and the registry."""
from feature_switches.filters.base import (
    AnyFeatureFilter,
    ContextualFeatureFilter,
    FeatureFilter,
    FeatureFilterEvaluationContext,
)
from feature_switches.filters.settings import (
    CustomerFilterSettings,
    DateTimeFilterSettings,
    ParallelChange,
    ScalarValueSetting,
    SessionFilterSettings,
)
from feature_switches.filters.customer import CustomerFeatureFilter
from feature_switches.filters.date_time import DateTimeFeatureFilter
from feature_switches.filters.on_off import OnOffFeatureFilter
from feature_switches.filters.parallel_change import ParallelChangeFeatureFilter
from feature_switches.filters.session import SessionFeatureContext, SessionFeatureFilter
from feature_switches.filters.registry import FilterRegistry

__all__ = [
    "AnyFeatureFilter",
    "ContextualFeatureFilter",
    "CustomerFeatureFilter",
    "CustomerFilterSettings",
    "DateTimeFeatureFilter",
    "DateTimeFilterSettings",
    "FeatureFilter",
    "FeatureFilterEvaluationContext",
    "FilterRegistry",
    "OnOffFeatureFilter",
    "ParallelChange",
    "ParallelChangeFeatureFilter",
    "ScalarValueSetting",
    "SessionFeatureContext",
    "SessionFeatureFilter",
    "SessionFilterSettings",
]
