"""Unit tests for FilterRegistry and the filter evaluation context."""

from __future__ import annotations

import pytest

from feature_switches.filters import (
    CustomerFeatureFilter,
    DateTimeFilterSettings,
    FeatureFilter,
    FeatureFilterEvaluationContext,
    FilterRegistry,
    OnOffFeatureFilter,
)
from feature_switches.kernel.errors import InvalidFilterSettingsError, UnknownFilterError


class AlwaysOnFilter(FeatureFilter):
    name = "OnOff"

    async def is_on(self, context: FeatureFilterEvaluationContext) -> bool:
        return True


class TestFilterRegistry:
    def test_defaults(self) -> None:
        registry = FilterRegistry.with_defaults()
        assert registry.names() == ["OnOff", "DateTime", "Session", "ParallelChange"]
        assert "Customer" not in registry

    def test_defaults_with_customer(self) -> None:
        registry = FilterRegistry.with_defaults(current_customer=lambda: "acme")
        assert isinstance(registry.get("Customer"), CustomerFeatureFilter)
        assert len(registry) == 5

    def test_unknown_filter(self) -> None:
        with pytest.raises(UnknownFilterError) as exc_info:
            FilterRegistry().get("Geo")
        assert exc_info.value.filter_name == "Geo"

    def test_register_replaces_same_name(self) -> None:
        replacement = AlwaysOnFilter()
        registry = FilterRegistry([OnOffFeatureFilter()]).register(replacement)
        assert registry.get("OnOff") is replacement
        assert list(registry) == [replacement]

    def test_register_rejects_non_filters(self) -> None:
        with pytest.raises(TypeError):
            FilterRegistry().register(object())  # type: ignore[arg-type]


class TestFeatureFilterEvaluationContext:
    def test_get_settings_matches_keys_ignoring_case(self) -> None:
        context = FeatureFilterEvaluationContext("A", {"from": "2020-11-04T00:00:00Z", "TO": None})
        settings = context.get_settings(DateTimeFilterSettings)
        assert settings.from_ is not None
        assert settings.from_.year == 2020
        assert settings.to is None

    def test_get_settings_scalar(self) -> None:
        assert FeatureFilterEvaluationContext("A", [1, 2]).get_settings(list[int]) == [1, 2]

    def test_get_settings_invalid(self) -> None:
        context = FeatureFilterEvaluationContext("A", {"From": 5j}, "DateTime")
        with pytest.raises(InvalidFilterSettingsError) as exc_info:
            context.get_settings(DateTimeFilterSettings)
        assert exc_info.value.filter_name == "DateTime"

    def test_try_get_settings(self) -> None:
        context = FeatureFilterEvaluationContext("A", "not-a-list")
        assert context.try_get_settings(list[int]) is None
