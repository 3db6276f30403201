"""Benchmark: FeatureService evaluation with and without the evaluation cache.

Sub-benchmarks:
- cached ``is_on`` of a feature without filters
- uncached evaluation through a filter group
- cached evaluation with an evaluation context (fingerprint hashing)
"""

from __future__ import annotations

from feature_switches.config import FeatureSwitchesSettings
from feature_switches.definitions import InMemoryFeatureDefinitionProvider
from feature_switches.evaluation import build_feature_service
from feature_switches.filters import ParallelChange


def _provider() -> InMemoryFeatureDefinitionProvider:
    provider = InMemoryFeatureDefinitionProvider()
    provider.set_feature("Plain")
    provider.set_feature("Grouped", off_value="v1", on_value="v1")
    provider.set_feature_group("Grouped", "Beta", on_value="v2")
    provider.set_feature_filter("Grouped", "OnOff", {"Setting": True}, group="Beta")
    provider.set_feature_filter("Grouped", "ParallelChange", {"Setting": "Migrated"}, group="Beta")
    return provider


def test_is_on_cached(benchmark, event_loop):
    service = build_feature_service(_provider())

    def run():
        return event_loop.run_until_complete(service.is_on("Plain"))

    assert benchmark(run) is True


def test_group_evaluation_uncached(benchmark, event_loop):
    service = build_feature_service(_provider(), settings=FeatureSwitchesSettings(cache_enabled=False))

    def run():
        return event_loop.run_until_complete(service.get_value("Grouped", str))

    assert benchmark(run) == "v2"


def test_group_evaluation_cached_with_context(benchmark, event_loop):
    service = build_feature_service(_provider())

    def run():
        return event_loop.run_until_complete(service.get_value("Grouped", str, ParallelChange.EXPANDED))

    assert benchmark(run) == "v2"
