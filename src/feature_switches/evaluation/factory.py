"""Evaluation – build_feature_service wiring helper."""
from __future__ import annotations

from collections.abc import Sequence

from feature_switches.caching import FeatureCache, FeatureCacheContextAccessor, InMemoryFeatureCache
from feature_switches.config.settings import FeatureSwitchesSettings
from feature_switches.definitions import FeatureDefinitionProvider, InMemoryFeatureDefinitionProvider
from feature_switches.evaluation.service import FeatureService
from feature_switches.filters import FilterRegistry
from feature_switches.kernel.time import Clock

__all__ = ["build_feature_service"]


def build_feature_service(
    provider: FeatureDefinitionProvider | None = None,
    *,
    registry: FilterRegistry | None = None,
    caches: Sequence[FeatureCache] | None = None,
    cache_context_accessor: FeatureCacheContextAccessor | None = None,
    settings: FeatureSwitchesSettings | None = None,
    clock: Clock | None = None,
) -> FeatureService:
    """Wire a :class:`FeatureService` with sensible defaults.

    * *provider*: a new :class:`InMemoryFeatureDefinitionProvider`.
    * *registry*: the built-in filters, time-based ones using *clock*.
    * *caches*: one :class:`InMemoryFeatureCache` bound to *provider*
      (none when ``settings.cache_enabled`` is false).

    Settings can be read from the environment with
    ``EnvSettingsLoader().load(FeatureSwitchesSettings)``.
    """
    settings = settings or FeatureSwitchesSettings()
    provider = provider if provider is not None else InMemoryFeatureDefinitionProvider()
    if registry is None:
        registry = FilterRegistry.with_defaults(clock=clock)
    if caches is None:
        caches = (
            [InMemoryFeatureCache(provider, clock=clock, default_ttl=settings.cache_ttl)]
            if settings.cache_enabled
            else []
        )
    return FeatureService(
        provider,
        registry,
        caches=caches,
        cache_context_accessor=cache_context_accessor,
        settings=settings,
    )
