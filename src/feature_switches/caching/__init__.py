"""Caching – evaluation caches, context accessors and fingerprints."""
from feature_switches.caching.protocol import (
    EvaluationCacheResult,
    FeatureCache,
    FeatureCacheOptions,
)
from feature_switches.caching.context import (
    EmptyFeatureCacheContextAccessor,
    FeatureCacheContextAccessor,
    ScopedCacheContext,
    ScopedCacheContextAccessor,
)
from feature_switches.caching.keys import cache_fingerprint
from feature_switches.caching.in_memory import InMemoryFeatureCache
from feature_switches.caching.session import SessionFeatureCache

__all__ = [
    "EmptyFeatureCacheContextAccessor",
    "EvaluationCacheResult",
    "FeatureCache",
    "FeatureCacheContextAccessor",
    "FeatureCacheOptions",
    "InMemoryFeatureCache",
    "ScopedCacheContext",
    "ScopedCacheContextAccessor",
    "SessionFeatureCache",
    "cache_fingerprint",
]
