"""Caching – FeatureCache protocol, cached result and cache options."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol, runtime_checkable

__all__ = [
    "EvaluationCacheResult",
    "FeatureCache",
    "FeatureCacheOptions",
]


@dataclass(frozen=True)
class EvaluationCacheResult:
    """A cache hit.

    ``value`` is the serialized (UTF-8 JSON) feature value, or ``None`` when
    the evaluation produced no value (unknown feature).  A miss is signalled
    by the cache returning ``None`` instead of a result.
    """
    value: bytes | None


@dataclass(frozen=True)
class FeatureCacheOptions:
    """Per-entry options; ``ttl=None`` falls back to the cache default."""
    ttl: timedelta | None = None


@runtime_checkable
class FeatureCache(Protocol):
    async def get_item(self, feature: str, context: str) -> EvaluationCacheResult | None: ...

    async def set_item(
        self,
        feature: str,
        context: str,
        value: bytes | None,
        options: FeatureCacheOptions | None = None,
    ) -> None: ...

    async def remove(self, feature: str) -> None: ...  # drops every context of *feature*
