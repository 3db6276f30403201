"""Caching – InMemoryFeatureCache."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from feature_switches.caching.protocol import EvaluationCacheResult, FeatureCacheOptions
from feature_switches.definitions.provider import FeatureDefinitionChanged, FeatureDefinitionProvider
from feature_switches.kernel.time import Clock, SystemClock
from feature_switches.observability.logging import get_logger

__all__ = ["InMemoryFeatureCache"]

_log = get_logger(__name__)


@dataclass(frozen=True)
class _Entry:
    value: bytes | None
    expires_at: datetime | None = None


class InMemoryFeatureCache:
    """Process-wide evaluation cache keyed by feature, then context fingerprint.

    When constructed with a *provider* the cache subscribes to its change
    notifications and drops every entry of a feature whose definition
    changed.  Call :meth:`close` to unsubscribe.
    """

    def __init__(
        self,
        provider: FeatureDefinitionProvider | None = None,
        *,
        clock: Clock | None = None,
        default_ttl: timedelta | None = None,
    ) -> None:
        self._entries: dict[str, dict[str, _Entry]] = {}
        self._clock = clock or SystemClock()
        self._default_ttl = default_ttl
        self._provider = provider
        if provider is not None:
            provider.subscribe(self._on_definition_changed)

    async def get_item(self, feature: str, context: str) -> EvaluationCacheResult | None:
        entries = self._entries.get(feature)
        if entries is None:
            return None
        entry = entries.get(context)
        if entry is None:
            return None
        if entry.expires_at is not None and entry.expires_at <= self._clock.now():
            entries.pop(context, None)
            return None
        return EvaluationCacheResult(entry.value)

    async def set_item(
        self,
        feature: str,
        context: str,
        value: bytes | None,
        options: FeatureCacheOptions | None = None,
    ) -> None:
        ttl = options.ttl if options is not None and options.ttl is not None else self._default_ttl
        expires_at = self._clock.now() + ttl if ttl else None
        self._entries.setdefault(feature, {})[context] = _Entry(value, expires_at)

    async def remove(self, feature: str) -> None:
        self.invalidate(feature)

    def invalidate(self, feature: str) -> int:
        """Drop every cached context of *feature*; returns the number removed."""
        removed = self._entries.pop(feature, None)
        count = len(removed) if removed else 0
        if count:
            _log.debug("feature_cache.invalidated", feature=feature, entries=count)
        return count

    def clear(self) -> None:
        self._entries.clear()

    def close(self) -> None:
        if self._provider is not None:
            self._provider.unsubscribe(self._on_definition_changed)
            self._provider = None

    def __len__(self) -> int:
        return sum(len(entries) for entries in list(self._entries.values()))

    def _on_definition_changed(self, event: FeatureDefinitionChanged) -> None:
        self.invalidate(event.feature)
