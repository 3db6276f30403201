"""Evaluation – FeatureService."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar, overload

from pydantic import ValidationError as PydanticValidationError

from feature_switches.caching import (
    EmptyFeatureCacheContextAccessor,
    FeatureCache,
    FeatureCacheContextAccessor,
    FeatureCacheOptions,
    cache_fingerprint,
)
from feature_switches.config.settings import FeatureSwitchesSettings
from feature_switches.definitions import (
    FeatureDefinition,
    FeatureDefinitionChanged,
    FeatureDefinitionProvider,
    FilterDefinition,
)
from feature_switches.evaluation.values import TRUE, deserialize_value, serialize_value, type_default
from feature_switches.filters import ContextualFeatureFilter, FeatureFilterEvaluationContext, FilterRegistry
from feature_switches.kernel.errors import UnknownFilterError, ValueConversionError
from feature_switches.observability.logging import get_logger

__all__ = ["FeatureService"]

_log = get_logger(__name__)

T = TypeVar("T")
_MISSING: Any = object()


class FeatureService:
    """Evaluates feature switches.

    The value of a feature is chosen as follows:

    1. Unknown feature: no value (``is_on`` is ``False``, ``get_value``
       returns the default).
    2. Master switch off: ``off_value``.
    3. Ungrouped filters are AND'ed; any filter off gives ``off_value``.
    4. No filter groups: ``on_value``.
    5. Enabled groups are tried in definition order; the first group whose
       filters are all on gives its ``on_value``.
    6. Otherwise ``off_value``.

    Serialized results are cached per feature and context fingerprint in
    every configured cache, including the "no value" outcome.  The cache is
    written only after an evaluation completed, so a cancelled evaluation
    leaves it untouched, and only when the definition did not change while
    the evaluation was in flight.

    Conversion of the stored value to the type requested by ``get_value``
    follows ``settings.strict_values``: strict conversion raises
    :class:`ValueConversionError` on mismatch, lenient conversion returns
    the default.
    """

    def __init__(
        self,
        provider: FeatureDefinitionProvider,
        registry: FilterRegistry | None = None,
        caches: Sequence[FeatureCache] | None = None,
        cache_context_accessor: FeatureCacheContextAccessor | None = None,
        settings: FeatureSwitchesSettings | None = None,
    ) -> None:
        self._provider = provider
        self._registry = registry if registry is not None else FilterRegistry.with_defaults()
        self._caches: tuple[FeatureCache, ...] = tuple(caches or ())
        self._context_accessor = cache_context_accessor or EmptyFeatureCacheContextAccessor()
        self._settings = settings or FeatureSwitchesSettings()
        self._cache_options = FeatureCacheOptions(ttl=self._settings.cache_ttl)
        # bumped on every definition change; a result computed across a change is not cached
        self._generations: dict[str, int] = {}
        self._subscribed = bool(self._caches)
        if self._subscribed:
            provider.subscribe(self._on_definition_changed)

    @property
    def provider(self) -> FeatureDefinitionProvider:
        return self._provider

    @property
    def registry(self) -> FilterRegistry:
        return self._registry

    @property
    def caches(self) -> tuple[FeatureCache, ...]:
        return self._caches

    async def get_features(self) -> list[str]:
        return await self._provider.get_features()

    async def is_on(self, feature: str, context: Any = None) -> bool:
        """``True`` when the feature currently evaluates to the boolean ``true``."""
        return await self.get_raw_value(feature, context) == TRUE

    @overload
    async def get_value(self, feature: str, value_type: type[T], context: Any = ..., *, default: T = ...) -> T: ...

    @overload
    async def get_value(self, feature: str, value_type: Any = ..., context: Any = ..., *, default: Any = ...) -> Any: ...

    async def get_value(
        self,
        feature: str,
        value_type: Any = Any,
        context: Any = None,
        *,
        default: Any = _MISSING,
    ) -> Any:
        """Return the current value of *feature* converted to *value_type*.

        Without a value (unknown feature) *default* is returned, or the type
        default when no *default* is given.
        """
        fallback = type_default(value_type) if default is _MISSING else default
        raw = await self.get_raw_value(feature, context)
        if raw is None:
            return fallback
        strict = self._settings.strict_values
        try:
            return deserialize_value(raw, value_type, strict=strict)
        except PydanticValidationError as exc:
            error = ValueConversionError(feature, value_type, cause=exc)
            if strict:
                raise error from exc
            _log.warning("feature.value_conversion_failed", **error.log_fields())
            return fallback

    async def get_raw_value(self, feature: str, context: Any = None) -> bytes | None:
        """Return the serialized (UTF-8 JSON) value of *feature*, or ``None``."""
        fingerprint = cache_fingerprint(self._context_accessor.get_context(), context)
        for cache in self._caches:
            cached = await cache.get_item(feature, fingerprint)
            if cached is not None:
                return cached.value

        generation = self._generations.get(feature, 0)
        raw = await self._evaluate(feature, context)

        if self._generations.get(feature, 0) != generation:
            _log.debug("feature_cache.write_skipped", feature=feature)
            return raw
        for cache in self._caches:
            await cache.set_item(feature, fingerprint, raw, self._cache_options)
        return raw

    get_bytes = get_raw_value

    def close(self) -> None:
        """Stop listening to definition changes of the provider."""
        if self._subscribed:
            self._provider.unsubscribe(self._on_definition_changed)
            self._subscribed = False

    def _on_definition_changed(self, event: FeatureDefinitionChanged) -> None:
        self._generations[event.feature] = self._generations.get(event.feature, 0) + 1

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    async def _evaluate(self, feature: str, context: Any) -> bytes | None:
        definition = await self._provider.get_feature_definition(feature)
        if definition is None:
            _log.debug("feature.unknown", feature=feature)
            return None
        raw = serialize_value(await self._select_value(definition, context))
        if self._settings.log_evaluations:
            _log.debug("feature.evaluated", feature=feature, value=raw.decode())
        return raw

    async def _select_value(self, definition: FeatureDefinition, context: Any) -> Any:
        if not definition.is_on:
            return definition.off_value

        if not await self._all_on(definition, None, context):
            return definition.off_value

        if not definition.filter_groups:
            return definition.on_value

        for group in definition.filter_groups:
            if not group.is_on:
                continue
            if await self._all_on(definition, group.name, context):
                return group.on_value

        return definition.off_value

    async def _all_on(self, definition: FeatureDefinition, group: str | None, context: Any) -> bool:
        # sequential: short-circuits on the first filter that is off
        for filter_definition in definition.filters_for(group):
            if not await self._filter_is_on(definition.name, filter_definition, context):
                return False
        return True

    async def _filter_is_on(self, feature: str, filter_definition: FilterDefinition, context: Any) -> bool:
        try:
            feature_filter = self._registry.get(filter_definition.name)
        except UnknownFilterError as exc:
            _log.error("feature_filter.unknown", feature=feature, **exc.log_fields())
            raise

        filter_context = FeatureFilterEvaluationContext(
            feature, filter_definition.settings, filter_definition.name
        )
        if isinstance(feature_filter, ContextualFeatureFilter):
            return bool(await feature_filter.is_on(filter_context, context))
        return bool(await feature_filter.is_on(filter_context))
