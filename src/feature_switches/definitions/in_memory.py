"""Definitions – InMemoryFeatureDefinitionProvider."""
from __future__ import annotations

import enum
import json
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from feature_switches.definitions.models import (
    FeatureDefinition,
    FilterDefinition,
    FilterGroupDefinition,
)
from feature_switches.definitions.provider import FeatureDefinitionProvider
from feature_switches.kernel.errors import (
    ConfigurationError,
    InvalidFilterSettingsError,
    UndefinedFeatureError,
    UndefinedGroupError,
)
from feature_switches.observability.logging import get_logger

_log = get_logger(__name__)

_DEFINITION_LIST = TypeAdapter(list[FeatureDefinition])


def _to_value(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    return to_jsonable_python(value)


def _to_settings(feature: str, filter_name: str, settings: Any) -> Any:
    # str enums (ParallelChange) are values, not JSON documents
    if isinstance(settings, (str, bytes)) and not isinstance(settings, enum.Enum):
        try:
            return json.loads(settings)
        except ValueError as exc:
            raise InvalidFilterSettingsError(
                filter_name, feature, "settings string is not valid JSON", cause=exc
            ) from exc
    try:
        return _to_value(settings)
    except PydanticSerializationError as exc:
        raise InvalidFilterSettingsError(
            filter_name, feature, "settings are not JSON serialisable", cause=exc
        ) from exc


class InMemoryFeatureDefinitionProvider(FeatureDefinitionProvider):
    """Process-wide, in-memory store of feature definitions.

    Reads are plain dictionary lookups.  Mutations run under a lock and
    publish a modified copy of the definition in a new mapping, so a concurrent
    reader sees either the old or the new state, never a partial update.  Treat the
    objects returned by :meth:`get_feature_definition` as read-only; use
    :meth:`save` for copies.

    Usage::

        provider = InMemoryFeatureDefinitionProvider()
        provider.set_feature("Checkout", off_value="v1", on_value="v1")
        provider.set_feature_group("Checkout", "Beta", on_value="v2")
        provider.set_feature_filter("Checkout", "Customer", {"Customers": ["acme"]}, group="Beta")
    """

    def __init__(self, definitions: Iterable[FeatureDefinition] | None = None) -> None:
        super().__init__()
        self._features: dict[str, FeatureDefinition] = {}
        self._lock = threading.Lock()
        if definitions is not None:
            self.load(definitions)

    # ------------------------------------------------------------------
    # FeatureDefinitionProvider
    # ------------------------------------------------------------------

    async def get_features(self) -> list[str]:
        return list(self._features)

    async def get_feature_definition(self, feature: str) -> FeatureDefinition | None:
        return self._features.get(feature)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_feature(
        self,
        feature: str,
        is_on: bool = True,
        off_value: Any = False,
        on_value: Any = True,
    ) -> None:
        """Define *feature*, or update the switch and values of an existing one.

        Filters and groups of an existing definition are kept.
        """
        with self._lock:
            current = self._features.get(feature)
            if current is None:
                definition = FeatureDefinition(name=feature)
            else:
                definition = current.model_copy(deep=True)
            definition.is_on = is_on
            definition.off_value = _to_value(off_value)
            definition.on_value = _to_value(on_value)
            self._publish(feature, definition)
        self._changed(feature)

    def set_feature_group(
        self,
        feature: str,
        group: str,
        is_on: bool = True,
        on_value: Any = True,
    ) -> None:
        """Define a filter group on *feature*; an existing group keeps its position."""
        with self._lock:
            definition = self._copy_of(feature)
            existing = definition.get_group(group)
            if existing is None:
                existing = FilterGroupDefinition(name=group)
                definition.filter_groups.append(existing)
            existing.is_on = is_on
            existing.on_value = _to_value(on_value)
            self._publish(feature, definition)
        self._changed(feature)

    def set_feature_filter(
        self,
        feature: str,
        filter_name: str,
        settings: Any = None,
        group: str | None = None,
    ) -> None:
        """Attach filter *filter_name* to *feature*, or replace its settings.

        A filter is identified by its name and group.  *settings* may be a JSON
        string, a pydantic model or any JSON-compatible value.
        """
        payload = _to_settings(feature, filter_name, settings)
        with self._lock:
            definition = self._copy_of(feature)
            if group is not None and definition.get_group(group) is None:
                raise UndefinedGroupError(feature, group)
            existing = definition.get_filter(filter_name, group)
            if existing is None:
                existing = FilterDefinition(name=filter_name, group=group)
                definition.filters.append(existing)
            existing.settings = payload
            self._publish(feature, definition)
        self._changed(feature)

    def toggle_feature(self, feature: str, is_on: bool) -> None:
        with self._lock:
            definition = self._copy_of(feature)
            definition.is_on = is_on
            self._publish(feature, definition)
        self._changed(feature)

    def toggle_feature_group(self, feature: str, group: str, is_on: bool) -> None:
        with self._lock:
            definition = self._copy_of(feature)
            existing = definition.get_group(group)
            if existing is None:
                raise UndefinedGroupError(feature, group)
            existing.is_on = is_on
            self._publish(feature, definition)
        self._changed(feature)

    def remove_feature(self, feature: str) -> bool:
        """Remove *feature*; returns ``False`` when it was not defined."""
        with self._lock:
            features = dict(self._features)
            removed = features.pop(feature, None)
            self._features = features
        if removed is None:
            return False
        self._changed(feature)
        return True

    # ------------------------------------------------------------------
    # Bulk load / save
    # ------------------------------------------------------------------

    def load(self, definitions: Iterable[FeatureDefinition]) -> None:
        """Replace every definition with *definitions*."""
        loaded: dict[str, FeatureDefinition] = {}
        for definition in definitions:
            if definition.name in loaded:
                raise ConfigurationError(
                    f"Feature '{definition.name}' is defined more than once",
                    detail={"feature": definition.name},
                )
            missing = definition.undefined_groups()
            if missing:
                raise UndefinedGroupError(definition.name, missing[0])
            loaded[definition.name] = definition.model_copy(deep=True)

        with self._lock:
            previous = self._features
            self._features = loaded

        _log.info("feature_definitions.loaded", count=len(loaded))
        for feature in dict.fromkeys([*previous, *loaded]):
            self._notify(feature)

    def load_from_dicts(self, items: Iterable[Mapping[str, Any]]) -> None:
        try:
            definitions = [FeatureDefinition.model_validate(item) for item in items]
        except PydanticValidationError as exc:
            raise ConfigurationError("Invalid feature definitions", cause=exc) from exc
        self.load(definitions)

    def load_from_json(self, text: str | bytes) -> None:
        """Load definitions from the JSON produced by :meth:`save_to_json`.

        Extra fields are ignored.
        """
        try:
            definitions = _DEFINITION_LIST.validate_json(text)
        except PydanticValidationError as exc:
            raise ConfigurationError("Invalid feature definition JSON", cause=exc) from exc
        self.load(definitions)

    def save(self) -> list[FeatureDefinition]:
        return [d.model_copy(deep=True) for d in list(self._features.values())]

    def save_to_dicts(self) -> list[dict[str, Any]]:
        return [d.to_dict() for d in list(self._features.values())]

    def save_to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.save_to_dicts(), indent=indent)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _copy_of(self, feature: str) -> FeatureDefinition:
        current = self._features.get(feature)
        if current is None:
            raise UndefinedFeatureError(feature)
        return current.model_copy(deep=True)

    def _publish(self, feature: str, definition: FeatureDefinition) -> None:
        # caller holds the lock; readers keep iterating the previous mapping
        features = dict(self._features)
        features[feature] = definition
        self._features = features

    def _changed(self, feature: str) -> None:
        _log.debug("feature_definition.changed", feature=feature)
        self._notify(feature)


__all__ = ["InMemoryFeatureDefinitionProvider"]
