"""Definitions – FeatureDefinitionProvider port and change notification."""
from __future__ import annotations

import abc
import dataclasses
from typing import Callable

from feature_switches.definitions.models import FeatureDefinition


@dataclasses.dataclass(frozen=True)
class FeatureDefinitionChanged:
    """Emitted whenever the definition of *feature* is created, updated or removed."""
    feature: str


ChangeListener = Callable[[FeatureDefinitionChanged], None]


class FeatureDefinitionProvider(abc.ABC):
    """Port: source of feature definitions.

    Implementations call :meth:`_notify` after every mutation so that
    subscribers (evaluation caches) can drop stale results.
    """

    def __init__(self) -> None:
        self._listeners: list[ChangeListener] = []

    @abc.abstractmethod
    async def get_features(self) -> list[str]: ...

    @abc.abstractmethod
    async def get_feature_definition(self, feature: str) -> FeatureDefinition | None: ...

    def subscribe(self, listener: ChangeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, feature: str) -> None:
        event = FeatureDefinitionChanged(feature)
        for listener in list(self._listeners):
            listener(event)


__all__ = ["ChangeListener", "FeatureDefinitionChanged", "FeatureDefinitionProvider"]
