"""Filters – filter contracts and the per-filter evaluation context.

Two contracts exist and the evaluation engine branches on them:

* :class:`FeatureFilter`: decides from the filter settings alone.
* :class:`ContextualFeatureFilter`: additionally receives the evaluation
  context the caller passed to ``FeatureService``.
"""
from __future__ import annotations

import abc
import functools
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar, Union

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from feature_switches.kernel.errors import InvalidFilterSettingsError

T = TypeVar("T")
C = TypeVar("C")


@functools.lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _match_keys(target: Any, data: Any) -> Any:
    """Rename keys of *data* that match a field of *target* ignoring case."""
    if not (isinstance(data, Mapping) and isinstance(target, type) and issubclass(target, BaseModel)):
        return data
    known: dict[str, str] = {}
    for name, field in target.model_fields.items():
        key = field.alias or name
        known[key.lower()] = key
        known.setdefault(name.lower(), key)
    return {known.get(str(k).lower(), k): v for k, v in data.items()}


class FeatureFilterEvaluationContext:
    """Settings of one filter definition, scoped to the feature being evaluated."""

    def __init__(self, feature: str, settings: Any, filter_name: str | None = None) -> None:
        self.feature = feature
        self.settings = settings
        self.filter_name = filter_name

    def get_settings(self, target: type[T] | Any) -> T:
        """Decode the settings payload into *target*.

        Raises :class:`InvalidFilterSettingsError` when the payload does not fit.
        """
        try:
            return _adapter(target).validate_python(_match_keys(target, self.settings))
        except PydanticValidationError as exc:
            raise InvalidFilterSettingsError(
                self.filter_name or getattr(target, "__name__", str(target)),
                self.feature,
                f"{exc.error_count()} validation error(s)",
                cause=exc,
            ) from exc

    def try_get_settings(self, target: type[T] | Any) -> T | None:
        """Like :meth:`get_settings` but returns ``None`` when decoding fails."""
        try:
            return self.get_settings(target)
        except InvalidFilterSettingsError:
            return None

    def __repr__(self) -> str:
        return f"FeatureFilterEvaluationContext(feature={self.feature!r}, filter={self.filter_name!r})"


class FeatureFilter(abc.ABC):
    """A filter that only looks at its settings (and its own collaborators)."""

    name: ClassVar[str]

    @abc.abstractmethod
    async def is_on(self, context: FeatureFilterEvaluationContext) -> bool: ...


class ContextualFeatureFilter(abc.ABC, Generic[C]):
    """A filter that also receives the caller supplied evaluation context."""

    name: ClassVar[str]

    @abc.abstractmethod
    async def is_on(
        self, context: FeatureFilterEvaluationContext, evaluation_context: C | None
    ) -> bool: ...


AnyFeatureFilter = Union[FeatureFilter, ContextualFeatureFilter[Any]]


__all__ = [
    "AnyFeatureFilter",
    "ContextualFeatureFilter",
    "FeatureFilter",
    "FeatureFilterEvaluationContext",
]
