"""Filters – FilterRegistry."""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from feature_switches.filters.base import AnyFeatureFilter, ContextualFeatureFilter, FeatureFilter
from feature_switches.filters.customer import CustomerFeatureFilter, CustomerResolver
from feature_switches.filters.date_time import DateTimeFeatureFilter
from feature_switches.filters.on_off import OnOffFeatureFilter
from feature_switches.filters.parallel_change import ParallelChangeFeatureFilter
from feature_switches.filters.session import SessionFeatureContext, SessionFeatureFilter
from feature_switches.kernel.errors import UnknownFilterError
from feature_switches.kernel.time import Clock


class FilterRegistry:
    """Filters available to the evaluation engine, looked up by name.

    Registering a filter under a name that is already taken replaces the
    previous one.
    """

    def __init__(self, filters: Iterable[AnyFeatureFilter] = ()) -> None:
        self._filters: dict[str, AnyFeatureFilter] = {}
        for feature_filter in filters:
            self.register(feature_filter)

    @classmethod
    def with_defaults(
        cls,
        *,
        clock: Clock | None = None,
        session: SessionFeatureContext | None = None,
        current_customer: CustomerResolver | None = None,
    ) -> "FilterRegistry":
        """Registry holding the built-in filters.

        ``Customer`` is only registered when *current_customer* is given.
        """
        registry = cls([
            OnOffFeatureFilter(),
            DateTimeFeatureFilter(clock),
            SessionFeatureFilter(session),
            ParallelChangeFeatureFilter(),
        ])
        if current_customer is not None:
            registry.register(CustomerFeatureFilter(current_customer))
        return registry

    def register(self, feature_filter: AnyFeatureFilter) -> "FilterRegistry":
        if not isinstance(feature_filter, (FeatureFilter, ContextualFeatureFilter)):
            raise TypeError(
                f"{type(feature_filter).__name__} is neither a FeatureFilter nor a ContextualFeatureFilter"
            )
        self._filters[feature_filter.name] = feature_filter
        return self

    def get(self, name: str) -> AnyFeatureFilter:
        try:
            return self._filters[name]
        except KeyError:
            raise UnknownFilterError(name) from None

    def names(self) -> list[str]:
        return list(self._filters)

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __iter__(self) -> Iterator[AnyFeatureFilter]:
        return iter(list(self._filters.values()))

    def __len__(self) -> int:
        return len(self._filters)


__all__ = ["FilterRegistry"]
