"""Filters – DateTimeFeatureFilter."""
from __future__ import annotations

from feature_switches.filters.base import FeatureFilter, FeatureFilterEvaluationContext
from feature_switches.filters.settings import DateTimeFilterSettings
from feature_switches.kernel.time import Clock, SystemClock, as_utc


class DateTimeFeatureFilter(FeatureFilter):
    """On while the clock is inside ``[From, To]``; both bounds are optional.

    Naive datetimes in the settings are interpreted as UTC.
    """

    name = "DateTime"

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    async def is_on(self, context: FeatureFilterEvaluationContext) -> bool:
        settings = context.get_settings(DateTimeFilterSettings)
        now = as_utc(self._clock.now())
        if settings.from_ is not None and now < as_utc(settings.from_):
            return False
        if settings.to is not None and now > as_utc(settings.to):
            return False
        return True


__all__ = ["DateTimeFeatureFilter"]
