"""Filters – SessionFeatureFilter and its session context."""
from __future__ import annotations

import dataclasses
from datetime import datetime

from feature_switches.filters.base import FeatureFilter, FeatureFilterEvaluationContext
from feature_switches.filters.settings import SessionFilterSettings
from feature_switches.kernel.time import as_utc, utc_now


@dataclasses.dataclass
class SessionFeatureContext:
    """Per-session state read by :class:`SessionFeatureFilter`."""
    login_time: datetime = dataclasses.field(default_factory=utc_now)


class SessionFeatureFilter(FeatureFilter):
    """On when the session logged in at or after the configured ``From``.

    Lets a rollout reach only sessions started after a switch flipped, so a
    user never sees behaviour change mid-session.
    """

    name = "Session"

    def __init__(self, session: SessionFeatureContext | None = None) -> None:
        self._session = session or SessionFeatureContext()

    @property
    def session(self) -> SessionFeatureContext:
        return self._session

    async def is_on(self, context: FeatureFilterEvaluationContext) -> bool:
        settings = context.get_settings(SessionFilterSettings)
        return as_utc(self._session.login_time) >= as_utc(settings.from_)


__all__ = ["SessionFeatureContext", "SessionFeatureFilter"]
