"""Filters – OnOffFeatureFilter."""
from __future__ import annotations

from feature_switches.filters.base import FeatureFilter, FeatureFilterEvaluationContext
from feature_switches.filters.settings import ScalarValueSetting


class OnOffFeatureFilter(FeatureFilter):
    """Returns the boolean literal stored in ``{"Setting": bool}``."""

    name = "OnOff"

    async def is_on(self, context: FeatureFilterEvaluationContext) -> bool:
        return context.get_settings(ScalarValueSetting[bool]).setting


__all__ = ["OnOffFeatureFilter"]
