"""Filters – CustomerFeatureFilter."""
from __future__ import annotations

from typing import Callable

from feature_switches.filters.base import FeatureFilter, FeatureFilterEvaluationContext
from feature_switches.filters.settings import CustomerFilterSettings

CustomerResolver = Callable[[], str | None]


class CustomerFeatureFilter(FeatureFilter):
    """On when the current customer is listed in ``{"Customers": [...]}``.

    *current_customer* returns the customer of the running request, or
    ``None`` when there is none (the filter is then off).
    """

    name = "Customer"

    def __init__(self, current_customer: CustomerResolver) -> None:
        self._current_customer = current_customer

    async def is_on(self, context: FeatureFilterEvaluationContext) -> bool:
        settings = context.get_settings(CustomerFilterSettings)
        customer = self._current_customer()
        if customer is None:
            return False
        return customer in settings.customers


__all__ = ["CustomerFeatureFilter", "CustomerResolver"]
