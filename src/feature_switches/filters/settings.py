"""Filters – settings payload shapes of the built-in filters."""

import enum
from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

T = TypeVar("T")


class _SettingsModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )


class ScalarValueSetting(_SettingsModel, Generic[T]):
    """A single-value setting, serialised as ``{"Setting": value}``."""
    setting: T


class DateTimeFilterSettings(_SettingsModel):
    """Inclusive time window; a missing bound is unconstrained."""
    from_: datetime | None = Field(default=None, alias="From")
    to: datetime | None = None


class SessionFilterSettings(_SettingsModel):
    """Sessions that logged in at or after ``From`` are on."""
    from_: datetime = Field(alias="From")


class CustomerFilterSettings(_SettingsModel):
    customers: list[str] = Field(default_factory=list)


class ParallelChange(str, enum.Enum):
    """Stages of a parallel change (expand / migrate / contract)."""

    EXPANDED = "Expanded"
    MIGRATED = "Migrated"
    CONTRACTED = "Contracted"


__all__ = [
    "CustomerFilterSettings",
    "DateTimeFilterSettings",
    "ParallelChange",
    "ScalarValueSetting",
    "SessionFilterSettings",
]
