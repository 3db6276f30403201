"""Definitions – FeatureDefinition, FilterDefinition, FilterGroupDefinition.

The external (serialized) form uses PascalCase keys::

    {
        "Name": "NewCheckout",
        "IsOn": true,
        "OffValue": false,
        "OnValue": true,
        "Filters": [{"Name": "OnOff", "Settings": {"Setting": true}, "Group": null}],
        "FilterGroups": [{"Name": "Beta", "IsOn": true, "OnValue": true}]
    }

Unknown keys are ignored so stored documents may carry extra metadata.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class _DefinitionModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the PascalCase JSON-compatible form."""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Any:
        return cls.model_validate(data)


class FilterGroupDefinition(_DefinitionModel):
    """A named bundle of AND'ed filters with the value it selects."""

    name: str
    is_on: bool = False
    on_value: Any = None


class FilterDefinition(_DefinitionModel):
    """A filter applied to a feature.

    ``name`` identifies the registered filter, ``settings`` is the opaque
    payload that filter decodes, ``group`` is ``None`` for ungrouped filters.
    """

    name: str
    settings: Any = None
    group: str | None = None


class FeatureDefinition(_DefinitionModel):
    """The stored definition of a feature switch."""

    name: str
    is_on: bool = False
    off_value: Any = None
    on_value: Any = None
    filters: list[FilterDefinition] = Field(default_factory=list)
    filter_groups: list[FilterGroupDefinition] = Field(default_factory=list)

    def get_group(self, group: str) -> FilterGroupDefinition | None:
        for candidate in self.filter_groups:
            if candidate.name == group:
                return candidate
        return None

    def get_filter(self, filter_name: str, group: str | None = None) -> FilterDefinition | None:
        for candidate in self.filters:
            if candidate.name == filter_name and candidate.group == group:
                return candidate
        return None

    def filters_for(self, group: str | None) -> list[FilterDefinition]:
        """Filters attached to *group* (``None`` = ungrouped), in definition order."""
        return [f for f in self.filters if f.group == group]

    def undefined_groups(self) -> list[str]:
        """Group names referenced by filters but missing from ``filter_groups``."""
        defined = {g.name for g in self.filter_groups}
        missing: list[str] = []
        for f in self.filters:
            if f.group is not None and f.group not in defined and f.group not in missing:
                missing.append(f.group)
        return missing


__all__ = ["FeatureDefinition", "FilterDefinition", "FilterGroupDefinition"]
