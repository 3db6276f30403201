"""Unit tests for the feature definition models."""

from __future__ import annotations

from feature_switches.definitions import FeatureDefinition, FilterDefinition, FilterGroupDefinition


def _definition() -> FeatureDefinition:
    return FeatureDefinition(
        name="Checkout",
        is_on=True,
        off_value="v1",
        on_value="v1",
        filters=[
            FilterDefinition(name="OnOff", settings={"Setting": True}),
            FilterDefinition(name="Customer", settings={"Customers": ["acme"]}, group="Beta"),
        ],
        filter_groups=[FilterGroupDefinition(name="Beta", is_on=True, on_value="v2")],
    )


class TestFeatureDefinitionSerialization:
    def test_to_dict_uses_pascal_case(self) -> None:
        data = _definition().to_dict()
        assert data["Name"] == "Checkout"
        assert data["IsOn"] is True
        assert data["OffValue"] == "v1"
        assert data["Filters"][1] == {
            "Name": "Customer",
            "Settings": {"Customers": ["acme"]},
            "Group": "Beta",
        }
        assert data["FilterGroups"] == [{"Name": "Beta", "IsOn": True, "OnValue": "v2"}]

    def test_from_dict_round_trip(self) -> None:
        original = _definition()
        assert FeatureDefinition.from_dict(original.to_dict()) == original

    def test_unknown_fields_are_ignored(self) -> None:
        definition = FeatureDefinition.from_dict(
            {"Name": "A", "IsOn": True, "Owner": "team-x", "Filters": [{"Name": "OnOff", "Extra": 1}]}
        )
        assert definition.name == "A"
        assert definition.filters[0].name == "OnOff"
        assert definition.filters[0].group is None

    def test_defaults(self) -> None:
        definition = FeatureDefinition(name="A")
        assert definition.is_on is False
        assert definition.off_value is None
        assert definition.on_value is None
        assert definition.filters == []
        assert definition.filter_groups == []

    def test_snake_case_names_are_accepted(self) -> None:
        definition = FeatureDefinition.from_dict({"name": "A", "is_on": True, "on_value": 3})
        assert definition.is_on is True
        assert definition.on_value == 3


class TestFeatureDefinitionLookups:
    def test_get_group(self) -> None:
        definition = _definition()
        assert definition.get_group("Beta") is definition.filter_groups[0]
        assert definition.get_group("Missing") is None

    def test_get_filter_matches_name_and_group(self) -> None:
        definition = _definition()
        assert definition.get_filter("OnOff") is definition.filters[0]
        assert definition.get_filter("Customer") is None
        assert definition.get_filter("Customer", "Beta") is definition.filters[1]

    def test_filters_for(self) -> None:
        definition = _definition()
        assert [f.name for f in definition.filters_for(None)] == ["OnOff"]
        assert [f.name for f in definition.filters_for("Beta")] == ["Customer"]
        assert definition.filters_for("Other") == []

    def test_undefined_groups(self) -> None:
        definition = FeatureDefinition(
            name="A",
            filters=[
                FilterDefinition(name="OnOff", group="X"),
                FilterDefinition(name="Session", group="X"),
                FilterDefinition(name="Customer", group="Y"),
            ],
            filter_groups=[FilterGroupDefinition(name="Y")],
        )
        assert definition.undefined_groups() == ["X"]
