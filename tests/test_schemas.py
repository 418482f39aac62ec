"""
Tests for the per-tool argument contracts: defaults, bounds and enumerations.
"""

import pytest

from revit_mcp.core.errors import ArgumentValidationError
from revit_mcp.core.schemas import (
    CreateDimensionsArgs,
    CreateGridArgs,
    ElementFilterArgs,
    ExportRoomDataArgs,
    MaterialQuantitiesArgs,
    ModelStatisticsArgs,
    OperateElementArgs,
    StructuralFramingArgs,
    validate_arguments,
)


class TestOperateElementContract:
    """Tests for operate_element arguments."""

    def test_defaults_filled(self):
        args = validate_arguments(OperateElementArgs, {"data": {"elementIds": [1], "action": "Hide"}})

        assert args.data.transparencyValue == 50
        assert args.data.colorValue == [255, 0, 0]

    def test_unknown_action_names_action(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(OperateElementArgs, {"data": {"elementIds": [1], "action": "Explode"}})

        assert excinfo.value.fields == ["data.action"]

    def test_transparency_out_of_range(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(
                OperateElementArgs,
                {"data": {"elementIds": [1], "action": "SetTransparency", "transparencyValue": 150}},
            )

        assert "data.transparencyValue" in excinfo.value.fields

    @pytest.mark.parametrize("color", [[255, 0], [1, 2, 3, 4]])
    def test_color_must_have_three_channels(self, color):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(
                OperateElementArgs,
                {"data": {"elementIds": [1], "action": "SetColor", "colorValue": color}},
            )

        assert "data.colorValue" in excinfo.value.fields

    def test_color_channel_out_of_range(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(
                OperateElementArgs,
                {"data": {"elementIds": [1], "action": "SetColor", "colorValue": [0, 300, 0]}},
            )

        assert excinfo.value.fields == ["data.colorValue[1]"]

    def test_empty_element_ids_rejected(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(OperateElementArgs, {"data": {"elementIds": [], "action": "Select"}})

        assert excinfo.value.fields == ["data.elementIds"]

    def test_flat_arguments_wrapped(self):
        args = validate_arguments(OperateElementArgs, {"elementIds": [7], "action": "Isolate"})

        assert args.data.elementIds == [7]
        assert args.data.action == "Isolate"


class TestElementFilterContract:
    """Tests for ai_element_filter arguments."""

    def test_missing_arguments_take_defaults(self):
        args = validate_arguments(ElementFilterArgs, None)

        assert args.data.includeTypes is False
        assert args.data.includeInstances is True
        assert args.data.filterVisibleInCurrentView is False
        assert args.data.filterFamilySymbolId is None
        assert args.data.maxElements == 50

    def test_max_elements_must_be_positive(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(ElementFilterArgs, {"data": {"maxElements": 0}})

        assert excinfo.value.fields == ["data.maxElements"]

    def test_unknown_keys_ignored(self):
        args = validate_arguments(ElementFilterArgs, {"data": {"filterCategory": "OST_Doors", "colour": "red"}})

        assert args.data.filterCategory == "OST_Doors"
        assert not hasattr(args.data, "colour")

    def test_bad_point_reports_nested_path(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(
                ElementFilterArgs,
                {"data": {"boundingBoxMin": {"x": 0, "y": 0}, "boundingBoxMax": {"x": 1, "y": 1, "z": 1}}},
            )

        assert excinfo.value.fields == ["data.boundingBoxMin.z"]


class TestGridContract:
    """Tests for create_grid arguments."""

    def test_required_counts(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(CreateGridArgs, {"xSpacing": 6000, "ySpacing": 8000})

        assert set(excinfo.value.fields) == {"xCount", "yCount"}

    def test_naming_style_enumeration(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(
                CreateGridArgs,
                {"xCount": 2, "xSpacing": 1, "yCount": 2, "ySpacing": 1, "xNamingStyle": "roman"},
            )

        assert excinfo.value.fields == ["xNamingStyle"]

    def test_spacing_must_be_positive(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(CreateGridArgs, {"xCount": 2, "xSpacing": 0, "yCount": 2, "ySpacing": 1})

        assert excinfo.value.fields == ["xSpacing"]


class TestStrictTypes:
    """Mismatched types are rejected instead of coerced."""

    GRID = {"xCount": 5, "xSpacing": 6000, "yCount": 4, "ySpacing": 8000}

    def test_string_count_rejected(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(CreateGridArgs, {**self.GRID, "xCount": "5"})

        assert excinfo.value.fields == ["xCount"]

    def test_bool_spacing_rejected(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(CreateGridArgs, {**self.GRID, "ySpacing": True})

        assert excinfo.value.fields == ["ySpacing"]

    def test_numeric_string_spacing_rejected(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(CreateGridArgs, {**self.GRID, "xSpacing": "6000"})

        assert excinfo.value.fields == ["xSpacing"]

    def test_float_count_rejected(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(CreateGridArgs, {**self.GRID, "yCount": 4.0})

        assert excinfo.value.fields == ["yCount"]

    def test_integer_accepted_as_float(self):
        args = validate_arguments(CreateGridArgs, {**self.GRID, "elevation": 3000})

        assert args.elevation == 3000

    def test_string_boolean_rejected(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(ElementFilterArgs, {"data": {"includeTypes": "yes"}})

        assert excinfo.value.fields == ["data.includeTypes"]

    def test_integer_boolean_rejected(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(ElementFilterArgs, {"data": {"includeInstances": 0}})

        assert excinfo.value.fields == ["data.includeInstances"]

    def test_string_element_id_rejected(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(OperateElementArgs, {"data": {"elementIds": ["101"], "action": "Select"}})

        assert excinfo.value.fields == ["data.elementIds[0]"]

    def test_string_point_coordinate_rejected(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(
                CreateDimensionsArgs,
                {"dimensions": [{"elementIds": [1, 2], "linePoint": {"x": "0", "y": 0, "z": 0}}]},
            )

        assert excinfo.value.fields == ["dimensions[0].linePoint.x"]

    def test_optional_flag_keeps_strictness(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(ExportRoomDataArgs, {"includeUnplacedRooms": "true"})

        assert excinfo.value.fields == ["includeUnplacedRooms"]


class TestOtherContracts:
    """Tests for the remaining tools."""

    def test_framing_defaults(self):
        args = validate_arguments(
            StructuralFramingArgs,
            {"levelName": "Level 1", "xMin": 0, "xMax": 10000, "yMin": 0, "yMax": 8000, "spacing": 2000},
        )

        assert args.directionEdge == "bottom"
        assert args.justify == "center"
        assert args.beamTypeName is None
        assert args.is3d is False

    def test_framing_direction_edge_enumeration(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(
                StructuralFramingArgs,
                {"levelName": "L1", "xMin": 0, "xMax": 1, "yMin": 0, "yMax": 1,
                 "spacing": 1, "directionEdge": "diagonal"},
            )

        assert excinfo.value.fields == ["directionEdge"]

    def test_dimensions_need_at_least_one_entry(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(CreateDimensionsArgs, {"dimensions": []})

        assert excinfo.value.fields == ["dimensions"]

    def test_dimension_entry_path(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(CreateDimensionsArgs, {"dimensions": [{"elementIds": [1, 2]}, {}]})

        assert excinfo.value.fields == ["dimensions[1].elementIds"]

    def test_optional_flags_stay_unset(self):
        assert validate_arguments(ModelStatisticsArgs, {}).includeDetailedTypes is None
        assert validate_arguments(ExportRoomDataArgs, {}).includeUnplacedRooms is None
        assert validate_arguments(MaterialQuantitiesArgs, {}).categoryFilters is None

    def test_wrong_type_reported(self):
        with pytest.raises(ArgumentValidationError) as excinfo:
            validate_arguments(MaterialQuantitiesArgs, {"categoryFilters": "OST_Walls"})

        assert excinfo.value.fields == ["categoryFilters"]
        assert "categoryFilters:" in excinfo.value.message
