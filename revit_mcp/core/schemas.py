# =============================================================================
# core/schemas.py  —  Argument contracts for every Revit tool
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares, per tool, which arguments the agent may send: their types,
#   bounds, closed enumerations, optionality and defaults.  Each contract is
#   a pydantic model, so the same class gives us:
#     1. validation + default filling (validate_arguments below)
#     2. the JSON schema advertised to the agent over MCP
#
# UNITS AND SENTINELS:
#   - All coordinates, spacings and elevations are millimeters from the
#     project base point.
#   - Optional ids ("no family filter", "current view", "default style")
#     default to None here.  The normalizers write them as -1 on the wire.
#
# STRICT TYPES:
#   Scalars use pydantic's Strict* types.  "5" is not a count, true is not
#   a spacing and 0 is not a boolean.  An integer is still a valid float.
#
# FIELD NAMES:
#   Field names are camelCase because they are the agent contract AND the
#   Revit wire contract.  Renaming one is a breaking protocol change.
# =============================================================================

from typing import Annotated, Any, Literal, Optional

from pydantic import (
    BaseModel,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    model_validator,
)

from revit_mcp.core.errors import ArgumentValidationError


# -----------------------------------------------------------------------------
# Shared building blocks
# -----------------------------------------------------------------------------
class Point3D(BaseModel):
    """A 3D point in millimeters."""

    x: StrictFloat = Field(description="X coordinate in millimeters")
    y: StrictFloat = Field(description="Y coordinate in millimeters")
    z: StrictFloat = Field(description="Z coordinate in millimeters")


ElementId = StrictInt
ColorChannel = Annotated[StrictInt, Field(ge=0, le=255)]

OperationType = Literal[
    "Select",
    "SelectionBox",
    "SetColor",
    "SetTransparency",
    "Delete",
    "Hide",
    "TempHide",
    "Isolate",
    "Unhide",
    "ResetIsolate",
]
NamingStyle = Literal["alphabetic", "numeric"]
DirectionEdge = Literal["bottom", "right", "top", "left"]
BeamJustification = Literal["beginning", "center", "end", "directionline"]


class _DataEnvelope(BaseModel):
    """Base for tools whose arguments travel inside a ``data`` object.

    A flat argument object (the inner fields at top level) is wrapped into
    ``{"data": ...}`` before validation.
    """

    @model_validator(mode="before")
    @classmethod
    def _wrap_flat_arguments(cls, value: Any) -> Any:
        if isinstance(value, dict) and "data" not in value:
            return {"data": value}
        return value


# -----------------------------------------------------------------------------
# ai_element_filter
# -----------------------------------------------------------------------------
class ElementFilterData(BaseModel):
    filterCategory: Optional[StrictStr] = Field(
        default=None,
        description="Revit built-in category name (e.g., 'OST_Walls', 'OST_Doors', "
        "'OST_Windows'). If not specified, no category filtering is applied",
    )
    filterElementType: Optional[StrictStr] = Field(
        default=None,
        description="Revit element type name (e.g., 'Wall', 'Autodesk.Revit.DB.Wall'). "
        "If not specified, no type filtering is applied",
    )
    filterFamilySymbolId: Optional[ElementId] = Field(
        default=None,
        description="Family symbol ElementId to filter by. Omit (or use -1) for no "
        "family filtering. Only applies to element instances",
    )
    includeTypes: StrictBool = Field(
        default=False,
        description="Whether to include element types (e.g., wall types, door types) in results",
    )
    includeInstances: StrictBool = Field(
        default=True,
        description="Whether to include element instances (e.g., placed walls, doors) in results",
    )
    filterVisibleInCurrentView: StrictBool = Field(
        default=False,
        description="If true, only returns elements visible in the current view. "
        "Only applies to element instances",
    )
    # boundingBoxMin and boundingBoxMax go together; the normalizer rejects
    # one without the other.
    boundingBoxMin: Optional[Point3D] = Field(
        default=None,
        description="Minimum point of spatial bounding box filter (mm). "
        "Must be used together with boundingBoxMax",
    )
    boundingBoxMax: Optional[Point3D] = Field(
        default=None,
        description="Maximum point of spatial bounding box filter (mm). "
        "Must be used together with boundingBoxMin",
    )
    maxElements: StrictInt = Field(
        default=50,
        ge=1,
        description="Maximum number of elements to return. Default is 50",
    )


class ElementFilterArgs(_DataEnvelope):
    data: ElementFilterData = Field(description="Filter settings for element query")


# -----------------------------------------------------------------------------
# analyze_model_statistics
# -----------------------------------------------------------------------------
class ModelStatisticsArgs(BaseModel):
    includeDetailedTypes: Optional[StrictBool] = Field(
        default=None,
        description="If true, includes detailed breakdown of types and families within "
        "each category. Defaults to true",
    )


# -----------------------------------------------------------------------------
# create_dimensions
# -----------------------------------------------------------------------------
class DimensionSpec(BaseModel):
    elementIds: list[ElementId] = Field(
        min_length=1,
        description="Element IDs to dimension between (at least 2 elements required "
        "for meaningful dimensions)",
    )
    startPoint: Optional[Point3D] = Field(
        default=None,
        description="Dimension start point (mm). Optional - will be calculated from "
        "elements if not provided",
    )
    endPoint: Optional[Point3D] = Field(
        default=None,
        description="Dimension end point (mm). Optional - will be calculated from "
        "elements if not provided",
    )
    linePoint: Optional[Point3D] = Field(
        default=None,
        description="Dimension line point - location of dimension line (mm). If not "
        "provided, will be calculated automatically from element positions",
    )
    dimensionType: StrictStr = Field(
        default="Linear",
        description="Dimension type (e.g., 'Linear', 'Angular', 'Radial')",
    )
    dimensionStyleId: Optional[ElementId] = Field(
        default=None,
        description="Dimension style ID. Omit (or use -1) for the default style",
    )
    viewId: Optional[ElementId] = Field(
        default=None,
        description="View ID where dimension will be created. Omit (or use -1) for "
        "the current active view",
    )
    referencePlaneName: Optional[StrictStr] = Field(
        default=None,
        description="Reference plane name in the Generic Model family to use for "
        "dimensioning. If not specified, a dialog will appear showing all available "
        "reference planes for the user to select. This determines the dimension "
        "orientation (horizontal/vertical).",
    )
    options: dict[str, Any] = Field(
        default={},
        description="Additional dimension parameters as key-value pairs",
    )


class CreateDimensionsArgs(BaseModel):
    dimensions: list[DimensionSpec] = Field(
        min_length=1,
        description="Array of dimension specifications to create. Each dimension "
        "defines start/end points, optional element IDs, and styling options",
    )


# -----------------------------------------------------------------------------
# create_grid
# -----------------------------------------------------------------------------
class CreateGridArgs(BaseModel):
    xCount: StrictInt = Field(gt=0, description="Number of vertical grid lines (X-axis grids)")
    xSpacing: StrictFloat = Field(gt=0, description="Spacing between X-axis grids in millimeters")
    xStartLabel: StrictStr = Field(
        default="A", description="Starting label for X-axis grids (e.g., 'A' or '1')"
    )
    xNamingStyle: NamingStyle = Field(
        default="alphabetic",
        description="Naming style for X-axis grids: 'alphabetic' or 'numeric'",
    )
    xStartPosition: StrictFloat = Field(
        default=0.0,
        description="Starting position for first X-axis grid in millimeters from project origin",
    )
    yCount: StrictInt = Field(gt=0, description="Number of horizontal grid lines (Y-axis grids)")
    ySpacing: StrictFloat = Field(gt=0, description="Spacing between Y-axis grids in millimeters")
    yStartLabel: StrictStr = Field(
        default="1", description="Starting label for Y-axis grids (e.g., '1' or 'A')"
    )
    yNamingStyle: NamingStyle = Field(
        default="numeric",
        description="Naming style for Y-axis grids: 'alphabetic' or 'numeric'",
    )
    yStartPosition: StrictFloat = Field(
        default=0.0,
        description="Starting position for first Y-axis grid in millimeters from project origin",
    )
    xExtentMin: StrictFloat = Field(
        default=0.0,
        description="Minimum extent along X-axis in millimeters (where Y-axis grids start)",
    )
    xExtentMax: StrictFloat = Field(
        default=50000.0,
        description="Maximum extent along X-axis in millimeters (where Y-axis grids end)",
    )
    yExtentMin: StrictFloat = Field(
        default=0.0,
        description="Minimum extent along Y-axis in millimeters (where X-axis grids start)",
    )
    yExtentMax: StrictFloat = Field(
        default=50000.0,
        description="Maximum extent along Y-axis in millimeters (where X-axis grids end)",
    )
    elevation: StrictFloat = Field(
        default=0.0, description="Z-coordinate elevation for grid lines in millimeters"
    )


# -----------------------------------------------------------------------------
# create_structural_framing_system
# -----------------------------------------------------------------------------
class StructuralFramingArgs(BaseModel):
    levelName: StrictStr = Field(
        description="Name of the level to place the beam system on (e.g., 'Level 1')"
    )
    xMin: StrictFloat = Field(description="Minimum X coordinate of rectangular boundary in millimeters")
    xMax: StrictFloat = Field(description="Maximum X coordinate of rectangular boundary in millimeters")
    yMin: StrictFloat = Field(description="Minimum Y coordinate of rectangular boundary in millimeters")
    yMax: StrictFloat = Field(description="Maximum Y coordinate of rectangular boundary in millimeters")
    directionEdge: DirectionEdge = Field(
        default="bottom",
        description="Which edge defines the beam direction: 'bottom' (beams run "
        "perpendicular, along Y), 'right' (along X), 'top' (along Y), or 'left' (along X)",
    )
    spacing: StrictFloat = Field(gt=0, description="Spacing between beams in millimeters")
    justify: BeamJustification = Field(
        default="center",
        description="Beam justification along the direction edge: 'beginning', "
        "'center', 'end', or 'directionline'",
    )
    beamTypeName: Optional[StrictStr] = Field(
        default=None,
        description="Beam family type name (e.g., 'W-Wide Flange-Column: W12x26'). "
        "If not provided, uses first available beam type",
    )
    elevation: StrictFloat = Field(default=0.0, description="Elevation offset from level in millimeters")
    is3d: StrictBool = Field(default=False, description="Whether to create a 3D beam system")


# -----------------------------------------------------------------------------
# export_room_data
# -----------------------------------------------------------------------------
class ExportRoomDataArgs(BaseModel):
    includeUnplacedRooms: Optional[StrictBool] = Field(
        default=None, description="Include rooms that have not been placed in the model"
    )
    includeNotEnclosedRooms: Optional[StrictBool] = Field(
        default=None, description="Include rooms that are not properly enclosed by walls"
    )


# -----------------------------------------------------------------------------
# get_material_quantities
# -----------------------------------------------------------------------------
class MaterialQuantitiesArgs(BaseModel):
    categoryFilters: Optional[list[StrictStr]] = Field(
        default=None,
        description="Optional list of category filters (e.g., ['OST_Walls', "
        "'OST_Floors']). If not provided, all categories are included.",
    )
    selectedElementsOnly: Optional[StrictBool] = Field(
        default=None,
        description="If true, only calculate quantities for currently selected elements",
    )


# -----------------------------------------------------------------------------
# operate_element
# -----------------------------------------------------------------------------
class OperateElementData(BaseModel):
    elementIds: list[ElementId] = Field(
        min_length=1, description="List of element IDs to operate on"
    )
    action: OperationType = Field(
        description="Operation to perform:\n"
        "  - Select: Select the elements in the UI\n"
        "  - SelectionBox: Show selection box around elements\n"
        "  - SetColor: Apply color override to elements\n"
        "  - SetTransparency: Apply transparency override to elements\n"
        "  - Delete: Delete the elements from the model\n"
        "  - Hide: Hide elements in current view\n"
        "  - TempHide: Temporarily hide elements\n"
        "  - Isolate: Isolate elements (hide all others)\n"
        "  - Unhide: Unhide previously hidden elements\n"
        "  - ResetIsolate: Reset isolation (show all elements)"
    )
    transparencyValue: StrictInt = Field(
        default=50,
        ge=0,
        le=100,
        description="Transparency value (0-100). Higher values = more transparent. "
        "Only used when action is SetTransparency",
    )
    colorValue: list[ColorChannel] = Field(
        default=[255, 0, 0],
        min_length=3,
        max_length=3,
        description="RGB color values [R, G, B] where each value is 0-255. Default is "
        "red [255, 0, 0]. Only used when action is SetColor",
    )


class OperateElementArgs(_DataEnvelope):
    data: OperateElementData = Field(
        description="Operation settings for element manipulation"
    )


# =============================================================================
# Validation entry point
# =============================================================================
def _field_path(loc: tuple) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path or "arguments"


def validate_arguments(schema: type[BaseModel], raw: Any) -> BaseModel:
    """Validate raw agent arguments against ``schema`` and fill defaults.

    Raises:
        ArgumentValidationError: naming every offending field and the
            constraint it violates.
    """
    try:
        return schema.model_validate({} if raw is None else raw)
    except ValidationError as exc:
        problems = [(_field_path(err["loc"]), err["msg"]) for err in exc.errors()]
        raise ArgumentValidationError(problems, cause=exc) from exc
