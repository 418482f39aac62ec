# =============================================================================
# tools/catalog.py  —  The eight Revit tools, declared as data
# =============================================================================
#
# Each entry wires a schema, a normalizer and a formatter to a Revit command
# name.  The description is what the calling LLM reads to decide WHEN to use
# the tool, so it says what the tool does, what it returns and in which units.
#
# TOOL NAMING:
#   The tool name IS the Revit command name.  The plugin dispatches on it, so
#   these strings are part of the wire protocol.
#
#   Query tools (read-only):
#     ai_element_filter, analyze_model_statistics,
#     export_room_data, get_material_quantities
#   Authoring tools (change the model or the view):
#     create_dimensions, create_grid, create_structural_framing_system,
#     operate_element
# =============================================================================

from revit_mcp.core import formatters, normalizers, schemas
from revit_mcp.tools.registry import ToolRegistry, ToolSpec

ELEMENT_FILTER = ToolSpec(
    name="ai_element_filter",
    description=(
        "Advanced AI-powered element filtering with category, type, family, spatial, "
        "and visibility filters. Returns detailed element information including "
        "geometry, parameters, and relationships."
    ),
    schema=schemas.ElementFilterArgs,
    normalize=normalizers.normalize_element_filter,
    format_success=formatters.format_element_list,
    failure_prefix="Element filter failed",
)

MODEL_STATISTICS = ToolSpec(
    name="analyze_model_statistics",
    description=(
        "Analyze model complexity with comprehensive statistics including element "
        "counts by category, type, family, and level. Returns total counts for "
        "elements, types, families, views, and sheets. Includes level-by-level "
        "breakdown of element distribution. Useful for project analysis and reporting."
    ),
    schema=schemas.ModelStatisticsArgs,
    normalize=normalizers.normalize_model_statistics,
    format_success=formatters.json_echo("statistic"),
    failure_prefix="Failed to analyze model statistics",
)

CREATE_DIMENSIONS = ToolSpec(
    name="create_dimensions",
    description=(
        "Create dimension annotations between elements to document spacing and "
        "alignment. Requires element IDs to dimension between. System will "
        "auto-calculate dimension lines and show a dialog for reference plane "
        "selection if needed."
    ),
    schema=schemas.CreateDimensionsArgs,
    normalize=normalizers.normalize_dimensions,
    format_success=formatters.created_ids("dimension"),
    failure_prefix="Dimension creation failed",
)

CREATE_GRID = ToolSpec(
    name="create_grid",
    description=(
        "Create a grid system in Revit with smart spacing generation and auto-naming. "
        "Supports alphabetic (A, B, C...) or numeric (1, 2, 3...) naming styles. "
        "Automatically handles duplicate names by incrementing (A -> A1). All "
        "coordinates are from project base point in millimeters (mm). X-axis grids "
        "are vertical lines, Y-axis grids are horizontal lines."
    ),
    schema=schemas.CreateGridArgs,
    normalize=normalizers.normalize_grid,
    format_success=formatters.json_echo("grid"),
    failure_prefix="Failed to create grid system",
)

CREATE_STRUCTURAL_FRAMING = ToolSpec(
    name="create_structural_framing_system",
    description=(
        "Create a structural beam framing system in Revit within a rectangular "
        "boundary. Beams are automatically spaced at fixed intervals perpendicular "
        "to the specified direction edge. Supports configurable spacing, "
        "justification, and optional beam type selection. All coordinates are from "
        "project base point in millimeters (mm)."
    ),
    schema=schemas.StructuralFramingArgs,
    normalize=normalizers.normalize_structural_framing,
    format_success=formatters.json_echo("beam"),
    failure_prefix="Failed to create structural framing system",
)

EXPORT_ROOM_DATA = ToolSpec(
    name="export_room_data",
    description=(
        "Extract all rooms with detailed properties including area, volume, "
        "perimeter, and parameters. Returns room data with measurements in imperial "
        "units (square feet, cubic feet). Useful for space planning and area "
        "calculations."
    ),
    schema=schemas.ExportRoomDataArgs,
    normalize=normalizers.normalize_room_export,
    format_success=formatters.json_echo("room"),
    failure_prefix="Failed to export room data",
)

MATERIAL_QUANTITIES = ToolSpec(
    name="get_material_quantities",
    description=(
        "Calculate material quantities and takeoffs with area and volume "
        "calculations per material. Returns material data with area in square feet "
        "and volume in cubic feet. Useful for cost estimation, material planning, "
        "and quantity surveying."
    ),
    schema=schemas.MaterialQuantitiesArgs,
    normalize=normalizers.normalize_material_quantities,
    format_success=formatters.json_echo("material"),
    failure_prefix="Failed to get material quantities",
)

OPERATE_ELEMENT = ToolSpec(
    name="operate_element",
    description=(
        "Modify element properties such as selection, visibility, color, and "
        "transparency. Supports operations like select, hide, isolate, delete, and "
        "color/transparency overrides."
    ),
    schema=schemas.OperateElementArgs,
    normalize=normalizers.normalize_operate_element,
    format_success=formatters.format_operation,
    failure_prefix="Operation failed",
)

ALL_TOOLS = (
    ELEMENT_FILTER,
    MODEL_STATISTICS,
    CREATE_DIMENSIONS,
    CREATE_GRID,
    CREATE_STRUCTURAL_FRAMING,
    EXPORT_ROOM_DATA,
    MATERIAL_QUANTITIES,
    OPERATE_ELEMENT,
)


def build_registry() -> ToolRegistry:
    """Return a fresh registry holding every Revit tool."""
    return ToolRegistry(list(ALL_TOOLS))
