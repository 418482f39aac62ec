# =============================================================================
# core/normalizers.py  —  Validated arguments → Revit command payloads
# =============================================================================
#
# WHAT THIS FILE DOES:
#   One pure function per tool.  Each takes the validated pydantic model from
#   core/schemas.py and returns the exact JSON-serializable dict the Revit
#   plugin expects for that command.
#
# WHAT A NORMALIZER MAY DO:
#   - fill defaults the schema leaves open (e.g. includeDetailedTypes → True)
#   - translate "unset" (None) into the wire sentinel (-1, [], False)
#   - inject protocol constants the agent never sees (layoutRule)
#   - enforce pairings the schema only documents (bounding box min/max)
#
# WHAT IT MAY NOT DO:
#   Touch the network, read configuration, or depend on anything but its
#   argument.  Same input, same payload, every time.
# =============================================================================

from typing import Any, Optional

from revit_mcp.core.errors import ArgumentValidationError
from revit_mcp.core.models import UNSET_ID
from revit_mcp.core.schemas import (
    CreateDimensionsArgs,
    CreateGridArgs,
    DimensionSpec,
    ElementFilterArgs,
    ExportRoomDataArgs,
    MaterialQuantitiesArgs,
    ModelStatisticsArgs,
    OperateElementArgs,
    Point3D,
    StructuralFramingArgs,
)

# Only one beam layout algorithm is implemented by the plugin today.
FIXED_DISTANCE_LAYOUT = "fixed_distance"


def _id_or_unset(value: Optional[int]) -> int:
    return UNSET_ID if value is None else value


def _point(point: Point3D) -> dict[str, float]:
    return {"x": point.x, "y": point.y, "z": point.z}


def _drop_none(payload: dict[str, Any]) -> dict[str, Any]:
    """Remove keys whose value is None; unset strings and points are not sent."""
    return {key: value for key, value in payload.items() if value is not None}


# -----------------------------------------------------------------------------
# Query tools
# -----------------------------------------------------------------------------
def normalize_element_filter(args: ElementFilterArgs) -> dict[str, Any]:
    data = args.data
    has_min = data.boundingBoxMin is not None
    has_max = data.boundingBoxMax is not None
    if has_min != has_max:
        missing = "data.boundingBoxMax" if has_min else "data.boundingBoxMin"
        raise ArgumentValidationError(
            [(missing, "boundingBoxMin and boundingBoxMax must be supplied together")]
        )

    return {
        "data": _drop_none({
            "filterCategory": data.filterCategory,
            "filterElementType": data.filterElementType,
            "filterFamilySymbolId": _id_or_unset(data.filterFamilySymbolId),
            "includeTypes": data.includeTypes,
            "includeInstances": data.includeInstances,
            "filterVisibleInCurrentView": data.filterVisibleInCurrentView,
            "boundingBoxMin": _point(data.boundingBoxMin) if has_min else None,
            "boundingBoxMax": _point(data.boundingBoxMax) if has_max else None,
            "maxElements": data.maxElements,
        })
    }


def normalize_model_statistics(args: ModelStatisticsArgs) -> dict[str, Any]:
    include = args.includeDetailedTypes
    return {"includeDetailedTypes": True if include is None else include}


def normalize_room_export(args: ExportRoomDataArgs) -> dict[str, Any]:
    return {
        "includeUnplacedRooms": bool(args.includeUnplacedRooms),
        "includeNotEnclosedRooms": bool(args.includeNotEnclosedRooms),
    }


def normalize_material_quantities(args: MaterialQuantitiesArgs) -> dict[str, Any]:
    return {
        "categoryFilters": list(args.categoryFilters or []),
        "selectedElementsOnly": bool(args.selectedElementsOnly),
    }


# -----------------------------------------------------------------------------
# Authoring tools
# -----------------------------------------------------------------------------
def _dimension(spec: DimensionSpec) -> dict[str, Any]:
    return _drop_none({
        "elementIds": list(spec.elementIds),
        "startPoint": _point(spec.startPoint) if spec.startPoint else None,
        "endPoint": _point(spec.endPoint) if spec.endPoint else None,
        "linePoint": _point(spec.linePoint) if spec.linePoint else None,
        "dimensionType": spec.dimensionType,
        "dimensionStyleId": _id_or_unset(spec.dimensionStyleId),
        "viewId": _id_or_unset(spec.viewId),
        "referencePlaneName": spec.referencePlaneName,
        "options": dict(spec.options),
    })


def normalize_dimensions(args: CreateDimensionsArgs) -> dict[str, Any]:
    return {"dimensions": [_dimension(spec) for spec in args.dimensions]}


def normalize_grid(args: CreateGridArgs) -> dict[str, Any]:
    return {
        "xCount": args.xCount,
        "xSpacing": args.xSpacing,
        "xStartLabel": args.xStartLabel,
        "xNamingStyle": args.xNamingStyle,
        "xStartPosition": args.xStartPosition,
        "yCount": args.yCount,
        "ySpacing": args.ySpacing,
        "yStartLabel": args.yStartLabel,
        "yNamingStyle": args.yNamingStyle,
        "yStartPosition": args.yStartPosition,
        "xExtentMin": args.xExtentMin,
        "xExtentMax": args.xExtentMax,
        "yExtentMin": args.yExtentMin,
        "yExtentMax": args.yExtentMax,
        "elevation": args.elevation,
    }


def normalize_structural_framing(args: StructuralFramingArgs) -> dict[str, Any]:
    return _drop_none({
        "levelName": args.levelName,
        "xMin": args.xMin,
        "xMax": args.xMax,
        "yMin": args.yMin,
        "yMax": args.yMax,
        "directionEdge": args.directionEdge,
        "layoutRule": FIXED_DISTANCE_LAYOUT,
        "spacing": args.spacing,
        "justify": args.justify,
        "beamTypeName": args.beamTypeName,
        "elevation": args.elevation,
        "is3d": args.is3d,
    })


def normalize_operate_element(args: OperateElementArgs) -> dict[str, Any]:
    data = args.data
    return {
        "data": {
            "elementIds": list(data.elementIds),
            "action": data.action,
            "transparencyValue": data.transparencyValue,
            "colorValue": list(data.colorValue),
        }
    }
