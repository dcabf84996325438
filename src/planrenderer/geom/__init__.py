"""Geometry utilities for concept plan drawings.

This module maps plot coordinates to drawing pixels and derives the
per-room geometry (rectangles, openings, cuts and labels) the layer
compositor draws.
"""

from .builder import (
    PlanGeometry,
    RoomGeometry,
    build_plan_geometry,
    clamp_door_offset,
    is_wet_area,
    label_font_size,
)
from .mapper import CoordinateMapper
from .walls import WALL_PLACEMENTS, feature_anchor

__all__ = [
    "CoordinateMapper",
    "PlanGeometry",
    "RoomGeometry",
    "WALL_PLACEMENTS",
    "build_plan_geometry",
    "clamp_door_offset",
    "feature_anchor",
    "is_wet_area",
    "label_font_size",
]
