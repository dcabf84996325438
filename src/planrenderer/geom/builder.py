"""Geometry model builder.

Derives everything the layer compositor draws from the plan data: each
room's pixel rectangle, its wet-area flag, the anchor, rotation and width of
every door and window, the wall cut under each opening, and the label
placement. The result is a plain, immutable description; no SVG is produced
here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import (
    DEFAULT_SETTINGS,
    DOOR_OFFSET_RANGE,
    WET_AREA_TOKENS,
    RenderSettings,
)
from ..core.model import ConceptPlan, Door, Point, Room, Window
from ..core.schedule import room_dimension_text
from .mapper import CoordinateMapper
from .walls import along_wall, feature_anchor, wall_placement

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CutSpan:
    """Background-colored segment that opens a gap in a wall stroke.

    Attributes:
        start: First endpoint in drawing pixels.
        end: Second endpoint in drawing pixels.
        stroke_width: Stroke width, wider than the wall stroke.
    """

    start: Point
    end: Point
    stroke_width: float


@dataclass(frozen=True)
class FeatureGeometry:
    """Placement of a door or window symbol.

    Attributes:
        kind: "door" or "window".
        wall: Host wall side.
        anchor: Symbol origin on the room boundary, in drawing pixels.
        rotation: Symbol rotation in degrees.
        width: Opening width in drawing pixels.
        offset_ratio: Offset ratio actually used (clamped for doors).
        cut: The wall cut under the opening.
        door_type: Door type, or None for windows.
    """

    kind: str
    wall: str
    anchor: Point
    rotation: float
    width: float
    offset_ratio: float
    cut: CutSpan
    door_type: Optional[str] = None


@dataclass(frozen=True)
class LabelGeometry:
    """Room label placement.

    Attributes:
        center: Center of the room rectangle.
        font_size: Font size of the room name.
        name: Room name text.
        dimension_text: Dimension text under the name.
        name_y: Baseline of the name.
        dimension_y: Baseline of the dimension text.
    """

    center: Point
    font_size: float
    name: str
    dimension_text: str
    name_y: float
    dimension_y: float


@dataclass(frozen=True)
class RoomGeometry:
    """Drawing geometry of a single room."""

    room: Room
    x: float
    y: float
    width: float
    height: float
    wet_area: bool
    doors: Tuple[FeatureGeometry, ...]
    windows: Tuple[FeatureGeometry, ...]
    label: LabelGeometry

    @property
    def openings(self) -> Tuple[FeatureGeometry, ...]:
        """Doors then windows, in the order their cuts are drawn."""
        return self.doors + self.windows


@dataclass(frozen=True)
class PlanGeometry:
    """Drawing geometry of a whole plan.

    Attributes:
        plan: The source plan.
        unit: Display unit used for label text.
        settings: Drawing constants used for this pass.
        mapper: Coordinate mapper used for this pass.
        width: Drawing width in pixels.
        height: Drawing height in pixels.
        rooms: Room geometries in plan order.
    """

    plan: ConceptPlan
    unit: str
    settings: RenderSettings
    mapper: CoordinateMapper
    width: float
    height: float
    rooms: Tuple[RoomGeometry, ...]


def clamp_door_offset(ratio: float, bounds: Tuple[float, float] = DOOR_OFFSET_RANGE) -> float:
    """Clamp a door offset ratio so the door stays clear of the room corners."""
    low, high = bounds
    return max(low, min(high, ratio))


def is_wet_area(function: str) -> bool:
    """True if the room function names a bathroom, kitchen or laundry."""
    lowered = function.lower()
    return any(token in lowered for token in WET_AREA_TOKENS)


def label_font_size(width_px: float, settings: RenderSettings = DEFAULT_SETTINGS) -> float:
    """Label font size for a room of the given pixel width."""
    font_size = width_px / settings.label_font_divisor
    return max(settings.label_font_min, min(settings.label_font_max, font_size))


def door_width_m(door_type: str, settings: RenderSettings = DEFAULT_SETTINGS) -> float:
    """Nominal width of a door type in meters.

    Raises:
        ValueError: If the door type has no nominal width.
    """
    try:
        return dict(settings.door_widths)[door_type]
    except KeyError:
        raise ValueError(f"Unknown door type: {door_type!r}") from None


def _feature(
    kind: str,
    wall: str,
    offset_ratio: float,
    width_px: float,
    rect_px: Tuple[float, float, float, float],
    settings: RenderSettings,
    door_type: Optional[str] = None,
) -> FeatureGeometry:
    x, y, w, h = rect_px
    anchor = feature_anchor(x, y, w, h, wall, offset_ratio)
    start, end = along_wall(wall, width_px / 2, anchor)
    return FeatureGeometry(
        kind=kind,
        wall=wall,
        anchor=Point(*anchor),
        rotation=wall_placement(wall).rotation,
        width=width_px,
        offset_ratio=offset_ratio,
        cut=CutSpan(start=Point(*start), end=Point(*end), stroke_width=settings.cut_width),
        door_type=door_type,
    )


def build_door_geometry(
    door: Door,
    rect_px: Tuple[float, float, float, float],
    mapper: CoordinateMapper,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> FeatureGeometry:
    """Place a door on a room rectangle given in drawing pixels."""
    offset = clamp_door_offset(door.offset_ratio, settings.door_offset_range)
    if offset != door.offset_ratio:
        LOGGER.debug("Door offset %s on %s wall clamped to %s", door.offset_ratio, door.wall, offset)
    width_px = mapper.length(door_width_m(door.type, settings))
    return _feature("door", door.wall, offset, width_px, rect_px, settings, door_type=door.type)


def build_window_geometry(
    window: Window,
    rect_px: Tuple[float, float, float, float],
    mapper: CoordinateMapper,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> FeatureGeometry:
    """Place a window on a room rectangle given in drawing pixels.

    Unlike doors, the offset is used as given: windows may sit near wall ends.
    """
    width_px = mapper.length(window.width)
    return _feature("window", window.wall, window.offset_ratio, width_px, rect_px, settings)


def build_label_geometry(
    room: Room,
    rect_px: Tuple[float, float, float, float],
    unit: str,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> LabelGeometry:
    x, y, w, h = rect_px
    center = Point(x + w / 2, y + h / 2)
    font_size = label_font_size(w, settings)
    return LabelGeometry(
        center=center,
        font_size=font_size,
        name=room.name,
        dimension_text=room_dimension_text(room, unit),
        name_y=center.y - 2,
        dimension_y=center.y + font_size + 2,
    )


def build_room_geometry(
    room: Room,
    mapper: CoordinateMapper,
    unit: str,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> RoomGeometry:
    """Derive the drawing geometry of one room."""
    rect_px = mapper.rectangle(room.rect)
    x, y, w, h = rect_px
    return RoomGeometry(
        room=room,
        x=x,
        y=y,
        width=w,
        height=h,
        wet_area=is_wet_area(room.function),
        doors=tuple(build_door_geometry(d, rect_px, mapper, settings) for d in room.doors),
        windows=tuple(build_window_geometry(wnd, rect_px, mapper, settings) for wnd in room.windows),
        label=build_label_geometry(room, rect_px, unit, settings),
    )


def build_plan_geometry(
    plan: ConceptPlan,
    unit: Optional[str] = None,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> PlanGeometry:
    """Derive the drawing geometry of a whole plan.

    Args:
        plan: The concept plan.
        unit: Display unit for label text; defaults to the plan's unit system.
        settings: Drawing constants.

    Returns:
        The plan geometry, with rooms in plan order.
    """
    unit = unit or plan.unit_system
    mapper = CoordinateMapper.from_settings(settings)
    width, height = mapper.drawing_size(plan.plot)
    geometries = tuple(build_room_geometry(room, mapper, unit, settings) for room in plan.rooms)
    LOGGER.debug("Built geometry for %d rooms (%.0fx%.0f px)", len(geometries), width, height)
    return PlanGeometry(
        plan=plan,
        unit=unit,
        settings=settings,
        mapper=mapper,
        width=width,
        height=height,
        rooms=geometries,
    )
