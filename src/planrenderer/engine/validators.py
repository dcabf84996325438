"""Plan checks for concept floor plans.

The renderer never rejects a plan: AI-produced geometry is drawn as given,
with door offsets clamped. These checks report what the renderer silently
tolerates so the producer of the data can be told about it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from shapely.geometry import box

from ..core.model import ConceptPlan
from ..core.topology import unreachable_rooms
from ..geom.builder import clamp_door_offset

LOGGER = logging.getLogger(__name__)

# Minimum overlap (sq m) between two rooms to be reported
OVERLAP_TOLERANCE = 0.01
# Distance (m) a room may stick out of the plot before it is reported
PLOT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class PlanWarning:
    """A problem the renderer tolerates but the producer should know about.

    Attributes:
        code: Machine-readable warning code (e.g. "sealed-room").
        message: Human-readable description.
        room: Name of the room concerned, if any.
    """

    code: str
    message: str
    room: Optional[str] = None


def check_sealed_rooms(plan: ConceptPlan) -> List[PlanWarning]:
    """Rooms that declare no door at all and render as closed boxes."""
    return [
        PlanWarning("sealed-room", f"Room '{room.name}' has no doors", room.name)
        for room in plan.rooms
        if not room.doors
    ]


def check_degenerate_rooms(plan: ConceptPlan) -> List[PlanWarning]:
    """Rooms whose rectangle has zero or negative width or depth."""
    warnings = []
    for room in plan.rooms:
        if room.rect.width <= 0 or room.rect.depth <= 0:
            warnings.append(
                PlanWarning(
                    "degenerate-room",
                    f"Room '{room.name}' has a zero-area or inverted rectangle "
                    f"({room.rect.width:.2f} x {room.rect.depth:.2f} m)",
                    room.name,
                )
            )
    return warnings


def check_rooms_within_plot(plan: ConceptPlan) -> List[PlanWarning]:
    """Rooms whose rectangle extends past the plot boundary."""
    plot = box(0.0, 0.0, plan.plot.width, plan.plot.depth).buffer(PLOT_TOLERANCE)
    warnings = []
    for room in plan.rooms:
        r = room.rect
        if r.width <= 0 or r.depth <= 0:
            continue
        if not plot.contains(box(r.x_start, r.y_start, r.x_end, r.y_end)):
            warnings.append(
                PlanWarning("outside-plot", f"Room '{room.name}' extends outside the plot", room.name)
            )
    return warnings


def check_overlaps(plan: ConceptPlan, tolerance: float = OVERLAP_TOLERANCE) -> List[PlanWarning]:
    """Pairs of rooms whose rectangles overlap (shared walls do not count)."""
    polygons = [
        box(r.rect.x_start, r.rect.y_start, r.rect.x_end, r.rect.y_end) for r in plan.rooms
    ]
    warnings = []
    for i in range(len(polygons)):
        for j in range(i + 1, len(polygons)):
            inter = polygons[i].intersection(polygons[j])
            if inter.area > tolerance:
                a, b = plan.rooms[i].name, plan.rooms[j].name
                warnings.append(
                    PlanWarning("overlap", f"Rooms '{a}' and '{b}' overlap by {inter.area:.2f} m²", a)
                )
    return warnings


def check_feature_offsets(plan: ConceptPlan) -> List[PlanWarning]:
    """Door offsets that get clamped and window offsets outside [0, 1]."""
    warnings = []
    for room in plan.rooms:
        for door in room.doors:
            clamped = clamp_door_offset(door.offset_ratio)
            if clamped != door.offset_ratio:
                warnings.append(
                    PlanWarning(
                        "door-offset-clamped",
                        f"Door on the {door.wall} wall of '{room.name}' moved from "
                        f"offset {door.offset_ratio:g} to {clamped:g}",
                        room.name,
                    )
                )
        for window in room.windows:
            if not 0.0 <= window.offset_ratio <= 1.0:
                warnings.append(
                    PlanWarning(
                        "window-offset",
                        f"Window on the {window.wall} wall of '{room.name}' has offset "
                        f"{window.offset_ratio:g} outside [0, 1]",
                        room.name,
                    )
                )
    return warnings


def check_reachability(plan: ConceptPlan) -> List[PlanWarning]:
    """Rooms with doors that still cannot be reached from outside."""
    warnings = []
    for index in unreachable_rooms(plan):
        room = plan.rooms[index]
        if not room.doors:
            continue  # already reported as sealed
        warnings.append(
            PlanWarning(
                "unreachable-room",
                f"Room '{room.name}' cannot be reached from the entrance through doors",
                room.name,
            )
        )
    return warnings


CHECKS: List[Callable[[ConceptPlan], List[PlanWarning]]] = [
    check_sealed_rooms,
    check_degenerate_rooms,
    check_rooms_within_plot,
    check_overlaps,
    check_feature_offsets,
    check_reachability,
]


def validate_plan(plan: ConceptPlan) -> List[PlanWarning]:
    """Run all plan checks.

    Args:
        plan: The plan to check.

    Returns:
        Every warning found, grouped by check. An empty list means the plan
        is clean. Nothing is raised: the plan renders either way.
    """
    warnings: List[PlanWarning] = []
    for check in CHECKS:
        warnings.extend(check(plan))

    for warning in warnings:
        LOGGER.warning("%s: %s", warning.code, warning.message)

    return warnings
