"""Room schedule for concept plans.

The schedule is the tabular companion of the drawing: one row per room with
its dimensions in the display unit, its privacy zone and the producer's notes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .model import ConceptPlan, Room
from .units import format_dimensions

ZONE_LABELS = {
    "public": "Public",
    "semi_private": "Semi-private",
    "private": "Private",
}


@dataclass(frozen=True)
class ScheduleRow:
    """One line of the room schedule."""

    name: str
    dimensions: str
    zone: str
    notes: str


def room_dimension_text(room: Room, unit: str) -> str:
    """Dimension text for a room label or schedule row.

    The producer's own ``dimensions_display`` wins; otherwise the approximate
    dimensions (or the rectangle size) are formatted in ``unit``.
    """
    if room.dimensions_display:
        return room.dimensions_display
    width, length = room.dimensions
    return format_dimensions(width, length, unit)


def build_schedule(plan: ConceptPlan, unit: Optional[str] = None) -> List[ScheduleRow]:
    """Build the room schedule of a plan.

    Args:
        plan: The concept plan.
        unit: Display unit; defaults to the plan's own unit system.

    Returns:
        One row per room, in plan order.
    """
    unit = unit or plan.unit_system
    return [
        ScheduleRow(
            name=room.name,
            dimensions=room_dimension_text(room, unit),
            zone=ZONE_LABELS.get(room.privacy_level, room.privacy_level),
            notes=room.notes,
        )
        for room in plan.rooms
    ]
