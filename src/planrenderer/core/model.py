"""Core data models for concept floor plans.

This module defines the immutable structures describing a plot and the
rooms laid out on it, including the doors and windows on each room's walls.
All lengths are in meters, relative to the plot's top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple

UnitSystem = Literal["m", "ft"]
WallSide = Literal["north", "south", "east", "west"]
DoorType = Literal["single", "double", "sliding", "opening"]
PrivacyLevel = Literal["public", "semi_private", "private"]

UNIT_SYSTEMS = ("m", "ft")
WALL_SIDES = ("north", "south", "east", "west")
DOOR_TYPES = ("single", "double", "sliding", "opening")
PRIVACY_LEVELS = ("public", "semi_private", "private")

CONCEPT_PLAN_MODE = "B_CONCEPT_PLAN"


@dataclass(frozen=True)
class Point:
    """Represents a 2D point in space.

    Attributes:
        x: The x-coordinate of the point.
        y: The y-coordinate of the point.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned room rectangle in plot meters.

    Attributes:
        x_start: Left edge.
        y_start: Top edge.
        x_end: Right edge.
        y_end: Bottom edge.
    """

    x_start: float
    y_start: float
    x_end: float
    y_end: float

    @property
    def width(self) -> float:
        return self.x_end - self.x_start

    @property
    def depth(self) -> float:
        return self.y_end - self.y_start

    @property
    def area(self) -> float:
        return self.width * self.depth


@dataclass(frozen=True)
class Door:
    """Represents a door on one of a room's walls.

    Attributes:
        wall: Host wall of the door relative to the room rectangle.
        offset_ratio: Fractional position along the wall (0 = start, 1 = end).
        type: Door type, which also determines its nominal width.
    """

    wall: WallSide
    offset_ratio: float
    type: DoorType = "single"


@dataclass(frozen=True)
class Window:
    """Represents a window on one of a room's walls.

    Attributes:
        wall: Host wall of the window relative to the room rectangle.
        offset_ratio: Fractional position along the wall (0 = start, 1 = end).
        width: Window width in meters.
    """

    wall: WallSide
    offset_ratio: float
    width: float


@dataclass(frozen=True)
class Room:
    """Represents a room on the plot.

    Attributes:
        name: Human-readable name, used as the room label.
        function: Function tag (e.g. "Kitchen", "Master Bathroom").
        rect: Room rectangle in plot meters.
        privacy_level: Presentation zone of the room.
        doors: Doors on the room's walls.
        windows: Windows on the room's walls.
        approx_dimensions: Approximate (width, length) in meters, if the
            producer supplied them.
        dimensions_display: Pre-formatted dimension text from the producer.
        notes: Free-form notes shown in the room schedule.
        adjacent_to: Names of the rooms the producer placed next to this one.
    """

    name: str
    function: str
    rect: Rectangle
    privacy_level: PrivacyLevel = "public"
    doors: Tuple[Door, ...] = ()
    windows: Tuple[Window, ...] = ()
    approx_dimensions: Optional[Tuple[float, float]] = None
    dimensions_display: str = ""
    notes: str = ""
    adjacent_to: Tuple[str, ...] = ()

    @property
    def dimensions(self) -> Tuple[float, float]:
        """Width and length in meters, preferring the producer's estimate."""
        if self.approx_dimensions is not None:
            return self.approx_dimensions
        return (self.rect.width, self.rect.depth)


@dataclass(frozen=True)
class Plot:
    """Represents the buildable land area.

    Attributes:
        width: Plot width in meters (x axis).
        depth: Plot depth in meters (y axis).
    """

    width: float
    depth: float


@dataclass(frozen=True)
class ConceptPlan:
    """Represents a complete concept floor plan.

    Attributes:
        project_name: Name shown in the drawing's title block.
        unit_system: Display unit for label text.
        plot: The plot the rooms are laid out on.
        rooms: Rooms in drawing order.
        concept_description: Free-form description of the design concept.
        circulation_notes: Free-form notes on circulation and the main entry.
    """

    project_name: str
    unit_system: UnitSystem
    plot: Plot
    rooms: Tuple[Room, ...] = field(default_factory=tuple)
    concept_description: str = ""
    circulation_notes: str = ""
