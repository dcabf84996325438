"""Wall placement table.

Every door and window is positioned from the same four-entry table: where
the wall starts on the room rectangle, which axis it runs along, and how a
symbol drawn for a north wall must be rotated to sit on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class WallPlacement:
    """Placement of one wall side on a room rectangle.

    Attributes:
        base_x: Fraction of the room width where the wall lies (x start).
        base_y: Fraction of the room depth where the wall lies (y start).
        along_x: 1 if the wall runs along the x axis, else 0.
        along_y: 1 if the wall runs along the y axis, else 0.
        rotation: Symbol rotation in degrees for this wall.
    """

    base_x: float
    base_y: float
    along_x: float
    along_y: float
    rotation: float


WALL_PLACEMENTS = {
    "north": WallPlacement(base_x=0.0, base_y=0.0, along_x=1.0, along_y=0.0, rotation=0.0),
    "south": WallPlacement(base_x=0.0, base_y=1.0, along_x=1.0, along_y=0.0, rotation=180.0),
    "west": WallPlacement(base_x=0.0, base_y=0.0, along_x=0.0, along_y=1.0, rotation=90.0),
    "east": WallPlacement(base_x=1.0, base_y=0.0, along_x=0.0, along_y=1.0, rotation=-90.0),
}


def wall_placement(wall: str) -> WallPlacement:
    """Look up the placement of a wall side.

    Raises:
        ValueError: If ``wall`` is not one of north/south/east/west.
    """
    try:
        return WALL_PLACEMENTS[wall]
    except KeyError:
        raise ValueError(f"Unknown wall side: {wall!r}") from None


def feature_anchor(
    x: float, y: float, width: float, height: float, wall: str, offset_ratio: float
) -> Tuple[float, float]:
    """Anchor point of a wall feature on a rectangle.

    Works in any consistent unit (plot meters or drawing pixels).

    Args:
        x: Left edge of the rectangle.
        y: Top edge of the rectangle.
        width: Rectangle width.
        height: Rectangle height.
        wall: Host wall side.
        offset_ratio: Fractional position along the wall.

    Returns:
        The (x, y) anchor on the rectangle boundary.
    """
    placement = wall_placement(wall)
    return (
        x + width * (placement.base_x + placement.along_x * offset_ratio),
        y + height * (placement.base_y + placement.along_y * offset_ratio),
    )


def along_wall(wall: str, half_length: float, anchor: Tuple[float, float]) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Endpoints of a segment of ``2 * half_length`` centered on ``anchor`` along a wall."""
    placement = wall_placement(wall)
    ax, ay = anchor
    dx = placement.along_x * half_length
    dy = placement.along_y * half_length
    return (ax - dx, ay - dy), (ax + dx, ay + dy)
