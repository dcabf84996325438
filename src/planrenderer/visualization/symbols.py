"""Door and window symbols.

Every symbol is drawn in a local frame: the opening runs along the x axis
from ``-width/2`` to ``width/2`` and door leaves swing towards positive y.
The caller wraps the symbol in a group translated to the anchor and rotated
by the wall's rotation.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Callable, Dict

from ..config import BACKGROUND_COLOR, SYMBOL_COLOR, RenderSettings
from ..geom.builder import FeatureGeometry
from .svg import fmt, sub, transform

LEAF_STROKE_PX = 2.0
ARC_STROKE_PX = 1.0
ARC_OPACITY = 0.5
SLIDING_PANEL_GAP_PX = 4.0


def _arc(group: ET.Element, start_x: float, end_x: float, end_y: float, radius: float, sweep: int) -> None:
    path = (
        f"M {fmt(start_x)} 0 A {fmt(radius)} {fmt(radius)} 0 0 {sweep} "
        f"{fmt(end_x)} {fmt(end_y)}"
    )
    sub(
        group,
        "path",
        d=path,
        fill="none",
        stroke=SYMBOL_COLOR,
        stroke_width=ARC_STROKE_PX,
        stroke_opacity=ARC_OPACITY,
    )


def _leaf(group: ET.Element, x: float, length: float) -> None:
    sub(group, "line", x1=x, y1=0, x2=x, y2=length, stroke=SYMBOL_COLOR, stroke_width=LEAF_STROKE_PX)


def draw_single_door(group: ET.Element, width: float, settings: RenderSettings) -> None:
    """Hinged leaf at the left jamb with a quarter-circle swing."""
    half = width / 2
    _arc(group, half, -half, width, width, 1)
    _leaf(group, -half, width)


def draw_double_door(group: ET.Element, width: float, settings: RenderSettings) -> None:
    """Two mirrored half-width leaves meeting in the middle."""
    half = width / 2
    _arc(group, 0, -half, half, half, 1)
    _arc(group, 0, half, half, half, 0)
    _leaf(group, -half, half)
    _leaf(group, half, half)


def draw_sliding_door(group: ET.Element, width: float, settings: RenderSettings) -> None:
    """Two offset panels over a dashed guide line."""
    half = width / 2
    gap = SLIDING_PANEL_GAP_PX
    sub(group, "line", x1=-half, y1=-gap, x2=0, y2=-gap, stroke=SYMBOL_COLOR, stroke_width=LEAF_STROKE_PX)
    sub(group, "line", x1=0, y1=gap, x2=half, y2=gap, stroke=SYMBOL_COLOR, stroke_width=LEAF_STROKE_PX)
    sub(
        group,
        "line",
        x1=-half,
        y1=0,
        x2=half,
        y2=0,
        stroke=SYMBOL_COLOR,
        stroke_width=ARC_STROKE_PX,
        stroke_dasharray="2,2",
    )


def draw_opening(group: ET.Element, width: float, settings: RenderSettings) -> None:
    """Open passage: the wall cut alone marks it."""


def draw_window(group: ET.Element, width: float, settings: RenderSettings) -> None:
    """Sill rectangle as thick as the wall with a center mullion."""
    half = width / 2
    thickness = settings.wall_thickness
    sub(
        group,
        "rect",
        x=-half,
        y=-thickness / 2,
        width=width,
        height=thickness,
        fill=BACKGROUND_COLOR,
        stroke=SYMBOL_COLOR,
        stroke_width=ARC_STROKE_PX,
    )
    sub(group, "line", x1=-half, y1=0, x2=half, y2=0, stroke=SYMBOL_COLOR, stroke_width=ARC_STROKE_PX)


DOOR_SYMBOLS: Dict[str, Callable[[ET.Element, float, RenderSettings], None]] = {
    "single": draw_single_door,
    "double": draw_double_door,
    "sliding": draw_sliding_door,
    "opening": draw_opening,
}


def draw_feature(parent: ET.Element, feature: FeatureGeometry, settings: RenderSettings) -> ET.Element:
    """Draw a door or window symbol at its anchor.

    Args:
        parent: Element receiving the symbol group.
        feature: Placement of the opening.
        settings: Drawing constants (wall thickness for windows).

    Returns:
        The symbol group.

    Raises:
        ValueError: If the door type has no symbol.
    """
    group = sub(
        parent,
        "g",
        transform=transform(feature.anchor.x, feature.anchor.y, feature.rotation),
        **{"data-kind": feature.door_type or feature.kind, "data-wall": feature.wall},
    )
    if feature.kind == "window":
        draw_window(group, feature.width, settings)
        return group

    try:
        draw = DOOR_SYMBOLS[feature.door_type]
    except KeyError:
        raise ValueError(f"No symbol for door type: {feature.door_type!r}") from None
    draw(group, feature.width, settings)
    return group
