"""Layer compositor for concept plan drawings.

Turns a PlanGeometry into an SVG element tree. Rooms are drawn in five
strictly ordered layers so that later layers overprint earlier ones:

1. fills: white room rectangles, with a hatch overlay on wet areas
2. walls: room outlines stroked at wall thickness
3. cuts: background-colored strokes that open gaps under doors and windows
4. symbols: door swings, sliding panels and window sills
5. labels: room name and dimension text

The layers sit between the plot decorations (grid and dashed boundary) and
the annotations (external dimension lines and the title block).
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional

from ..config import (
    BACKGROUND_COLOR,
    BOUNDARY_COLOR,
    DIMENSION_FONT_RATIO,
    DIMENSION_LINE_OFFSET_PX,
    DIMENSION_TEXT_COLOR,
    DIMENSION_TICK_PX,
    GRID_COLOR,
    GRID_SPACING_M,
    HATCH_COLOR,
    HATCH_OPACITY,
    LABEL_COLOR,
    PLAN_ELEMENT_ID,
    TITLE_BLOCK_MARGIN_PX,
    TITLE_BLOCK_SIZE_PX,
    TITLE_MAX_CHARS,
    WALL_COLOR,
)
from ..core.units import to_display_length
from ..geom.builder import PlanGeometry
from .svg import sub, tag, transform
from .symbols import draw_feature

LAYER_ORDER = ("fills", "walls", "cuts", "symbols", "labels")

NAME_FONT = "Georgia, 'Times New Roman', serif"
MONO_FONT = "'Courier New', monospace"
TITLE_FONT = "Helvetica, Arial, sans-serif"
ANNOTATION_FONT_PX = 12
TITLE_FONT_PX = 10
HATCH_SIZE_PX = 4


class Drawing:
    """A composed plan drawing.

    Attributes:
        root: The root ``<svg>`` element.
        width: Drawing width in pixels.
        height: Drawing height in pixels.
        element_id: Identifier of the root element.
    """

    def __init__(self, root: ET.Element, width: float, height: float, element_id: str = PLAN_ELEMENT_ID):
        self.root = root
        self.width = width
        self.height = height
        self.element_id = element_id

    def layer(self, name: str) -> Optional[ET.Element]:
        """Return the group of the named layer, or None."""
        for child in self.root:
            if child.tag == tag("g") and child.get("id") == f"layer-{name}":
                return child
        return None

    @property
    def layer_names(self) -> List[str]:
        """Names of the room layers in document (paint) order."""
        return [
            child.get("id")[len("layer-"):]
            for child in self.root
            if child.tag == tag("g") and (child.get("id") or "").startswith("layer-")
        ]

    def to_bytes(self) -> bytes:
        """Serialize the drawing to UTF-8 SVG with an XML declaration."""
        return ET.tostring(self.root, encoding="utf-8", xml_declaration=True)

    def to_svg(self) -> str:
        return self.to_bytes().decode("utf-8")

    def write(self, path: Path) -> Path:
        """Write the drawing to an SVG file, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        ET.ElementTree(self.root).write(path, encoding="utf-8", xml_declaration=True)
        return path


def _add_defs(root: ET.Element, geometry: PlanGeometry) -> None:
    mapper = geometry.mapper
    spacing = mapper.length(GRID_SPACING_M)
    defs = sub(root, "defs")

    grid = sub(
        defs,
        "pattern",
        id="grid",
        x=mapper.x(0),
        y=mapper.y(0),
        width=spacing,
        height=spacing,
        patternUnits="userSpaceOnUse",
    )
    sub(grid, "path", d=f"M {spacing:g} 0 L 0 0 0 {spacing:g}", fill="none", stroke=GRID_COLOR, stroke_width=1)

    hatch = sub(
        defs,
        "pattern",
        id="hatch",
        width=HATCH_SIZE_PX,
        height=HATCH_SIZE_PX,
        patternUnits="userSpaceOnUse",
        patternTransform="rotate(45)",
    )
    sub(
        hatch,
        "rect",
        width=HATCH_SIZE_PX / 2,
        height=HATCH_SIZE_PX,
        fill=HATCH_COLOR,
        fill_opacity=HATCH_OPACITY,
    )


def _add_plot(root: ET.Element, geometry: PlanGeometry) -> None:
    mapper = geometry.mapper
    plot = geometry.plan.plot
    group = sub(root, "g", id="plot")
    x, y = mapper.x(0), mapper.y(0)
    w, h = mapper.length(plot.width), mapper.length(plot.depth)
    sub(group, "rect", x=x, y=y, width=w, height=h, fill="url(#grid)")
    sub(
        group,
        "rect",
        x=x,
        y=y,
        width=w,
        height=h,
        fill="none",
        stroke=BOUNDARY_COLOR,
        stroke_width=2,
        stroke_dasharray="10,5",
    )


def _draw_fills(layer: ET.Element, geometry: PlanGeometry) -> None:
    for room in geometry.rooms:
        sub(
            layer,
            "rect",
            x=room.x,
            y=room.y,
            width=room.width,
            height=room.height,
            fill=BACKGROUND_COLOR,
            **{"data-room": room.room.name},
        )
        if room.wet_area:
            sub(layer, "rect", x=room.x, y=room.y, width=room.width, height=room.height, fill="url(#hatch)")


def _draw_walls(layer: ET.Element, geometry: PlanGeometry) -> None:
    for room in geometry.rooms:
        sub(
            layer,
            "rect",
            x=room.x,
            y=room.y,
            width=room.width,
            height=room.height,
            fill="none",
            stroke=WALL_COLOR,
            stroke_width=geometry.settings.wall_thickness,
        )


def _draw_cuts(layer: ET.Element, geometry: PlanGeometry) -> None:
    for room in geometry.rooms:
        for opening in room.openings:
            cut = opening.cut
            sub(
                layer,
                "line",
                x1=cut.start.x,
                y1=cut.start.y,
                x2=cut.end.x,
                y2=cut.end.y,
                stroke=BACKGROUND_COLOR,
                stroke_width=cut.stroke_width,
            )


def _draw_symbols(layer: ET.Element, geometry: PlanGeometry) -> None:
    for room in geometry.rooms:
        for opening in room.openings:
            draw_feature(layer, opening, geometry.settings)


def _draw_labels(layer: ET.Element, geometry: PlanGeometry) -> None:
    for room in geometry.rooms:
        label = room.label
        sub(
            layer,
            "text",
            label.name,
            x=label.center.x,
            y=label.name_y,
            text_anchor="middle",
            font_family=NAME_FONT,
            font_weight="bold",
            font_size=label.font_size,
            fill=LABEL_COLOR,
        )
        sub(
            layer,
            "text",
            label.dimension_text,
            x=label.center.x,
            y=label.dimension_y,
            text_anchor="middle",
            font_family=MONO_FONT,
            font_size=label.font_size * DIMENSION_FONT_RATIO,
            fill=DIMENSION_TEXT_COLOR,
        )


LAYER_PAINTERS = {
    "fills": _draw_fills,
    "walls": _draw_walls,
    "cuts": _draw_cuts,
    "symbols": _draw_symbols,
    "labels": _draw_labels,
}


def _dimension_line(parent: ET.Element, length: float, text: str, x: float, y: float, vertical: bool) -> None:
    tick = DIMENSION_TICK_PX
    style = {"stroke": DIMENSION_TEXT_COLOR, "stroke_width": 1}
    group = sub(parent, "g", transform=transform(x, y))
    if vertical:
        sub(group, "line", x1=0, y1=0, x2=0, y2=length, **style)
        sub(group, "line", x1=-tick, y1=0, x2=tick, y2=0, **style)
        sub(group, "line", x1=-tick, y1=length, x2=tick, y2=length, **style)
        label_x, label_y = -10, length / 2
        rotate = f"rotate(-90, {label_x:g}, {label_y:g})"
    else:
        sub(group, "line", x1=0, y1=0, x2=length, y2=0, **style)
        sub(group, "line", x1=0, y1=-tick, x2=0, y2=tick, **style)
        sub(group, "line", x1=length, y1=-tick, x2=length, y2=tick, **style)
        label_x, label_y = length / 2, -10
        rotate = None
    sub(
        group,
        "text",
        text,
        x=label_x,
        y=label_y,
        transform=rotate,
        text_anchor="middle",
        font_family=MONO_FONT,
        font_size=ANNOTATION_FONT_PX,
        fill=DIMENSION_TEXT_COLOR,
    )


def _add_dimensions(root: ET.Element, geometry: PlanGeometry) -> None:
    mapper = geometry.mapper
    plot = geometry.plan.plot
    group = sub(root, "g", id="dimensions")
    offset = DIMENSION_LINE_OFFSET_PX
    _dimension_line(
        group,
        mapper.length(plot.width),
        to_display_length(plot.width, geometry.unit),
        mapper.x(0),
        mapper.y(0) - offset,
        vertical=False,
    )
    _dimension_line(
        group,
        mapper.length(plot.depth),
        to_display_length(plot.depth, geometry.unit),
        mapper.x(0) - offset,
        mapper.y(0),
        vertical=True,
    )


def title_text(project_name: str) -> str:
    """Title block text: the project name truncated to a fixed length."""
    return "PROJECT: " + project_name[:TITLE_MAX_CHARS].upper()


def _add_title_block(root: ET.Element, geometry: PlanGeometry) -> None:
    block_w, block_h = TITLE_BLOCK_SIZE_PX
    margin_x, margin_y = TITLE_BLOCK_MARGIN_PX
    group = sub(
        root,
        "g",
        id="title-block",
        transform=transform(geometry.width - margin_x, geometry.height - margin_y),
    )
    sub(
        group,
        "rect",
        width=block_w,
        height=block_h,
        fill=BACKGROUND_COLOR,
        stroke=WALL_COLOR,
        stroke_width=1,
    )
    sub(
        group,
        "text",
        title_text(geometry.plan.project_name),
        x=10,
        y=block_h / 2 + TITLE_FONT_PX / 2 - 1,
        font_family=TITLE_FONT,
        font_weight="bold",
        font_size=TITLE_FONT_PX,
        letter_spacing=1,
        fill=LABEL_COLOR,
    )


def compose_drawing(geometry: PlanGeometry, element_id: str = PLAN_ELEMENT_ID) -> Drawing:
    """Compose the SVG drawing of a plan.

    Args:
        geometry: Plan geometry from ``build_plan_geometry``.
        element_id: Identifier given to the root element.

    Returns:
        The composed Drawing. Identical geometry always yields identical SVG.
    """
    root = ET.Element(
        tag("svg"),
        attrib={
            "id": element_id,
            "version": "1.1",
            "width": f"{geometry.width:g}",
            "height": f"{geometry.height:g}",
            "viewBox": f"0 0 {geometry.width:g} {geometry.height:g}",
        },
    )
    _add_defs(root, geometry)
    _add_plot(root, geometry)

    for name in LAYER_ORDER:
        layer = sub(root, "g", id=f"layer-{name}")
        LAYER_PAINTERS[name](layer, geometry)

    _add_dimensions(root, geometry)
    _add_title_block(root, geometry)

    return Drawing(root, geometry.width, geometry.height, element_id)
