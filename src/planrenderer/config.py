"""
Rendering configuration for the concept plan renderer.

All drawing constants live here so the geometry builder, the layer
compositor and the rasterizer agree on a single scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Drawing scale
SCALE_PX_PER_M = 40.0  # Pixels per meter
PADDING_M = 2.0  # Margin around the plot, on every side

# Walls and openings
WALL_THICKNESS_PX = 6.0
CUT_MARGIN_PX = 2.0  # Cuts are wider than the wall stroke by this much
DOOR_OFFSET_RANGE = (0.2, 0.8)  # Keeps doors out of the room corners

# Nominal door widths (meters)
DOOR_WIDTHS_M = {
    "single": 0.9,
    "double": 1.6,
    "sliding": 0.9,
    "opening": 1.8,
}

# Labels
LABEL_FONT_MIN_PX = 10.0
LABEL_FONT_MAX_PX = 14.0
LABEL_FONT_DIVISOR = 8.0  # font size = room width px / divisor, then clamped
DIMENSION_FONT_RATIO = 0.7
TITLE_MAX_CHARS = 15

# Decorations
DIMENSION_LINE_OFFSET_PX = 20.0
DIMENSION_TICK_PX = 5.0
TITLE_BLOCK_SIZE_PX = (180.0, 30.0)
TITLE_BLOCK_MARGIN_PX = (200.0, 40.0)  # Distance of the block origin from the bottom-right corner
GRID_SPACING_M = 1.0

# Colors
BACKGROUND_COLOR = "#ffffff"
WALL_COLOR = "#111827"
SYMBOL_COLOR = "#000000"
GRID_COLOR = "#e5e7eb"
BOUNDARY_COLOR = "#9ca3af"
HATCH_COLOR = "#1f2937"
LABEL_COLOR = "#111827"
DIMENSION_TEXT_COLOR = "#6b7280"
HATCH_OPACITY = 0.1

# Wet areas get the hatch texture
WET_AREA_TOKENS = ("bath", "kitchen", "laundry")

# Export
SUPERSAMPLING_FACTOR = 2
PLAN_ELEMENT_ID = "concept-plan-svg"
DEFAULT_RASTER_FORMAT = "png"
JPEG_QUALITY = 92


@dataclass(frozen=True)
class RenderSettings:
    """Drawing constants bundled for a single render pass.

    Attributes:
        scale: Pixels per meter.
        padding: Margin around the plot in meters.
        wall_thickness: Wall stroke width in pixels.
        cut_margin: Extra stroke width of wall cuts over the wall stroke.
        door_offset_range: Clamp range for door offset ratios.
        door_widths: Nominal door width in meters, as (door type, width) pairs.
        label_font_min: Smallest label font size in pixels.
        label_font_max: Largest label font size in pixels.
        label_font_divisor: Room width in pixels per label font pixel.
    """

    scale: float = SCALE_PX_PER_M
    padding: float = PADDING_M
    wall_thickness: float = WALL_THICKNESS_PX
    cut_margin: float = CUT_MARGIN_PX
    door_offset_range: Tuple[float, float] = DOOR_OFFSET_RANGE
    door_widths: Tuple[Tuple[str, float], ...] = tuple(DOOR_WIDTHS_M.items())
    label_font_min: float = LABEL_FONT_MIN_PX
    label_font_max: float = LABEL_FONT_MAX_PX
    label_font_divisor: float = LABEL_FONT_DIVISOR

    @property
    def cut_width(self) -> float:
        """Stroke width of an opening cut."""
        return self.wall_thickness + self.cut_margin


DEFAULT_SETTINGS = RenderSettings()
