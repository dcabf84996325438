"""Plan rendering entry points: plan in, drawing or image file out."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_SETTINGS, SUPERSAMPLING_FACTOR, RenderSettings
from ..core.model import ConceptPlan
from ..geom.builder import build_plan_geometry
from .layers import Drawing, compose_drawing
from .raster import RasterImage, normalize_format, rasterize

LOGGER = logging.getLogger(__name__)


def render_plan(
    plan: ConceptPlan,
    unit: Optional[str] = None,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> Drawing:
    """Render a concept plan to an SVG drawing.

    Args:
        plan: The concept plan.
        unit: Display unit for labels; defaults to the plan's unit system.
        settings: Drawing constants.

    Returns:
        The composed Drawing.
    """
    geometry = build_plan_geometry(plan, unit, settings)
    drawing = compose_drawing(geometry)
    LOGGER.info("Rendered '%s': %d rooms", plan.project_name, len(plan.rooms))
    return drawing


def generate_plan_svg(
    plan: ConceptPlan,
    output_path: Path,
    unit: Optional[str] = None,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> Path:
    """Render a plan and write it to an SVG file.

    Returns:
        Path to the written file.
    """
    return render_plan(plan, unit, settings).write(output_path)


def generate_plan_image(
    plan: ConceptPlan,
    output_path: Path,
    image_format: Optional[str] = None,
    unit: Optional[str] = None,
    scale: float = SUPERSAMPLING_FACTOR,
    settings: RenderSettings = DEFAULT_SETTINGS,
) -> RasterImage:
    """Render a plan and write it to a PNG or JPEG file.

    The format defaults to the file suffix. ``settings`` sets the drawing
    constants and ``scale`` the supersampling on top of them.

    Raises:
        ValueError: If the format is not supported.
        RasterizationError: If the drawing cannot be rasterized.
    """
    output_path = Path(output_path)
    image_format = normalize_format(image_format or output_path.suffix or "png")
    image = rasterize(render_plan(plan, unit, settings), image_format, scale)
    image.save(output_path)
    return image
