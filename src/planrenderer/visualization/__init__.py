"""Visualization module for concept plans.

This module composes plan drawings as SVG, rasterizes them, and drives the
two-stage image export handed to the AI collaborator.
"""

from .display import DisplayTree
from .export import ExportSession, ExportState, ExportStatus, ExportUnavailableError
from .generator import generate_plan_image, generate_plan_svg, render_plan
from .layers import LAYER_ORDER, Drawing, compose_drawing
from .raster import (
    ImageEncodingError,
    MissingRenderSourceError,
    RasterImage,
    RasterizationError,
    SurfaceAcquisitionError,
    rasterize,
)

__all__ = [
    "DisplayTree",
    "Drawing",
    "ExportSession",
    "ExportState",
    "ExportStatus",
    "ExportUnavailableError",
    "ImageEncodingError",
    "LAYER_ORDER",
    "MissingRenderSourceError",
    "RasterImage",
    "RasterizationError",
    "SurfaceAcquisitionError",
    "compose_drawing",
    "generate_plan_image",
    "generate_plan_svg",
    "rasterize",
    "render_plan",
]
