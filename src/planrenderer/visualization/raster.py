"""Raster export of plan drawings.

The SVG is encoded to PNG by cairosvg at ``scale`` times its size and then
composited by Pillow onto an opaque white surface, so formats without an
alpha channel (JPEG) never show a black background.
"""

from __future__ import annotations

import base64
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from PIL import Image

from ..config import BACKGROUND_COLOR, DEFAULT_RASTER_FORMAT, JPEG_QUALITY, SUPERSAMPLING_FACTOR
from .layers import Drawing

LOGGER = logging.getLogger(__name__)

FORMATS = {
    "png": ("PNG", "image/png"),
    "jpeg": ("JPEG", "image/jpeg"),
}


class RasterizationError(Exception):
    """Base class for raster export failures."""


class MissingRenderSourceError(RasterizationError):
    """The drawing to export is not mounted."""


class SurfaceAcquisitionError(RasterizationError):
    """The raster surface could not be allocated."""


class ImageEncodingError(RasterizationError):
    """The intermediate image could not be produced or decoded."""


@dataclass(frozen=True)
class CapturedDrawing:
    """Serialized snapshot of a mounted drawing."""

    svg: bytes
    width: float
    height: float

    @classmethod
    def from_drawing(cls, drawing: Drawing) -> "CapturedDrawing":
        return cls(svg=drawing.to_bytes(), width=drawing.width, height=drawing.height)


@dataclass(frozen=True)
class RasterImage:
    """Encoded raster image.

    Attributes:
        data: Encoded image bytes.
        image_format: "png" or "jpeg".
        width: Width in pixels.
        height: Height in pixels.
    """

    data: bytes
    image_format: str
    width: int
    height: int

    @property
    def mime_type(self) -> str:
        return FORMATS[self.image_format][1]

    @property
    def base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @property
    def data_url(self) -> str:
        """The image as a ``data:`` URL, the form handed to the AI collaborator."""
        return f"data:{self.mime_type};base64,{self.base64}"

    def save(self, path: Path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.data)
        return path


def normalize_format(image_format: str) -> str:
    """Map a format name or file suffix ("jpg", ".PNG") to "png" or "jpeg".

    Raises:
        ValueError: If the format is not supported.
    """
    name = image_format.lower().lstrip(".")
    if name == "jpg":
        name = "jpeg"
    if name not in FORMATS:
        raise ValueError(f"Unsupported image format: {image_format!r} (use png or jpeg)")
    return name


def acquire_surface(width: int, height: int) -> Image.Image:
    """Allocate an opaque surface filled with the background color.

    Raises:
        SurfaceAcquisitionError: If the surface cannot be allocated.
    """
    if width <= 0 or height <= 0:
        raise SurfaceAcquisitionError(f"Cannot allocate a {width}x{height} surface")
    try:
        return Image.new("RGB", (width, height), BACKGROUND_COLOR)
    except (ValueError, MemoryError) as e:
        raise SurfaceAcquisitionError(f"Cannot allocate a {width}x{height} surface: {e}") from e


def decode_svg(svg: bytes, width: int, height: int) -> Image.Image:
    """Encode SVG bytes to an RGBA image of the given size.

    Raises:
        ImageEncodingError: If cairosvg cannot render the SVG or its output
            cannot be decoded.
    """
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        raise ImageEncodingError(f"cairosvg is not usable: {e}") from e

    try:
        png_data = cairosvg.svg2png(bytestring=svg, output_width=width, output_height=height)
        image = Image.open(io.BytesIO(png_data))
        return image.convert("RGBA")
    except Exception as e:
        raise ImageEncodingError(f"Failed to encode drawing: {e}") from e


def rasterize(
    source: Union[Drawing, CapturedDrawing],
    image_format: str = DEFAULT_RASTER_FORMAT,
    scale: float = SUPERSAMPLING_FACTOR,
) -> RasterImage:
    """Rasterize a drawing onto a white surface.

    Args:
        source: The drawing, or a captured snapshot of it.
        image_format: "png" or "jpeg" ("jpg" accepted).
        scale: Supersampling factor applied to the drawing size.

    Returns:
        The encoded image, ``round(width * scale)`` by ``round(height * scale)``
        pixels.

    Raises:
        ValueError: If the format is not supported.
        SurfaceAcquisitionError: If the surface cannot be allocated.
        ImageEncodingError: If the drawing cannot be encoded.
    """
    image_format = normalize_format(image_format)
    if isinstance(source, Drawing):
        source = CapturedDrawing.from_drawing(source)

    width = int(round(source.width * scale))
    height = int(round(source.height * scale))
    surface = acquire_surface(width, height)
    image = decode_svg(source.svg, width, height)
    surface.paste(image, (0, 0), image)

    pil_format = FORMATS[image_format][0]
    buffer = io.BytesIO()
    try:
        if pil_format == "JPEG":
            surface.save(buffer, pil_format, quality=JPEG_QUALITY)
        else:
            surface.save(buffer, pil_format)
    except (OSError, ValueError) as e:
        raise ImageEncodingError(f"Failed to write {image_format} image: {e}") from e

    LOGGER.info("Rasterized drawing to %dx%d %s", width, height, image_format)
    return RasterImage(data=buffer.getvalue(), image_format=image_format, width=width, height=height)
