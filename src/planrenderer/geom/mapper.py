"""Plot-to-drawing coordinate mapping.

The mapping is linear and uniform in both axes: a plot coordinate ``m``
lands at ``(m + padding) * scale`` pixels, and a length ``L`` becomes
``L * scale`` pixels. Aspect ratio is always preserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..config import PADDING_M, SCALE_PX_PER_M, RenderSettings
from ..core.model import Plot, Point, Rectangle


@dataclass(frozen=True)
class CoordinateMapper:
    """Maps plot meters to drawing pixels.

    Attributes:
        scale: Pixels per meter.
        padding: Margin around the plot in meters.
    """

    scale: float = SCALE_PX_PER_M
    padding: float = PADDING_M

    @classmethod
    def from_settings(cls, settings: RenderSettings) -> "CoordinateMapper":
        return cls(scale=settings.scale, padding=settings.padding)

    def length(self, meters: float) -> float:
        """Pixel length of a metric length."""
        return meters * self.scale

    def x(self, meters: float) -> float:
        return (meters + self.padding) * self.scale

    def y(self, meters: float) -> float:
        return (meters + self.padding) * self.scale

    def point(self, x: float, y: float) -> Point:
        """Drawing position of the plot coordinate (x, y)."""
        return Point(self.x(x), self.y(y))

    def rectangle(self, rect: Rectangle) -> Tuple[float, float, float, float]:
        """Pixel (x, y, width, height) of a room rectangle."""
        return (
            self.x(rect.x_start),
            self.y(rect.y_start),
            self.length(rect.x_end - rect.x_start),
            self.length(rect.y_end - rect.y_start),
        )

    def drawing_size(self, plot: Plot) -> Tuple[float, float]:
        """Overall drawing size in pixels, padding included on all sides."""
        return (
            (plot.width + 2 * self.padding) * self.scale,
            (plot.depth + 2 * self.padding) * self.scale,
        )
