"""Core data models for concept floor plans."""

from .model import ConceptPlan, Door, Plot, Point, Rectangle, Room, Window
from .units import convert_length, format_dimensions, to_display_length

__all__ = [
    "ConceptPlan",
    "Door",
    "Plot",
    "Point",
    "Rectangle",
    "Room",
    "Window",
    "convert_length",
    "format_dimensions",
    "to_display_length",
]
