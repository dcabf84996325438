"""Plan Renderer - A Python library for rendering architectural concept floor plans."""

__version__ = "0.1.0"

from .core.model import ConceptPlan, Door, Plot, Rectangle, Room, Window
from .io.parser import load_plan, parse_plan
from .visualization.generator import render_plan

__all__ = [
    "ConceptPlan",
    "Door",
    "Plot",
    "Rectangle",
    "Room",
    "Window",
    "load_plan",
    "parse_plan",
    "render_plan",
]
