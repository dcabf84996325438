"""Input handling for concept plan documents."""

from .parser import load_plan, parse_plan

__all__ = ["load_plan", "parse_plan"]
