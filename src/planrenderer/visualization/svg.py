"""Small helpers for building SVG element trees with ElementTree."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Optional

SVG_NS = "http://www.w3.org/2000/svg"
ET.register_namespace("", SVG_NS)


def fmt(value: Any) -> str:
    """Format an attribute value; numbers get at most three decimals."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        text = f"{value:.3f}".rstrip("0").rstrip(".")
        return "0" if text in ("-0", "") else text
    return str(value)


def tag(name: str) -> str:
    return "{%s}%s" % (SVG_NS, name)


def sub(parent: ET.Element, name: str, text: Optional[str] = None, **attrs: Any) -> ET.Element:
    """Append an SVG child element.

    Keyword names use underscores for hyphens (``stroke_width`` becomes
    ``stroke-width``); ``None`` values are skipped.
    """
    attrib = {key.replace("_", "-"): fmt(value) for key, value in attrs.items() if value is not None}
    element = ET.SubElement(parent, tag(name), attrib=attrib)
    if text is not None:
        element.text = text
    return element


def transform(x: float, y: float, rotation: float = 0.0) -> str:
    """SVG transform placing a template at (x, y) rotated by ``rotation`` degrees."""
    if rotation:
        return f"translate({fmt(x)}, {fmt(y)}) rotate({fmt(rotation)})"
    return f"translate({fmt(x)}, {fmt(y)})"
