"""Metric and imperial length conversion.

Editable numeric fields convert with asymmetric precision: feet round to
whole units, meters to two decimals. Read-only display text always uses one
decimal place.
"""

from __future__ import annotations

import math

from .model import UNIT_SYSTEMS

METERS_TO_FEET = 3.28084
FEET_TO_METERS = 0.3048


def _check_unit(unit: str) -> None:
    if unit not in UNIT_SYSTEMS:
        raise ValueError(f"Unknown unit system: {unit!r} (expected one of {UNIT_SYSTEMS})")


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a length for an editable numeric field.

    Args:
        value: The length expressed in ``from_unit``.
        from_unit: Source unit, "m" or "ft".
        to_unit: Target unit, "m" or "ft".

    Returns:
        The converted length, rounded to a whole foot or to centimeters.

    Raises:
        ValueError: If either unit is unknown.
    """
    _check_unit(from_unit)
    _check_unit(to_unit)
    if from_unit == to_unit:
        return value
    if to_unit == "ft":
        return float(math.floor(value * METERS_TO_FEET + 0.5))
    return round(value * FEET_TO_METERS, 2)


def meters_to_unit(meters: float, unit: str) -> float:
    """Exact (unrounded) conversion of a metric length into ``unit``."""
    _check_unit(unit)
    return meters * METERS_TO_FEET if unit == "ft" else meters


def to_display_length(meters: float, unit: str) -> str:
    """Format a metric length as read-only text, e.g. ``"13.1ft"``."""
    return f"{meters_to_unit(meters, unit):.1f}{unit}"


def format_dimensions(width_m: float, length_m: float, unit: str) -> str:
    """Format a room footprint, e.g. ``"13.1ft x 16.4ft"``."""
    return f"{to_display_length(width_m, unit)} x {to_display_length(length_m, unit)}"
