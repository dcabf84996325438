"""Parser for concept plan JSON documents.

This module converts the concept plan document produced by the AI
collaborator (or by manual input) into ConceptPlan objects. Only schema
problems are rejected here; questionable geometry is left to the plan checks.
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from ..core.model import (
    CONCEPT_PLAN_MODE,
    DOOR_TYPES,
    PRIVACY_LEVELS,
    UNIT_SYSTEMS,
    WALL_SIDES,
    ConceptPlan,
    Door,
    Plot,
    Rectangle,
    Room,
    Window,
)

DEFAULT_PROJECT_NAME = "Untitled Project"
DEFAULT_OFFSET_RATIO = 0.5
DEFAULT_WINDOW_WIDTH_M = 1.2


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def _parse_wall(value: Any) -> str:
    wall = str(value).strip().lower()
    if wall not in WALL_SIDES:
        raise ValueError(f"unknown wall side {value!r}")
    return wall


def _parse_door(door_data: Mapping[str, Any]) -> Door:
    door_data = _require_mapping(door_data, "door")
    door_type = str(door_data.get("type", "single")).strip().lower()
    if door_type not in DOOR_TYPES:
        raise ValueError(f"unknown door type {door_data.get('type')!r}")
    return Door(
        wall=_parse_wall(door_data["wall"]),
        offset_ratio=float(door_data.get("offset_ratio", DEFAULT_OFFSET_RATIO)),
        type=door_type,
    )


def _parse_window(window_data: Mapping[str, Any]) -> Window:
    window_data = _require_mapping(window_data, "window")
    return Window(
        wall=_parse_wall(window_data["wall"]),
        offset_ratio=float(window_data.get("offset_ratio", DEFAULT_OFFSET_RATIO)),
        width=float(window_data.get("width_m", DEFAULT_WINDOW_WIDTH_M)),
    )


def _parse_privacy(value: Any) -> str:
    # Producers write both "semi_private" and "semi-private"
    level = str(value).strip().lower().replace("-", "_").replace(" ", "_")
    if level not in PRIVACY_LEVELS:
        raise ValueError(f"unknown privacy level {value!r}")
    return level


def _parse_dimensions(dims: Optional[Mapping[str, Any]]) -> Optional[Tuple[float, float]]:
    if not dims:
        return None
    dims = _require_mapping(dims, "approx_dimensions_m")
    return (float(dims["width"]), float(dims["length"]))


def _parse_room(index: int, room_data: Any) -> Room:
    if not isinstance(room_data, Mapping):
        raise ValueError(f"Invalid room data for Room {index + 1}: room must be a JSON object")
    name = str(room_data.get("name") or f"Room {index + 1}")
    try:
        position = _require_mapping(room_data["position_on_plot"], "position_on_plot")
        rect = Rectangle(
            x_start=float(position["x_start_m"]),
            y_start=float(position["y_start_m"]),
            x_end=float(position["x_end_m"]),
            y_end=float(position["y_end_m"]),
        )
        if not all(math.isfinite(v) for v in (rect.x_start, rect.y_start, rect.x_end, rect.y_end)):
            raise ValueError("room coordinates must be finite numbers")

        features = _require_mapping(room_data.get("features") or {}, "features")
        doors = tuple(_parse_door(d) for d in features.get("doors") or [])
        windows = tuple(_parse_window(w) for w in features.get("windows") or [])

        return Room(
            name=name,
            function=str(room_data.get("function") or name),
            rect=rect,
            privacy_level=_parse_privacy(room_data.get("privacy_level", "public")),
            doors=doors,
            windows=windows,
            approx_dimensions=_parse_dimensions(room_data.get("approx_dimensions_m")),
            dimensions_display=str(room_data.get("dimensions_display") or ""),
            notes=str(room_data.get("notes") or ""),
            adjacent_to=tuple(str(a) for a in room_data.get("adjacent_to") or []),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid room data for {name}: {e}") from e


def parse_plan(data: Mapping[str, Any]) -> ConceptPlan:
    """Build a ConceptPlan from a decoded concept plan document.

    Args:
        data: The decoded JSON document.

    Returns:
        ConceptPlan object representing the document.

    Raises:
        ValueError: If the document is not a concept plan or is malformed.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Plan document must be a JSON object, got {type(data).__name__}")

    mode = data.get("mode")
    if mode is not None and mode != CONCEPT_PLAN_MODE:
        raise ValueError(f"Unsupported plan mode {mode!r} (expected {CONCEPT_PLAN_MODE!r})")

    unit_system = data.get("unit_system", "m")
    if unit_system not in UNIT_SYSTEMS:
        raise ValueError(f"Invalid unit system: {unit_system!r}")

    try:
        plot_data = _require_mapping(data["plot"], "plot")
        plot = Plot(width=float(plot_data["width_m"]), depth=float(plot_data["depth_m"]))
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid plot data: {e}") from e
    if not (math.isfinite(plot.width) and math.isfinite(plot.depth)):
        raise ValueError(f"Plot size must be a finite number, got {plot.width} x {plot.depth}")
    if plot.width <= 0 or plot.depth <= 0:
        raise ValueError(f"Plot size must be positive, got {plot.width} x {plot.depth}")

    room_list = data.get("rooms") or []
    if not isinstance(room_list, list):
        raise ValueError(f"rooms must be a JSON array, got {type(room_list).__name__}")
    rooms = tuple(_parse_room(i, room_data) for i, room_data in enumerate(room_list))

    try:
        circulation = _require_mapping(data.get("circulation") or {}, "circulation")
    except ValueError as e:
        raise ValueError(f"Invalid circulation data: {e}") from e
    circulation_notes = " ".join(
        str(part) for part in (circulation.get("main_entry"), circulation.get("notes")) if part
    )

    return ConceptPlan(
        project_name=str(data.get("project_name") or DEFAULT_PROJECT_NAME),
        unit_system=unit_system,
        plot=plot,
        rooms=rooms,
        concept_description=str(data.get("concept_description") or ""),
        circulation_notes=circulation_notes,
    )


def load_plan(path: str) -> ConceptPlan:
    """Load a concept plan from a JSON file.

    Args:
        path: Path to the JSON file containing the plan document.

    Returns:
        ConceptPlan object representing the floor plan.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the JSON data is invalid or malformed.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(file_path, encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)

    return parse_plan(data)
