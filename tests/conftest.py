"""Shared fixtures for the plan renderer tests."""

import copy
import json

import pytest

from planrenderer.core.model import ConceptPlan, Door, Plot, Rectangle, Room
from planrenderer.io.parser import parse_plan

PLAN_DOCUMENT = {
    "mode": "B_CONCEPT_PLAN",
    "unit_system": "m",
    "project_name": "Courtyard House",
    "concept_description": "Open living area facing the garden.",
    "plot": {"width_m": 12, "depth_m": 10},
    "rooms": [
        {
            "name": "Living Room",
            "function": "Living",
            "privacy_level": "public",
            "notes": "Double height",
            "position_on_plot": {"x_start_m": 0, "y_start_m": 4, "x_end_m": 6, "y_end_m": 10},
            "features": {
                "doors": [
                    {"wall": "south", "offset_ratio": 0.5, "type": "single"},
                    {"wall": "east", "offset_ratio": 0.5, "type": "sliding"},
                ],
                "windows": [{"wall": "west", "offset_ratio": 0.5, "width_m": 1.5}],
            },
        },
        {
            "name": "Kitchen",
            "function": "Kitchen",
            "privacy_level": "semi-private",
            "approx_dimensions_m": {"width": 6, "length": 6},
            "position_on_plot": {"x_start_m": 6, "y_start_m": 4, "x_end_m": 12, "y_end_m": 10},
            "features": {"doors": [{"wall": "north", "offset_ratio": 0.5}]},
        },
        {
            "name": "Bedroom",
            "function": "Bedroom",
            "privacy_level": "private",
            "dimensions_display": "6 x 4 m",
            "position_on_plot": {"x_start_m": 6, "y_start_m": 0, "x_end_m": 12, "y_end_m": 4},
            "features": {"doors": [{"wall": "west", "offset_ratio": 0.5, "type": "double"}]},
        },
        {
            "name": "Master Bath",
            "function": "Master Bathroom",
            "privacy_level": "private",
            "position_on_plot": {"x_start_m": 0, "y_start_m": 0, "x_end_m": 6, "y_end_m": 4},
            "features": {},
        },
    ],
    "circulation": {"main_entry": "South facade", "notes": "Central hall"},
}


@pytest.fixture
def plan_document():
    """A mutable copy of the sample concept plan document."""
    return copy.deepcopy(PLAN_DOCUMENT)


@pytest.fixture
def sample_plan(plan_document):
    return parse_plan(plan_document)


@pytest.fixture
def plan_file(tmp_path, plan_document):
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(plan_document), encoding="utf-8")
    return path


def single_room_plan(*doors, function="Living", project_name="Test", unit="m", windows=()):
    """A 10 x 10 m plot filled by one room."""
    room = Room(
        name="Room",
        function=function,
        rect=Rectangle(0.0, 0.0, 10.0, 10.0),
        doors=tuple(doors),
        windows=tuple(windows),
    )
    return ConceptPlan(project_name=project_name, unit_system=unit, plot=Plot(10.0, 10.0), rooms=(room,))


@pytest.fixture
def make_plan():
    return single_room_plan


@pytest.fixture
def south_door_plan():
    return single_room_plan(Door("south", 0.5, "single"))
