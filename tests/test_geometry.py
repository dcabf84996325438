import pytest

from planrenderer.config import RenderSettings
from planrenderer.core.model import ConceptPlan, Door, Plot, Rectangle, Room, Window
from planrenderer.geom.builder import (
    build_plan_geometry,
    clamp_door_offset,
    door_width_m,
    is_wet_area,
    label_font_size,
)
from planrenderer.geom.mapper import CoordinateMapper
from planrenderer.geom.walls import feature_anchor, wall_placement


def test_mapper_adds_padding_and_scales():
    mapper = CoordinateMapper()
    assert mapper.x(0) == 80.0
    assert mapper.y(2.5) == 180.0
    assert mapper.length(0.9) == pytest.approx(36.0)
    assert mapper.rectangle(Rectangle(1, 2, 4, 6)) == (120.0, 160.0, 120.0, 160.0)


def test_drawing_size_includes_padding_on_all_sides():
    assert CoordinateMapper().drawing_size(Plot(10, 8)) == (560.0, 480.0)


@pytest.mark.parametrize("ratio", [-1.0, 0.0, 0.2, 0.5, 0.8, 1.0, 2.0])
def test_clamp_is_idempotent_and_in_range(ratio):
    once = clamp_door_offset(ratio)
    assert 0.2 <= once <= 0.8
    assert clamp_door_offset(once) == once


def test_wall_table_rotations():
    assert wall_placement("north").rotation == 0
    assert wall_placement("south").rotation == 180
    assert wall_placement("west").rotation == 90
    assert wall_placement("east").rotation == -90
    with pytest.raises(ValueError):
        wall_placement("up")


def test_feature_anchor_on_each_wall():
    assert feature_anchor(0, 0, 10, 4, "north", 0.25) == (2.5, 0)
    assert feature_anchor(0, 0, 10, 4, "south", 0.25) == (2.5, 4)
    assert feature_anchor(0, 0, 10, 4, "west", 0.5) == (0, 2)
    assert feature_anchor(0, 0, 10, 4, "east", 0.5) == (10, 2)


def test_wet_area_detection_is_case_insensitive():
    assert is_wet_area("Master BATHROOM")
    assert is_wet_area("kitchenette")
    assert is_wet_area("Laundry")
    assert not is_wet_area("Bedroom")


def test_label_font_size_is_clamped():
    assert label_font_size(40) == 10
    assert label_font_size(96) == 12
    assert label_font_size(400) == 14


def test_door_widths_by_type():
    assert door_width_m("single") == 0.9
    assert door_width_m("double") == 1.6
    assert door_width_m("sliding") == 0.9
    assert door_width_m("opening") == 1.8
    with pytest.raises(ValueError):
        door_width_m("revolving")


def test_south_door_centered_on_south_wall(south_door_plan):
    geometry = build_plan_geometry(south_door_plan)
    room = geometry.rooms[0]
    assert (room.x, room.y, room.width, room.height) == (80.0, 80.0, 400.0, 400.0)

    door = room.doors[0]
    assert (door.anchor.x, door.anchor.y) == (280.0, 480.0)
    assert door.rotation == 180
    assert door.width == pytest.approx(36.0)
    assert door.cut.start.x == pytest.approx(262.0)
    assert door.cut.end.x == pytest.approx(298.0)
    assert door.cut.start.y == door.cut.end.y == 480.0
    assert door.cut.stroke_width == 8.0


def test_door_offset_near_corner_is_clamped(make_plan):
    geometry = build_plan_geometry(make_plan(Door("north", 0.05)))
    door = geometry.rooms[0].doors[0]
    assert door.offset_ratio == 0.2
    assert door.anchor.x == pytest.approx(80 + 400 * 0.2)
    assert door.anchor.y == 80.0


def test_window_offset_is_not_clamped(make_plan):
    geometry = build_plan_geometry(make_plan(windows=[Window("west", 0.05, 1.0)]))
    window = geometry.rooms[0].windows[0]
    assert window.offset_ratio == 0.05
    assert window.anchor.y == pytest.approx(80 + 400 * 0.05)
    assert window.cut.start.x == window.cut.end.x == 80.0


def test_label_uses_display_unit(make_plan):
    plan = make_plan(Door("south", 0.5))
    assert build_plan_geometry(plan).rooms[0].label.dimension_text == "10.0m x 10.0m"
    assert build_plan_geometry(plan, "ft").rooms[0].label.dimension_text == "32.8ft x 32.8ft"


def test_geometry_scales_linearly(sample_plan):
    base = build_plan_geometry(sample_plan)
    doubled = build_plan_geometry(sample_plan, settings=RenderSettings(scale=80.0))
    assert doubled.width == pytest.approx(base.width * 2)
    for a, b in zip(base.rooms, doubled.rooms):
        assert (b.x, b.y, b.width, b.height) == pytest.approx((a.x * 2, a.y * 2, a.width * 2, a.height * 2))
        for fa, fb in zip(a.openings, b.openings):
            assert fb.anchor.x == pytest.approx(fa.anchor.x * 2)
            assert fb.anchor.y == pytest.approx(fa.anchor.y * 2)
            assert fb.rotation == fa.rotation


def test_label_of_approximate_dimensions_in_feet():
    room = Room(
        name="Study",
        function="Study",
        rect=Rectangle(0, 0, 4, 5),
        approx_dimensions=(4.0, 5.0),
    )
    plan = ConceptPlan(project_name="Units", unit_system="ft", plot=Plot(10, 10), rooms=(room,))
    assert build_plan_geometry(plan).rooms[0].label.dimension_text == "13.1ft x 16.4ft"


def test_wet_area_flag_on_rooms(make_plan):
    for function, wet in (("Kitchen", True), ("KITCHEN", True), ("kitchen", True), ("Living Room", False)):
        assert build_plan_geometry(make_plan(function=function)).rooms[0].wet_area is wet


def test_wider_plot_only_widens_the_drawing():
    narrow = build_plan_geometry(ConceptPlan("A", "m", Plot(10, 8)))
    wide = build_plan_geometry(ConceptPlan("A", "m", Plot(20, 8)))
    assert wide.width - narrow.width == 10 * 40
    assert wide.height == narrow.height


def test_label_font_size_follows_settings():
    settings = RenderSettings(label_font_min=8.0, label_font_max=20.0, label_font_divisor=4.0)
    assert label_font_size(20, settings) == 8.0
    assert label_font_size(40, settings) == 10.0
    assert label_font_size(400, settings) == 20.0


def test_label_font_in_geometry_uses_settings(make_plan):
    settings = RenderSettings(label_font_max=30.0, label_font_divisor=10.0)
    assert build_plan_geometry(make_plan(), settings=settings).rooms[0].label.font_size == 30.0
    assert build_plan_geometry(make_plan()).rooms[0].label.font_size == 14.0


def test_render_settings_are_hashable():
    assert hash(RenderSettings()) == hash(RenderSettings())
    assert {RenderSettings(), RenderSettings()} == {RenderSettings()}


def test_custom_door_width(make_plan):
    settings = RenderSettings(door_widths=(("single", 1.0), ("double", 2.0), ("sliding", 1.2), ("opening", 2.4)))
    assert door_width_m("sliding", settings) == 1.2
    door = build_plan_geometry(make_plan(Door("south", 0.5)), settings=settings).rooms[0].doors[0]
    assert door.width == pytest.approx(40.0)
