import xml.etree.ElementTree as ET

from planrenderer.config import BACKGROUND_COLOR, PLAN_ELEMENT_ID
from planrenderer.core.model import Door, Window
from planrenderer.visualization.generator import generate_plan_svg, render_plan
from planrenderer.visualization.layers import LAYER_ORDER, title_text
from planrenderer.visualization.svg import SVG_NS, fmt

NS = {"svg": SVG_NS}


def test_layers_are_in_paint_order(sample_plan):
    drawing = render_plan(sample_plan)
    assert drawing.layer_names == list(LAYER_ORDER)
    assert drawing.layer_names == ["fills", "walls", "cuts", "symbols", "labels"]


def test_root_element_carries_plan_id(sample_plan):
    root = ET.fromstring(render_plan(sample_plan).to_bytes())
    assert root.get("id") == PLAN_ELEMENT_ID
    assert root.get("width") == "640"
    assert root.get("height") == "560"


def test_rendering_is_deterministic(sample_plan):
    assert render_plan(sample_plan).to_bytes() == render_plan(sample_plan).to_bytes()


def test_one_cut_per_opening(sample_plan):
    drawing = render_plan(sample_plan)
    cuts = drawing.layer("cuts").findall("svg:line", NS)
    # 4 doors and 1 window
    assert len(cuts) == 5
    for cut in cuts:
        assert cut.get("stroke") == BACKGROUND_COLOR
        assert cut.get("stroke-width") == "8"


def test_cut_and_symbol_of_south_door(south_door_plan):
    drawing = render_plan(south_door_plan)
    cut = drawing.layer("cuts").find("svg:line", NS)
    assert (cut.get("x1"), cut.get("y1"), cut.get("x2"), cut.get("y2")) == ("262", "480", "298", "480")

    symbol = drawing.layer("symbols").find("svg:g", NS)
    assert symbol.get("transform") == "translate(280, 480) rotate(180)"
    assert symbol.get("data-kind") == "single"
    assert symbol.find("svg:path", NS) is not None


def test_opening_has_cut_but_no_symbol(make_plan):
    drawing = render_plan(make_plan(Door("east", 0.5, "opening")))
    assert len(drawing.layer("cuts").findall("svg:line", NS)) == 1
    assert len(list(drawing.layer("symbols").find("svg:g", NS))) == 0


def test_door_symbols_by_type(make_plan):
    drawing = render_plan(
        make_plan(Door("north", 0.3, "double"), Door("north", 0.7, "sliding"), windows=[Window("west", 0.5, 1.2)])
    )
    double, sliding, window = drawing.layer("symbols").findall("svg:g", NS)
    assert len(double.findall("svg:path", NS)) == 2
    assert len(double.findall("svg:line", NS)) == 2
    assert sliding.findall("svg:line", NS)[-1].get("stroke-dasharray") == "2,2"
    assert window.get("transform").endswith("rotate(90)")
    assert window.find("svg:rect", NS).get("height") == "6"


def test_wet_areas_are_hatched(sample_plan):
    fills = render_plan(sample_plan).layer("fills").findall("svg:rect", NS)
    hatched = [r for r in fills if r.get("fill") == "url(#hatch)"]
    # Kitchen and Master Bath
    assert len(hatched) == 2
    assert len(fills) == len(sample_plan.rooms) + 2


def test_labels_show_name_and_dimensions(sample_plan):
    texts = [t.text for t in render_plan(sample_plan).layer("labels").findall("svg:text", NS)]
    assert texts[:2] == ["Living Room", "6.0m x 6.0m"]
    assert "6 x 4 m" in texts


def test_dimension_lines_and_title_block(sample_plan):
    root = render_plan(sample_plan).root
    dims = [t.text for t in root.find("svg:g[@id='dimensions']", NS).iter("{%s}text" % SVG_NS)]
    assert dims == ["12.0m", "10.0m"]

    title = root.find("svg:g[@id='title-block']", NS)
    assert title.get("transform") == "translate(440, 520)"
    assert title.find("svg:text", NS).text == "PROJECT: COURTYARD HOUSE"


def test_title_is_truncated():
    assert title_text("A Very Long Project Name") == "PROJECT: A VERY LONG PRO"


def test_plot_boundary_is_dashed(sample_plan):
    plot = render_plan(sample_plan).root.find("svg:g[@id='plot']", NS)
    boundary = plot.findall("svg:rect", NS)[1]
    assert boundary.get("stroke-dasharray") == "10,5"


def test_fmt_trims_numbers():
    assert fmt(80.0) == "80"
    assert fmt(1 / 3) == "0.333"
    assert fmt(-0.0001) == "0"


def test_generate_plan_svg_writes_file(tmp_path, sample_plan):
    path = generate_plan_svg(sample_plan, tmp_path / "out" / "plan.svg")
    assert path.exists()
    assert ET.parse(path).getroot().get("id") == PLAN_ELEMENT_ID
