import random

from lxml import etree

from pie_chart_svg import (
    SVG_NS,
    ChartDataset,
    ColorSequencer,
    ItemDatum,
    LegendMode,
    PieChartSVG,
    RenderModel,
    layout_chart,
    render_chart,
    wedge_path,
)


def _q(tag):
    return f"{{{SVG_NS}}}{tag}"


def _fruit():
    return ChartDataset("Fruit", (ItemDatum("A", 1), ItemDatum("B", 3)))


def _parse(svg_text):
    return etree.fromstring(svg_text.encode("utf-8"))


def test_document_structure_and_order():
    root = _parse(render_chart(_fruit(), seed=5, pretty=False))
    assert root.tag == _q("svg")
    assert root.get("width") == "480"
    assert root.get("height") == "545"
    assert root.get("viewBox") == "0 0 480 545"
    assert root.get("style") == "background-color: white;"

    children = list(root)
    assert [child.tag for child in children] == [_q("style"), _q("g"), _q("text"), _q("g")]
    style, wedges, title, legend = children
    assert ".wedge-1{fill:#" in style.text
    assert wedges.get("class") == "wedges"
    assert [p.get("class") for p in wedges] == ["wedge-0", "wedge-1"]
    assert title.get("class") == "title"
    assert title.text == "Fruit"
    assert (title.get("x"), title.get("y")) == ("240", "20")
    assert legend.get("class") == "legend"


def test_wedge_paths_use_computed_arc_flags():
    root = _parse(render_chart(_fruit(), seed=5))
    paths = root.findall(f".//{_q('path')}")
    assert paths[0].get("d") == (
        "M 240.000 240.000 L 240.000 40.000 A 200.000 200.000 0 0 1 440.000 240.000 Z"
    )
    parts = paths[1].get("d").split()
    # "M cx cy L sx sy A rx ry 0 large_arc sweep ex ey Z"
    assert parts[10:12] == ["1", "1"]
    assert parts[-1] == "Z"


def test_legend_entries_have_swatch_and_label():
    root = _parse(render_chart(_fruit(), seed=5))
    entries = root.findall(f"{_q('g')}[@class='legend']/{_q('g')}")
    assert len(entries) == 2
    rect, text = list(entries[1])
    assert rect.tag == _q("rect")
    assert rect.get("class") == "wedge-1"
    assert (rect.get("rx"), rect.get("ry")) == ("3", "3")
    assert (rect.get("width"), rect.get("height")) == ("20", "20")
    assert (rect.get("x"), rect.get("y")) == ("245", "475")
    assert text.get("class") == "legend"
    assert text.text == "B (75%)"


def test_empty_dataset_renders_frame_title_and_style():
    root = _parse(render_chart(ChartDataset("Nothing"), seed=1))
    assert root.findall(f".//{_q('path')}") == []
    assert root.findall(f".//{_q('rect')}") == []
    assert root.find(_q("text")).text == "Nothing"
    assert root.get("height") == "500"


def test_full_circle_wedge_is_drawn_as_two_half_arcs():
    model = layout_chart(
        ChartDataset("Solo", (ItemDatum("only", 5),)), sequencer=ColorSequencer(seed=2)
    )
    d = wedge_path(model.wedges[0], model.center, model.radius)
    assert d.count(" A ") == 2
    assert "L 240.000 40.000" in d
    assert "0 1 240.000 440.000" in d
    assert d.endswith("240.000 40.000 Z")


def test_selections_expose_bound_layout():
    model = layout_chart(_fruit(), mode=LegendMode.ROW, sequencer=ColorSequencer(seed=9))
    chart = PieChartSVG(model)
    assert chart.wedges.data() == model.wedges
    assert chart.legend.data() == model.legend

    chart.wedges.attr("stroke", "#ffffff").attr("stroke_width", 1)
    assert all(p.get("stroke-width") == "1" for p in chart.wedges)
    chart.wedges.attr("opacity", lambda wedge, *_: 0.5 if wedge.fraction < 0.5 else None)
    assert [p.get("opacity") for p in chart.wedges] == ["0.5", None]

    swatches = chart.legend.select_all("rect")
    assert [r.get("x") for r in swatches] == ["130", "360"]


def test_same_seed_renders_identical_documents():
    a = render_chart(_fruit(), seed=11)
    b = render_chart(_fruit(), rng=random.Random(11))
    assert a == b


def test_save_and_write(tmp_path):
    chart = PieChartSVG(layout_chart(_fruit(), sequencer=ColorSequencer(seed=3)))
    path = tmp_path / "fruit.svg"
    chart.save(str(path))
    assert _parse(path.read_text(encoding="utf-8")).tag == _q("svg")


def test_nearly_full_wedge_with_coincident_endpoints_is_split():
    model = layout_chart(
        ChartDataset("T", (ItemDatum("big", 10_000_000), ItemDatum("tiny", 1))),
        sequencer=ColorSequencer(seed=2),
    )
    big, tiny = model.wedges
    assert not big.full_circle
    d = wedge_path(big, model.center, model.radius)
    assert d.count(" A ") == 2
    assert "A 200.000 200.000 0 0 1 240.000 440.000" in d
    assert d.endswith("240.000 40.000 Z")

    assert wedge_path(tiny, model.center, model.radius).count(" A ") == 1


def test_large_wedge_with_distinct_endpoints_keeps_single_arc():
    model = layout_chart(_fruit(), sequencer=ColorSequencer(seed=2))
    d = wedge_path(model.wedges[1], model.center, model.radius)
    assert d.count(" A ") == 1
    assert " 0 1 1 " in d


def test_view_box_matches_width_and_height():
    model = RenderModel(
        width=480.0,
        height=1000495.0,
        center=(240.0, 240.0),
        radius=200.0,
        title="Tall",
        title_anchor=(240.0, 20.0),
    )
    root = PieChartSVG(model).svg.root
    assert root.get("height") == "1000495"
    assert root.get("viewBox") == f"0 0 {root.get('width')} {root.get('height')}"
