import logging

from .colors import ColorSequencer
from .layout import LegendMode, layout_chart, point_on_circle
from .svg import Selection, SVGDocument, format_value

logger = logging.getLogger(__name__)


def _xy(point):
    return f"{point[0]:.3f} {point[1]:.3f}"


def wedge_path(wedge, center, radius):
    """SVG path data for one wedge: center, out to the start point, arc, close.

    When the start and end points print identically (a full or nearly full
    circle) renderers drop the arc, so it is split into two arcs through the
    angular midpoint. Each half spans at most 180 degrees and uses a small-arc
    flag.
    """
    start, end = _xy(wedge.start_point), _xy(wedge.end_point)
    r = f"{radius:.3f} {radius:.3f}"
    head = f"M {_xy(center)} L {start}"
    if wedge.large_arc and (wedge.full_circle or start == end):
        mid = _xy(point_on_circle(center, radius, wedge.start_angle + wedge.sweep_angle / 2))
        return f"{head} A {r} 0 0 {wedge.sweep} {mid} A {r} 0 0 {wedge.sweep} {end} Z"
    return f"{head} A {r} 0 {wedge.large_arc} {wedge.sweep} {end} Z"


class PieChartSVG:
    """Renders a :class:`~pie_chart_svg.layout.RenderModel` into an SVG document.

    Example
    -------
    >>> from pie_chart_svg import ChartDataset, ItemDatum, layout_chart
    >>> data = ChartDataset("Fruit", (ItemDatum("Apples", 1), ItemDatum("Pears", 3)))
    >>> chart = PieChartSVG(layout_chart(data))
    >>> chart.wedges.attr("opacity", lambda wedge, *_: 0.6 if wedge.fraction < 0.05 else None)
    >>> chart.save("fruit.svg")
    """

    def __init__(self, model):
        self.model = model
        self.svg = SVGDocument(
            width=model.width,
            height=model.height,
            view_box=f"0 0 {format_value(model.width)} {format_value(model.height)}",
            background="white",
        )
        self.svg.add_style(model.styles)

        self._wedge_layer = self.svg.append("g", **{"class": "wedges"})
        self.wedges = self._build_wedges()
        self.title = self.svg.append(
            "text",
            **{"class": "title", "x": model.title_anchor[0], "y": model.title_anchor[1]},
        ).text(model.title)
        self._legend_layer = self.svg.append("g", **{"class": "legend"})
        self.legend = self._build_legend()

    # ------------------------------------------------------------------
    def to_string(self, pretty=True):
        return self.svg.to_string(pretty=pretty)

    def save(self, path, pretty=True):
        self.svg.save(path, pretty=pretty)

    def write(self, stream, pretty=True):
        stream.write(self.to_string(pretty=pretty))

    # ------------------------------------------------------------------
    def _build_wedges(self):
        m = self.model
        paths = [
            self._wedge_layer.append(
                "path", **{"class": wedge.class_name, "d": wedge_path(wedge, m.center, m.radius)}
            ).elements[0]
            for wedge in m.wedges
        ]
        return Selection(paths, m.wedges)

    def _build_legend(self):
        groups = []
        for entry in self.model.legend:
            x, y = entry.swatch_origin
            group = self._legend_layer.append("g", **{"class": "legend-entry"})
            group.append(
                "rect",
                **{
                    "class": entry.class_name,
                    "x": x,
                    "y": y,
                    "rx": entry.corner_radius,
                    "ry": entry.corner_radius,
                    "width": entry.swatch_size,
                    "height": entry.swatch_size,
                },
            )
            tx, ty = entry.text_anchor
            group.append("text", **{"class": "legend", "x": tx, "y": ty}).text(entry.text)
            groups.append(group.elements[0])
        return Selection(groups, self.model.legend)


def render_chart(
    dataset,
    constants=None,
    mode=LegendMode.COLUMN,
    seed=None,
    rng=None,
    pretty=True,
):
    """Lay out and serialize ``dataset`` in one call, returning the SVG text."""
    sequencer = ColorSequencer(seed=seed, rng=rng)
    model = layout_chart(dataset, constants=constants, mode=mode, sequencer=sequencer)
    chart = PieChartSVG(model)
    logger.debug("Rendered chart %r", model.title)
    return chart.to_string(pretty=pretty)
