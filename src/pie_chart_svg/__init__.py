"""Render small title/value datasets as standalone SVG pie charts."""

__version__ = "0.1.0"

from .chart import PieChartSVG, render_chart, wedge_path
from .colors import ColorSequencer, GOLDEN_RATIO_CONJUGATE, hsv_to_rgb, rgb_to_hex
from .data import ChartDataset, ItemDatum, dataset_from_dict, parse_chart_data, read_chart_data
from .errors import ChartDataError, ChartIOError, PieChartError
from .layout import (
    Gutter,
    LayoutConstants,
    LegendEntry,
    LegendMode,
    RenderModel,
    Wedge,
    build_wedges,
    compute_fractions,
    format_legend_label,
    layout_chart,
)
from .log import ChartLog, ConsoleLog, NullLog
from .svg import SVG_NS, Selection, SVGDocument

__all__ = [
    "ChartDataError",
    "ChartDataset",
    "ChartIOError",
    "ChartLog",
    "ColorSequencer",
    "ConsoleLog",
    "GOLDEN_RATIO_CONJUGATE",
    "Gutter",
    "ItemDatum",
    "LayoutConstants",
    "LegendEntry",
    "LegendMode",
    "NullLog",
    "PieChartError",
    "PieChartSVG",
    "RenderModel",
    "SVGDocument",
    "SVG_NS",
    "Selection",
    "Wedge",
    "build_wedges",
    "compute_fractions",
    "dataset_from_dict",
    "format_legend_label",
    "hsv_to_rgb",
    "layout_chart",
    "parse_chart_data",
    "read_chart_data",
    "render_chart",
    "rgb_to_hex",
    "wedge_path",
]
