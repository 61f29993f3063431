"""Resolve a chart dataset into absolute pixel geometry.

The result, a :class:`RenderModel`, carries everything the markup emitter
needs (circle, wedge arc endpoints and flags, title and legend anchors, and
the stylesheet) and nothing that points back at the input dataset.
"""

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .colors import ColorSequencer, rgb_to_hex

logger = logging.getLogger(__name__)

Point = Tuple[float, float]

START_ANGLE = -math.pi / 2
FULL_TURN = 2 * math.pi
_FULL_CIRCLE_TOLERANCE = 1e-9


class LegendMode(enum.Enum):
    COLUMN = "column"
    ROW = "row"
    GRID = "grid"


@dataclass(frozen=True)
class Gutter:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @property
    def width(self):
        return self.left + self.right

    @property
    def height(self):
        return self.top + self.bottom


@dataclass(frozen=True)
class LayoutConstants:
    pie_diameter: float = 400.0
    gutter: Gutter = Gutter(40.0, 40.0, 40.0, 40.0)
    legend_gutter: Gutter = Gutter(10.0, 10.0, 10.0, 10.0)
    legend_row_height: float = 20.0
    legend_row_gap: float = 5.0
    legend_columns: int = 3
    rect_corner_radius: float = 3.0
    label_gap: float = 5.0
    font_family: str = "Arial"

    @property
    def legend_pitch(self):
        return self.legend_row_height + self.legend_row_gap


@dataclass
class Wedge:
    label: str
    fraction: float
    color_index: int
    start_angle: float
    end_angle: float
    start_point: Point
    end_point: Point
    large_arc: int
    sweep: int = 1
    full_circle: bool = False

    @property
    def class_name(self):
        return f"wedge-{self.color_index}"

    @property
    def sweep_angle(self):
        return self.end_angle - self.start_angle


@dataclass
class LegendEntry:
    class_name: str
    text: str
    text_anchor: Point
    swatch_origin: Point
    swatch_size: float
    corner_radius: float


@dataclass
class RenderModel:
    width: float
    height: float
    center: Point
    radius: float
    title: str
    title_anchor: Point
    wedges: List[Wedge] = field(default_factory=list)
    legend: List[LegendEntry] = field(default_factory=list)
    styles: List[str] = field(default_factory=list)


def compute_fractions(values):
    """Share of the total for each value; all zeros when the total is zero."""
    values = list(values)
    total = sum(values)
    if total <= 0:
        if values:
            logger.warning("Chart values sum to zero; every wedge will be empty")
        return [0.0] * len(values)
    return [value / total for value in values]


def point_on_circle(center, radius, angle):
    cx, cy = center
    return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def build_wedges(labels, fractions, center, radius):
    """Chain wedges clockwise from 12 o'clock, one per (label, fraction)."""
    wedges = []
    angle = START_ANGLE
    for index, (label, fraction) in enumerate(zip(labels, fractions)):
        end = angle + fraction * FULL_TURN
        wedges.append(
            Wedge(
                label=label,
                fraction=fraction,
                color_index=index,
                start_angle=angle,
                end_angle=end,
                start_point=point_on_circle(center, radius, angle),
                end_point=point_on_circle(center, radius, end),
                large_arc=1 if fraction > 0.5 else 0,
                full_circle=abs(fraction - 1.0) <= _FULL_CIRCLE_TOLERANCE,
            )
        )
        angle = end
    return wedges


def format_legend_label(label, fraction):
    # round() is banker's rounding; legend percentages round half up
    percentage = int(math.floor(fraction * 100 + 0.5))
    return f"{label} ({percentage}%)"


def _fixed_styles(constants):
    font = constants.font_family
    return [
        f".labels{{fill:rgb(0,0,0);font-size:10;font-family:{font}}}",
        f".title{{font-family:{font};font-size:12;text-anchor:middle;}}",
        f".legend{{font-family:{font};font-size:12pt;text-anchor:end;dominant-baseline:middle;}}",
    ]


def build_styles(colors, constants):
    styles = _fixed_styles(constants)
    for index, rgb in enumerate(colors):
        styles.append(f".wedge-{index}{{fill:{rgb_to_hex(rgb)};stroke-width:0}}")
    return styles


def _legend_shape(count, mode, constants):
    """Return ``(rows, columns)`` occupied by ``count`` legend entries."""
    if count == 0:
        return 0, 0
    if mode is LegendMode.COLUMN:
        return count, 1
    if mode is LegendMode.ROW:
        return 1, count
    columns = max(1, min(constants.legend_columns, count))
    return math.ceil(count / columns), columns


def legend_block_height(count, mode, constants):
    rows, _ = _legend_shape(count, mode, constants)
    if rows == 0:
        return 0.0
    return rows * constants.legend_pitch - constants.legend_row_gap


def build_legend(wedges, width, mode, constants):
    rows, columns = _legend_shape(len(wedges), mode, constants)
    if not rows:
        return []
    c = constants
    top = c.gutter.top + c.pie_diameter + c.legend_gutter.top
    slot = (width - c.legend_gutter.width) / columns

    entries = []
    for index, wedge in enumerate(wedges):
        if mode is LegendMode.COLUMN:
            row, divider = index, width / 2
        else:
            row, col = divmod(index, columns)
            divider = c.legend_gutter.left + (col + 0.5) * slot
        row_top = top + row * c.legend_pitch
        entries.append(
            LegendEntry(
                class_name=wedge.class_name,
                text=format_legend_label(wedge.label, wedge.fraction),
                text_anchor=(divider - c.label_gap, row_top + c.legend_row_height * 0.6),
                swatch_origin=(divider + c.label_gap, row_top),
                swatch_size=c.legend_row_height,
                corner_radius=c.rect_corner_radius,
            )
        )
    return entries


def layout_chart(
    dataset,
    constants: Optional[LayoutConstants] = None,
    mode: LegendMode = LegendMode.COLUMN,
    sequencer: Optional[ColorSequencer] = None,
) -> RenderModel:
    """Lay out ``dataset`` as a pie chart with a legend below it."""
    c = constants or LayoutConstants()
    mode = LegendMode(mode)
    sequencer = sequencer or ColorSequencer()

    items = dataset.items
    fractions = compute_fractions(item.value for item in items)
    radius = c.pie_diameter / 2
    center = (c.gutter.left + radius, c.gutter.top + radius)
    width = c.gutter.width + c.pie_diameter
    height = (
        c.gutter.top
        + c.pie_diameter
        + c.legend_gutter.height
        + legend_block_height(len(items), mode, c)
        + c.gutter.bottom
    )

    wedges = build_wedges([item.label for item in items], fractions, center, radius)
    model = RenderModel(
        width=width,
        height=height,
        center=center,
        radius=radius,
        title=dataset.display_title,
        title_anchor=(width / 2, c.gutter.top / 2),
        wedges=wedges,
        legend=build_legend(wedges, width, mode, c),
        styles=build_styles(sequencer.colors(len(items)), c),
    )
    logger.debug(
        "Laid out %d wedges (%s legend) in %gx%g", len(wedges), mode.value, width, height
    )
    return model
