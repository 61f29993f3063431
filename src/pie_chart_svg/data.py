"""Chart input model and relaxed-JSON decoding."""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

import json5

from .errors import ChartDataError

logger = logging.getLogger(__name__)

_ITEM_LIST_KEYS = ("items", "data")
_ITEM_LABEL_KEYS = ("key", "label", "name")


@dataclass(frozen=True)
class ItemDatum:
    label: str
    value: float


@dataclass(frozen=True)
class ChartDataset:
    title: str
    items: Tuple[ItemDatum, ...] = field(default_factory=tuple)
    units: Optional[str] = None

    @property
    def total(self):
        return sum(item.value for item in self.items)

    @property
    def display_title(self):
        if self.units:
            return f"{self.title} ({self.units})"
        return self.title


def _lookup(obj, candidates, default=None):
    for key in candidates:
        val = obj.get(key)
        if val is not None:
            return val
    return default


def _as_value(raw, index):
    # bool is an int subclass; "true" is not a chart value
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ChartDataError(f"Item {index} has a non-numeric value: {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise ChartDataError(f"Item {index} has a non-finite value: {raw!r}")
    if value < 0:
        raise ChartDataError(f"Item {index} has a negative value: {raw!r}")
    return value


def dataset_from_dict(obj):
    """Normalize a decoded mapping into a :class:`ChartDataset`.

    Accepts ``items`` or ``data`` for the item list, and ``key``, ``label``
    or ``name`` for each item's label.
    """
    if not isinstance(obj, dict):
        raise ChartDataError("Chart data must be an object")

    title = obj.get("title")
    if not isinstance(title, str):
        raise ChartDataError("Chart data requires a string 'title'")

    raw_items = _lookup(obj, _ITEM_LIST_KEYS)
    if raw_items is None:
        raise ChartDataError("Chart data requires an 'items' (or 'data') list")
    if not isinstance(raw_items, list):
        raise ChartDataError("'items' must be a list")

    items = []
    for index, raw in enumerate(raw_items):
        if not isinstance(raw, dict):
            raise ChartDataError(f"Item {index} must be an object")
        label = _lookup(raw, _ITEM_LABEL_KEYS)
        if label is None:
            raise ChartDataError(f"Item {index} requires a 'key'")
        if "value" not in raw:
            raise ChartDataError(f"Item {index} requires a 'value'")
        items.append(ItemDatum(label=str(label), value=_as_value(raw["value"], index)))

    units = obj.get("units")
    if units is not None and not isinstance(units, str):
        raise ChartDataError("'units' must be a string")

    logger.debug("Decoded chart %r with %d items", title, len(items))
    return ChartDataset(title=title, items=tuple(items), units=units)


def parse_chart_data(text):
    """Decode JSON5 ``text``; decoder errors propagate unchanged."""
    return dataset_from_dict(json5.loads(text))


def read_chart_data(stream):
    return parse_chart_data(stream.read())
