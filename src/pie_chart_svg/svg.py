"""Small lxml-backed SVG builder with a d3-like selection API."""

from functools import lru_cache

from lxml import etree
from lxml.cssselect import CSSSelector
from cssselect import GenericTranslator

SVG_NS = "http://www.w3.org/2000/svg"
NSMAP = {None: SVG_NS}


class _SVGNamespaceTranslator(GenericTranslator):
    """Make bare element selectors (``path``, ``rect``) match SVG-namespaced nodes."""

    def __init__(self, prefix="svg"):
        super().__init__()
        self._prefix = prefix

    def xpath_element(self, selector):
        if selector.namespace is None and selector.element is not None:
            selector = selector.__class__(self._prefix, selector.element)
        return super().xpath_element(selector)


_CSS_TRANSLATOR = _SVGNamespaceTranslator()
_CSS_NAMESPACES = {"svg": SVG_NS}


@lru_cache(maxsize=64)
def _css_selector(css):
    return CSSSelector(css, translator=_CSS_TRANSLATOR, namespaces=_CSS_NAMESPACES)


def attr_name(name):
    """Turn python keyword names (``text_anchor``) into SVG attribute names."""
    return name.replace("_", "-")


def format_value(value):
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def element(tag, **attrs):
    el = etree.Element(f"{{{SVG_NS}}}{tag}", nsmap=NSMAP)
    for key, value in attrs.items():
        if value is None:
            continue
        el.set(attr_name(key), format_value(value))
    return el


class Selection:
    """A list of elements with chainable setters, each optionally bound to a datum."""

    def __init__(self, elements, data=None):
        self.elements = list(elements)
        self._data = list(data) if data is not None else [None] * len(self.elements)

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def append(self, tag, **attrs):
        """Append a child to every selected element; returns the new children."""
        children = []
        for el in self.elements:
            child = element(tag, **attrs)
            el.append(child)
            children.append(child)
        return Selection(children, self._data)

    def attr(self, name, value=None):
        """Set ``name`` on every element, or read it from the first one when no value is given.

        ``value`` may be a callable ``(datum, index, element) -> value``; a
        ``None`` result leaves that element untouched.
        """
        key = attr_name(name)
        if value is None:
            return self.elements[0].get(key) if self.elements else None
        for idx, el in enumerate(self.elements):
            val = value(self._data[idx], idx, el) if callable(value) else value
            if val is None:
                continue
            el.set(key, format_value(val))
        return self

    def attrs(self, **kvs):
        for key, value in kvs.items():
            self.attr(key, value)
        return self

    def text(self, value):
        for idx, el in enumerate(self.elements):
            val = value(self._data[idx], idx, el) if callable(value) else value
            if val is None:
                continue
            el.text = str(val)
        return self

    def datum(self):
        return self._data[0] if self._data else None

    def data(self, values=None):
        """Bind one datum per element (lengths must match), or return the bound data."""
        if values is None:
            return list(self._data)
        values = list(values)
        if len(values) != len(self.elements):
            raise ValueError("Selection.data requires len(data) == number of selected elements")
        self._data = values
        return self

    def select_all(self, css):
        """All descendants matching ``css``; matches inherit their ancestor's datum."""
        sel = _css_selector(css)
        found, data = [], []
        for el, datum in zip(self.elements, self._data):
            matches = sel(el)
            found.extend(matches)
            data.extend([datum] * len(matches))
        return Selection(found, data)


class SVGDocument:
    def __init__(self, width, height, view_box=None, background=None):
        self.root = element("svg", width=width, height=height)
        if view_box:
            self.root.set("viewBox", view_box)
        if background:
            self.root.set("style", f"background-color: {background};")

    def select_all(self, css):
        return Selection(_css_selector(css)(self.root))

    def append(self, tag, **attrs):
        child = element(tag, **attrs)
        self.root.append(child)
        return Selection([child])

    def add_style(self, rules, **attrs):
        """Insert a ``<style>`` block holding ``rules`` (one CSS rule per line) as the first child."""
        style_attrs = {"type": "text/css"}
        style_attrs.update({attr_name(k): v for k, v in attrs.items()})
        style_el = element("style", **style_attrs)
        style_el.text = "\n".join(rules)
        self.root.insert(0, style_el)
        return Selection([style_el])

    def to_string(self, pretty=True):
        return etree.tostring(self.root, pretty_print=pretty, encoding="unicode")

    def save(self, path, pretty=True):
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_string(pretty=pretty))
