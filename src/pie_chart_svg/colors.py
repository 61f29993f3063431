"""Golden-ratio hue stepping for visually distinct wedge colors.

See https://martin.ankerl.com/2009/12/09/how-to-create-random-colors-programmatically/
"""

import random

GOLDEN_RATIO_CONJUGATE = 0.618033988749895


def _channel(value):
    return min(255, int(value * 256))


def hsv_to_rgb(h, s, v):
    """Convert HSV components in [0, 1] to an 8-bit ``(r, g, b)`` tuple."""
    sector = min(int(h * 6), 5)
    f = h * 6 - sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    if sector == 0:
        rgb = (v, t, p)
    elif sector == 1:
        rgb = (q, v, p)
    elif sector == 2:
        rgb = (p, v, t)
    elif sector == 3:
        rgb = (p, q, v)
    elif sector == 4:
        rgb = (t, p, v)
    else:
        rgb = (v, p, q)
    return tuple(_channel(c) for c in rgb)


def rgb_to_hex(rgb):
    return "#%02x%02x%02x" % tuple(rgb)


class ColorSequencer:
    """Produces one color per item index by stepping the hue by the golden ratio.

    The starting hue is drawn once from ``rng`` (or a ``random.Random`` seeded
    with ``seed``), so a sequencer is deterministic for its whole lifetime
    while separate sequencers differ from run to run.
    """

    def __init__(self, seed=None, rng=None, saturation=0.5, value=0.5):
        if rng is None:
            rng = random.Random(seed)
        self.start_hue = rng.random()
        self.saturation = saturation
        self.value = value

    def hue(self, index):
        return (self.start_hue + index * GOLDEN_RATIO_CONJUGATE) % 1.0

    def hues(self, count):
        return [self.hue(i) for i in range(count)]

    def color(self, index):
        return hsv_to_rgb(self.hue(index), self.saturation, self.value)

    def colors(self, count):
        return [self.color(i) for i in range(count)]
