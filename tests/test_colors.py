import math
import random

from pie_chart_svg import GOLDEN_RATIO_CONJUGATE, ColorSequencer, hsv_to_rgb, rgb_to_hex


def test_hsv_to_rgb_red_sector():
    assert hsv_to_rgb(0.0, 0.5, 0.5) == (128, 64, 64)


def test_hsv_to_rgb_covers_all_sectors():
    # one hue from the middle of each 60 degree sector
    maxima = [max(range(3), key=lambda i: hsv_to_rgb(h, 0.5, 0.5)[i]) for h in
              (0.05, 0.2, 0.4, 0.55, 0.7, 0.9)]
    assert maxima == [0, 1, 1, 2, 2, 0]


def test_hsv_to_rgb_clamps_full_channel_to_255():
    assert hsv_to_rgb(0.3, 0.0, 1.0) == (255, 255, 255)


def test_rgb_to_hex_is_zero_padded_lowercase():
    assert rgb_to_hex((10, 171, 0)) == "#0aab00"


def test_sequencer_colors_are_valid_and_sized():
    seq = ColorSequencer(seed=7)
    colors = seq.colors(25)
    assert len(colors) == 25
    for rgb in colors:
        assert len(rgb) == 3
        assert all(0 <= c <= 255 for c in rgb)
    assert seq.colors(0) == []


def test_sequencer_hues_step_by_golden_ratio():
    seq = ColorSequencer(rng=random.Random(3))
    hues = seq.hues(10)
    assert all(0.0 <= h < 1.0 for h in hues)
    for a, b in zip(hues, hues[1:]):
        assert math.isclose((b - a) % 1.0, GOLDEN_RATIO_CONJUGATE, abs_tol=1e-9)


def test_sequencer_is_deterministic_for_a_seed():
    assert ColorSequencer(seed=42).colors(6) == ColorSequencer(seed=42).colors(6)


def test_sequencer_uses_injected_rng():
    class FixedRandom:
        def random(self):
            return 0.0

    seq = ColorSequencer(rng=FixedRandom())
    assert seq.start_hue == 0.0
    assert seq.color(0) == (128, 64, 64)
