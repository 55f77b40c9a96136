import sys
from pathlib import Path

import numpy as np
import pytest

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from escape_fractals.coloring import (
    INTERIOR,
    burning_ship_colors,
    color_for,
    hsv_to_rgb,
    hue_colors,
    julia_colors,
    mandelbrot_colors,
)
from escape_fractals.variants import Variant


def test_julia_bands_wrap_mod_256():
    rgba = julia_colors(np.array([0, 300, 500], dtype=np.uint32), 500)
    np.testing.assert_array_equal(rgba, [
        [0, 0, 0, 255],
        [75, 150, 44, 255],
        # no interior special case for Julia
        [125, 250, 244, 255],
    ])
    assert rgba.dtype == np.uint8


def test_mandelbrot_bands():
    rgba = mandelbrot_colors(np.array([9, 200, 500]), 500)
    np.testing.assert_array_equal(rgba, [
        [32, 27, 9, 255],
        [0, 88, 200, 255],
        list(INTERIOR),
    ])


def test_burning_ship_bands():
    rgba = burning_ship_colors(np.array([13, 50]), 50)
    np.testing.assert_array_equal(rgba, [[64, 160, 104, 255], [0, 0, 0, 255]])


def test_colorizers_keep_grid_shape():
    iters = np.arange(12, dtype=np.uint32).reshape(3, 4)
    assert mandelbrot_colors(iters, 11).shape == (3, 4, 4)
    assert hue_colors(iters, 11).shape == (3, 4, 4)


@pytest.mark.parametrize("variant", list(Variant))
def test_alpha_always_opaque(variant):
    for count in range(0, 700, 7):
        rgba = color_for(count, 600, variant)
        assert rgba[3] == 255
        assert all(0 <= ch <= 255 for ch in rgba)


def test_color_for_returns_plain_ints():
    assert color_for(9, 100, Variant.MANDELBROT) == (32, 27, 9, 255)
    assert color_for(100, 100, Variant.MANDELBROT) == INTERIOR
    assert all(type(ch) is int for ch in color_for(3, 10, Variant.JULIA))


def test_hsv_red_and_grays():
    np.testing.assert_array_equal(hsv_to_rgb(np.array([0.0]), 1.0, 1.0), [[255, 0, 0]])
    # zero saturation is gray at the value level
    np.testing.assert_array_equal(hsv_to_rgb(np.array([0.4, 0.9]), 0.0, 1.0), [[255, 255, 255]] * 2)
    np.testing.assert_array_equal(hsv_to_rgb(np.array([0.7]), 1.0, 0.0), [[0, 0, 0]])


def test_hue_palette():
    rgba = hue_colors(np.array([0, 10]), 10)
    np.testing.assert_array_equal(rgba, [[255, 0, 0, 255], list(INTERIOR)])
    # the hue palette ignores the variant
    assert color_for(3, 10, Variant.JULIA, palette="hue") == color_for(3, 10, Variant.MANDELBROT, palette="hue")


def test_unknown_palette_raises():
    with pytest.raises(ValueError):
        color_for(3, 10, Variant.MANDELBROT, palette="smooth")
