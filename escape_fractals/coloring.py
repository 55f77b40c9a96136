"""
Iteration counts -> RGBA.

Colorizers take an array of counts (any shape) and return a uint8 array of
shape (..., 4). Channels wrap modulo 256 instead of clamping, which gives
the repeating color bands of each variant.
"""
import numpy as np

from .variants import Variant

OPAQUE = 255
INTERIOR = (0, 0, 0, OPAQUE)
PALETTES = ("bands", "hue")


def _stack_rgba(r, g, b):
    a = np.full_like(r, OPAQUE)
    rgba = np.stack([r, g, b, a], axis=-1)
    return (rgba % 256).astype(np.uint8)


def julia_colors(iters, cutoff):
    # no interior test: a count of cutoff still bands like any other
    iters = np.asarray(iters, dtype=np.int64)
    return _stack_rgba(iters // 4, iters // 2, iters)


def mandelbrot_colors(iters, cutoff):
    iters = np.asarray(iters, dtype=np.int64)
    rgba = _stack_rgba(iters % 8 * 32, iters * 3, iters)
    rgba[iters == cutoff] = INTERIOR
    return rgba


def burning_ship_colors(iters, cutoff):
    iters = np.asarray(iters, dtype=np.int64)
    rgba = _stack_rgba(iters % 4 * 64, iters % 8 * 32, iters % 16 * 8)
    rgba[iters == cutoff] = INTERIOR
    return rgba


def hsv_to_rgb(h, s, v):
    """
    h,s,v in [0,1]. Returns uint8 RGB array with shape (..., 3)
    """
    h = np.asarray(h, dtype=np.float64)
    s = np.broadcast_to(np.asarray(s, dtype=np.float64), h.shape)
    v = np.broadcast_to(np.asarray(v, dtype=np.float64), h.shape)

    i = np.floor(h * 6).astype(int)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    i_mod = np.mod(i, 6)[..., None]

    choices = [
        np.stack([v, t, p], axis=-1),
        np.stack([q, v, p], axis=-1),
        np.stack([p, v, t], axis=-1),
        np.stack([p, q, v], axis=-1),
        np.stack([t, p, v], axis=-1),
        np.stack([v, p, q], axis=-1),
    ]
    rgb = np.select([i_mod == k for k in range(6)], choices)
    return (np.clip(rgb, 0, 1) * 255).astype(np.uint8)


def hue_colors(iters, cutoff):
    """Fully saturated hue cycling with the count; interior is black."""
    iters = np.asarray(iters, dtype=np.int64)
    hue = ((iters * 7) % 360) / 360.0
    rgb = hsv_to_rgb(hue, 1.0, 1.0)
    rgba = np.concatenate([rgb, np.full(rgb.shape[:-1] + (1,), OPAQUE, dtype=np.uint8)], axis=-1)
    rgba[iters == cutoff] = INTERIOR
    return rgba


def pick_colorizer(variant: Variant, palette: str = "bands"):
    """Return colorizer(iters, cutoff) -> uint8 array of shape (..., 4)."""
    if palette == "hue":
        return hue_colors
    if palette != "bands":
        raise ValueError(f"Unknown palette: {palette}")

    if variant is Variant.JULIA:
        return julia_colors
    if variant is Variant.MANDELBROT:
        return mandelbrot_colors
    if variant is Variant.BURNING_SHIP:
        return burning_ship_colors
    raise ValueError(f"Unknown variant: {variant}")


def color_for(count: int, cutoff: int, variant: Variant, palette: str = "bands"):
    """Single-pixel convenience: (r, g, b, a) as plain ints."""
    rgba = pick_colorizer(variant, palette)(np.array([count]), cutoff)[0]
    return tuple(int(ch) for ch in rgba)
