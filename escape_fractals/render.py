from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .coloring import pick_colorizer
from .complex_value import ComplexNumber
from .coordinates import canvas_size, map_pixel, pixel_ranges
from .iterators import pick_iterator
from .utils import validate_dimensions
from .variants import Variant, parse_variant


class FrameSizeError(ValueError):
    """Pixel buffer length does not match its declared dimensions."""


@dataclass(frozen=True)
class FractalParameters:
    variant: Variant
    constant: ComplexNumber
    width: int
    height: int
    cutoff: int
    palette: str = "bands"


@dataclass(frozen=True)
class Frame:
    """
    Finished RGBA buffer plus the grid size it was generated for.

    Bytes are in scan order: for each x, every y, 4 bytes per pixel.
    A canvas reads them as rows of `width` pixels.
    """
    data: bytes
    width: int
    height: int

    def __post_init__(self):
        expected = 4 * self.width * self.height
        if len(self.data) != expected:
            raise FrameSizeError(
                f"buffer holds {len(self.data)} bytes, "
                f"{self.width}x{self.height} RGBA needs {expected}"
            )

    def __len__(self):
        return len(self.data)



def _count_columns(params: FractalParameters, x_start: int, x_stop: int) -> np.ndarray:
    """Escape counts for columns x in [x_start, x_stop), flat in scan order."""
    iterator = pick_iterator(params.variant)
    _, ys = pixel_ranges(params.width, params.height)
    c = params.constant
    cutoff = params.cutoff

    iters = np.zeros((x_stop - x_start) * len(ys), dtype=np.uint32)
    i = 0
    for x in range(x_start, x_stop):
        for y in ys:
            point = map_pixel(params.variant, x, y, params.width, params.height)
            iters[i] = iterator(point, c, cutoff)
            i += 1
    return iters


def _column_blocks(width: int, workers: int):
    xs = range(-width, width)
    n = len(xs)
    workers = max(1, min(workers, n))
    step, extra = divmod(n, workers)
    start = xs.start
    for k in range(workers):
        stop = start + step + (1 if k < extra else 0)
        yield start, stop
        start = stop


def render_frame(params: FractalParameters, workers: int = 1) -> Frame:
    """
    Render one full frame.

    workers > 1 splits the outer x range into contiguous blocks computed in
    a process pool. Each block lands in its own slice of the count array, so
    the bytes match the serial render exactly.
    """
    validate_dimensions(params.width, params.height, params.cutoff)
    colorize = pick_colorizer(params.variant, params.palette)
    out_w, out_h = canvas_size(params.width, params.height)

    if workers <= 1:
        xs, _ = pixel_ranges(params.width, params.height)
        iters = _count_columns(params, xs.start, xs.stop)
    else:
        iters = np.zeros(out_w * out_h, dtype=np.uint32)
        blocks = list(_column_blocks(params.width, workers))
        x0 = blocks[0][0]
        with ProcessPoolExecutor(max_workers=len(blocks)) as pool:
            futures = [pool.submit(_count_columns, params, a, b) for a, b in blocks]
            for (a, b), fut in zip(blocks, futures):
                offset = (a - x0) * out_h
                iters[offset:offset + (b - a) * out_h] = fut.result()

    rgba = colorize(iters, params.cutoff)
    return Frame(rgba.astype(np.uint8).tobytes(), out_w, out_h)


def render(
    width: int,
    height: int,
    variant: str,
    real: float,
    imaginary: float,
    cutoff: int,
    *,
    palette: str = "bands",
    workers: int = 1,
) -> Optional[Frame]:
    """
    Render entry point.

    variant is exactly "julia", "mandel" or "ship". Anything else draws
    nothing and returns None without raising.
    """
    picked = parse_variant(variant)
    if picked is None:
        return None

    params = FractalParameters(
        variant=picked,
        constant=ComplexNumber(float(real), float(imaginary)),
        width=width,
        height=height,
        cutoff=cutoff,
        palette=palette,
    )
    return render_frame(params, workers=workers)
