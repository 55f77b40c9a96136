"""
Pixel -> complex-plane mapping.

Two conventions:
    centered-symmetric  (Julia)              point = (y*SCALE - PARAM_R, x*SCALE - PARAM_I)
    normalized box      (Mandelbrot, Ship)   point = ((CX_MIN + x) / (W - 1) * (CX_MAX - CX_MIN),
                                                      (CY_MIN + y) / (H - 1) * (CY_MAX - CY_MIN))

Both walk x over [-W, W) and y over [-H, H), so the canvas is 2W x 2H.
The box formula adds x to CX_MIN before dividing. That is not a textbook
linear interpolation over [CX_MIN, CX_MAX], and it must stay that way or
every rendered image shifts.
"""
from .complex_value import ComplexNumber
from .variants import Variant

# --- Julia (centered-symmetric) ---
SCALE = 0.005
PARAM_R = 1.5
PARAM_I = 1.5

# --- Mandelbrot / Burning Ship (bounding box) ---
CX_MIN, CX_MAX = -2.0, 0.5
CY_MIN, CY_MAX = -1.0, 1.0


def pixel_ranges(width: int, height: int):
    """Return (x_range, y_range) of pixel indices; x is the outer loop."""
    return range(-width, width), range(-height, height)


def canvas_size(width: int, height: int):
    """Effective (width, height) of the pixel grid produced for W, H."""
    return 2 * width, 2 * height


def julia_point(x: int, y: int) -> ComplexNumber:
    return ComplexNumber(y * SCALE - PARAM_R, x * SCALE - PARAM_I)


def box_point(x: int, y: int, width: int, height: int) -> ComplexNumber:
    # width/height of 1 divides by zero; callers validate beforehand
    real = (CX_MIN + x) / (width - 1.0) * (CX_MAX - CX_MIN)
    imaginary = (CY_MIN + y) / (height - 1.0) * (CY_MAX - CY_MIN)
    return ComplexNumber(real, imaginary)


def map_pixel(variant: Variant, x: int, y: int, width: int, height: int) -> ComplexNumber:
    if variant is Variant.JULIA:
        return julia_point(x, y)
    if variant in (Variant.MANDELBROT, Variant.BURNING_SHIP):
        return box_point(x, y, width, height)
    raise ValueError(f"Unknown variant: {variant}")
