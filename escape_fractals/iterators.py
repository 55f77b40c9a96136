from .complex_value import ComplexNumber
from .variants import Variant

# squared escape radius: norm_squared(z) > ESCAPE_NORM means escaped
ESCAPE_NORM = 2.0


def escape_count(
    z0: ComplexNumber,
    c: ComplexNumber,
    cutoff: int,
    fold: bool = False,
) -> int:
    """
    Iterate z -> f(z) + c starting from z0 and count the steps taken
    before norm_squared(z) exceeds ESCAPE_NORM.

    fold:
        False -> f(z) = z^2           (Julia, Mandelbrot)
        True  -> f(z) = |z|^2 with both components folded positive (Burning Ship)

    Returns an int in [0, cutoff]; exactly cutoff means the orbit never
    escaped and the point is treated as inside the set.
    """
    count = 0
    z = z0
    while count < cutoff:
        if z.norm_squared() > ESCAPE_NORM:
            break
        if fold:
            z = z.absolute().square() + c
        else:
            z = z.square() + c
        count += 1
    return count


def julia_count(point: ComplexNumber, c: ComplexNumber, cutoff: int) -> int:
    # pixel is the seed, the user constant is added each step
    return escape_count(point, c, cutoff)


def mandelbrot_count(point: ComplexNumber, c: ComplexNumber, cutoff: int) -> int:
    # the user constant is the seed, the pixel is added each step
    return escape_count(c, point, cutoff)


def burning_ship_count(point: ComplexNumber, c: ComplexNumber, cutoff: int) -> int:
    return escape_count(c, point, cutoff, fold=True)


def pick_iterator(variant: Variant):
    """Return the evaluator for a variant:
    iterator(point, c, cutoff) -> count
    """
    if variant is Variant.JULIA:
        return julia_count
    if variant is Variant.MANDELBROT:
        return mandelbrot_count
    if variant is Variant.BURNING_SHIP:
        return burning_ship_count
    raise ValueError(f"Unknown variant: {variant}")
