from enum import Enum
from typing import Optional


class Variant(str, Enum):
    JULIA = "julia"
    MANDELBROT = "mandel"
    BURNING_SHIP = "ship"


def parse_variant(name) -> Optional[Variant]:
    """
    Look up a variant by its exact draw-type name ("julia", "mandel", "ship").

    Anything else, including other casings or padded names, gives None
    rather than an error; callers treat that as "draw nothing".
    """
    try:
        return Variant(name)
    except ValueError:
        return None
