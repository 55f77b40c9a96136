# escape_fractals/utils.py
from numbers import Integral

from .complex_value import ComplexNumber


def parse_complex(s: str) -> ComplexNumber:
    """
    Parse strings like '0.3+0.5j' or '-0.15+0.65i' into a ComplexNumber.
    Plain real numbers are accepted too.
    """
    s = str(s).strip().lower().replace(" ", "")
    if s.endswith("i"):
        s = s[:-1] + "j"
    if s.endswith("j"):
        return ComplexNumber.from_complex(complex(s))
    return ComplexNumber(float(s), 0.0)


def _is_int(v) -> bool:
    return isinstance(v, Integral) and not isinstance(v, bool)


def validate_dimensions(width: int, height: int, cutoff: int):
    """
    Reject inputs the mapping cannot handle: the box mapping divides by
    (W - 1) and (H - 1), so both must be integers of at least 2.
    """
    if not (_is_int(width) and _is_int(height)):
        raise ValueError(f"width and height must be integers, got {width!r}x{height!r}")
    if width < 2 or height < 2:
        raise ValueError(f"width and height must be >= 2, got {width}x{height}")
    if not _is_int(cutoff) or cutoff < 0:
        raise ValueError(f"cutoff must be a non-negative integer, got {cutoff!r}")
