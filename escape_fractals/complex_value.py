from dataclasses import dataclass


@dataclass(frozen=True)
class ComplexNumber:
    """
    Immutable real/imaginary pair used by the escape-time recurrences.

    Every operation returns a fresh instance; nothing mutates in place.
    NaN and inf propagate by ordinary float rules.
    """
    real: float
    imaginary: float

    def square(self) -> "ComplexNumber":
        real = (self.real * self.real) - (self.imaginary * self.imaginary)
        imaginary = 2.0 * self.real * self.imaginary
        return ComplexNumber(real, imaginary)

    def add(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def __add__(self, other: "ComplexNumber") -> "ComplexNumber":
        return self.add(other)

    def norm_squared(self) -> float:
        # compared against the squared escape radius, so no sqrt
        return (self.real * self.real) + (self.imaginary * self.imaginary)

    def absolute(self) -> "ComplexNumber":
        """Fold both components into the non-negative quadrant."""
        return ComplexNumber(abs(self.real), abs(self.imaginary))

    @classmethod
    def from_complex(cls, value: complex) -> "ComplexNumber":
        value = complex(value)
        return cls(float(value.real), float(value.imag))

    def to_complex(self) -> complex:
        return complex(self.real, self.imaginary)
