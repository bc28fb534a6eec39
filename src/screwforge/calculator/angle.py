"""
Angle value type.

Thread geometry mixes flank angles, cone angles and arc sweeps; carrying
them as an explicit type keeps degrees and radians from being confused.

Example:
    >>> from screwforge.calculator.angle import Angle
    >>> half = Angle.from_degrees(60) / 2
    >>> round(half.tan(), 6)
    0.57735
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Angle:
    """An angle stored in radians."""

    radians: float

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(math.radians(degrees))

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(float(radians))

    @classmethod
    def zero(cls) -> "Angle":
        return cls(0.0)

    @classmethod
    def right(cls) -> "Angle":
        """90 degrees."""
        return cls(math.pi / 2)

    @classmethod
    def atan2(cls, y: float, x: float) -> "Angle":
        return cls(math.atan2(y, x))

    @classmethod
    def acos(cls, value: float) -> "Angle":
        return cls(math.acos(value))

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        return math.tan(self.radians)

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __neg__(self) -> "Angle":
        return Angle(-self.radians)

    def __mul__(self, factor: float) -> "Angle":
        if isinstance(factor, Angle):
            return NotImplemented
        return Angle(self.radians * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Angle":
        if isinstance(divisor, Angle):
            return NotImplemented
        return Angle(self.radians / divisor)

    def __repr__(self) -> str:
        return f"Angle({self.degrees:g}°)"


def degrees(value: float) -> Angle:
    """Shorthand for ``Angle.from_degrees``."""
    return Angle.from_degrees(value)
