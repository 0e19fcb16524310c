# luminaire/core/angle.py
"""
Tagged angle values.

Angles cross the public API as Degrees or Radians so the unit is never
guessed. Plain numbers are still accepted and read as degrees.
"""

from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Union

from .math3d import deg_to_rad, rad_to_deg


@dataclass(frozen=True)
class Degrees:
    value: float = 0.0

    def to_radians(self) -> Radians:
        return Radians(deg_to_rad(self.value))

    def to_degrees(self) -> Degrees:
        return self

    def __neg__(self) -> Degrees:
        return Degrees(-self.value)

    def __str__(self) -> str:
        return f"{self.value}°"


@dataclass(frozen=True)
class Radians:
    value: float = 0.0

    def to_radians(self) -> Radians:
        return self

    def to_degrees(self) -> Degrees:
        return Degrees(rad_to_deg(self.value))

    def __neg__(self) -> Radians:
        return Radians(-self.value)

    def __str__(self) -> str:
        return f"{self.value} rad"


Angle = Union[Degrees, Radians, Real]


def to_radians(angle: Angle) -> float:
    """Normalize an angle to a float in radians.

    Untagged real numbers are taken to be degrees.
    """
    if isinstance(angle, (Degrees, Radians)):
        return float(angle.to_radians().value)
    # bool is a Real subclass; reject it explicitly
    if isinstance(angle, Real) and not isinstance(angle, bool):
        return deg_to_rad(float(angle))
    raise TypeError(f"Expected Degrees, Radians or a real number, got {type(angle).__name__}")
