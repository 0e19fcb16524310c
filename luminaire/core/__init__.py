# luminaire/core/__init__.py
"""Core module - math and angle types shared by the lighting layer."""

from .math3d import (
    Vec3, Vec4,
    Mat4,
    Quat,
    SingularMatrixError,
    SINGULAR_EPSILON,
    deg_to_rad, rad_to_deg,
)

from .angle import (
    Angle,
    Degrees,
    Radians,
    to_radians,
)

__all__ = [
    # Math
    'Vec3', 'Vec4',
    'Mat4',
    'Quat',
    'SingularMatrixError',
    'SINGULAR_EPSILON',
    'deg_to_rad', 'rad_to_deg',

    # Angles
    'Angle',
    'Degrees',
    'Radians',
    'to_radians',
]
