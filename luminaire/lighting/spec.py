# luminaire/lighting/spec.py
"""
AttitudeSpec - initial placement of a light in world space.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..core.math3d import Vec3


@dataclass(frozen=True)
class AttitudeSpec:
    """
    Rigid placement of a light: location, local frame and rotation axis.

    (forward, right, up) must be a right-handed orthonormal frame with
    forward along the light's negative z-axis, i.e. right x up == -forward.
    This is not checked; a skewed frame only degrades numerically.

    axis seeds the rotation accumulator and need not match any basis vector.
    """
    position: Vec3
    forward: Vec3
    right: Vec3
    up: Vec3
    axis: Vec3

    @staticmethod
    def canonical(position: Vec3 = None) -> AttitudeSpec:
        """Eye-aligned frame (forward -z, right +x, up +y) rotating about +y."""
        if position is None:
            position = Vec3.zero()
        return AttitudeSpec(
            position=position,
            forward=Vec3(0.0, 0.0, -1.0),
            right=Vec3.unit_x(),
            up=Vec3.unit_y(),
            axis=Vec3.unit_y(),
        )

    def __str__(self) -> str:
        return (
            f"AttitudeSpec [position={self.position}, forward={self.forward}, "
            f"right={self.right}, up={self.up}, axis={self.axis}]"
        )
