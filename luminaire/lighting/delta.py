# luminaire/lighting/delta.py
"""
DeltaAttitude - one requested motion of a light, relative to its own frame.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..core.angle import Angle, to_radians
from ..core.math3d import Vec3, rad_to_deg


@dataclass(frozen=True, init=False)
class DeltaAttitude:
    """
    Change in attitude of a light.

    delta_position is expressed in the light's own axes: x along right,
    y along up, z backward (a negative z moves the light forward).
    roll, yaw and pitch rotate about the light's forward, up and right axes
    and are stored in radians.
    """
    delta_position: Vec3
    roll: float
    yaw: float
    pitch: float

    def __init__(self, delta_position: Vec3 = None, roll: Angle = 0.0,
                 yaw: Angle = 0.0, pitch: Angle = 0.0):
        if delta_position is None:
            delta_position = Vec3.zero()
        object.__setattr__(self, 'delta_position', Vec3(
            float(delta_position.x), float(delta_position.y), float(delta_position.z)
        ))
        object.__setattr__(self, 'roll', to_radians(roll))
        object.__setattr__(self, 'yaw', to_radians(yaw))
        object.__setattr__(self, 'pitch', to_radians(pitch))

    @staticmethod
    def zero() -> DeltaAttitude:
        return DeltaAttitude(Vec3.zero(), 0.0, 0.0, 0.0)

    def is_zero(self) -> bool:
        return (
            self.delta_position == Vec3.zero()
            and self.roll == 0.0 and self.yaw == 0.0 and self.pitch == 0.0
        )

    def __str__(self) -> str:
        p = self.delta_position
        return (
            f"DeltaAttitude [x={p.x}, y={p.y}, z={p.z}, "
            f"roll={rad_to_deg(self.roll)}, yaw={rad_to_deg(self.yaw)}, "
            f"pitch={rad_to_deg(self.pitch)}]"
        )
