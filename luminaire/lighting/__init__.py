# luminaire/lighting/__init__.py
"""
Lighting Module - light attitude tracking

Components:
- DeltaAttitude: one frame-relative motion (translation + roll/yaw/pitch)
- AttitudeSpec: initial placement (position, orthonormal frame, rotation axis)
- AttitudeState: the update state machine and its cached matrices
- PointLightModel / SpotLightModel: illumination parameter bags
- Light: façade binding one model to one attitude
- LightSnapshot: immutable numpy export for render threads

Example usage:

    from luminaire.lighting import (
        AttitudeSpec, DeltaAttitude, PointLight, PointLightModelSpec,
    )
    from luminaire.core import Vec3, Degrees

    light = PointLight(
        PointLightModelSpec(ambient=Vec3(0.2, 0.2, 0.2)),
        AttitudeSpec.canonical(Vec3(0.0, 4.0, 0.0)),
    )

    # Per frame / input event:
    light.update(DeltaAttitude(Vec3(0.0, 0.0, -0.1), yaw=Degrees(2.0)))

    # Renderer side:
    view = light.view_matrix()
"""

from luminaire.lighting.delta import DeltaAttitude
from luminaire.lighting.spec import AttitudeSpec
from luminaire.lighting.models import (
    IlluminationModel,
    PointLightModel,
    PointLightModelSpec,
    SpotLightModel,
    SpotLightModelSpec,
)
from luminaire.lighting.attitude import (
    AttitudeConfig,
    AttitudeInvariantError,
    AttitudeState,
    EYE_FORWARD,
    EYE_RIGHT,
    EYE_UP,
)
from luminaire.lighting.snapshot import LightSnapshot
from luminaire.lighting.light import Light, PointLight, SpotLight

__all__ = [
    'DeltaAttitude',
    'AttitudeSpec',
    'IlluminationModel',
    'PointLightModel',
    'PointLightModelSpec',
    'SpotLightModel',
    'SpotLightModelSpec',
    'AttitudeConfig',
    'AttitudeInvariantError',
    'AttitudeState',
    'EYE_FORWARD',
    'EYE_RIGHT',
    'EYE_UP',
    'LightSnapshot',
    'Light',
    'PointLight',
    'SpotLight',
]
