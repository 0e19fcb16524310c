# luminaire/__init__.py
"""
luminaire - light attitude tracking for real-time renderers.

Core components:
- core: Vec3/Vec4/Mat4/Quat math and tagged Degrees/Radians angles
- lighting: DeltaAttitude, AttitudeSpec, AttitudeState, Light and models
"""

from .core import (
    Vec3, Vec4,
    Mat4,
    Quat,
    SingularMatrixError,
    Degrees,
    Radians,
)

from .lighting import (
    DeltaAttitude,
    AttitudeSpec,
    AttitudeConfig,
    AttitudeInvariantError,
    AttitudeState,
    IlluminationModel,
    PointLightModel,
    PointLightModelSpec,
    SpotLightModel,
    SpotLightModelSpec,
    Light,
    PointLight,
    SpotLight,
    LightSnapshot,
)

__version__ = '0.1.0'
