# luminaire/lighting/light.py
"""
Light - one illumination model bound to one attitude.

The renderer pulls state from the accessors (or a LightSnapshot); nothing is
pushed. Each light is independent and exclusively owned by its caller.
"""

from __future__ import annotations
from typing import Generic, Optional, Type, TypeVar

from ..core.math3d import Vec3, Mat4
from .attitude import AttitudeConfig, AttitudeState, EYE_FORWARD, EYE_RIGHT, EYE_UP
from .delta import DeltaAttitude
from .models import IlluminationModel, PointLightModel, SpotLightModel
from .snapshot import LightSnapshot
from .spec import AttitudeSpec

M = TypeVar('M', bound=IlluminationModel)


class Light(Generic[M]):
    """A light source: illumination parameters plus a tracked attitude."""

    def __init__(self, model_cls: Type[M], model_spec, attitude_spec: AttitudeSpec,
                 config: Optional[AttitudeConfig] = None):
        self._model: M = model_cls.from_spec(model_spec)
        self._attitude = AttitudeState.from_spec(attitude_spec, config)

    # -------------------------------------------------------------------------
    # Updates
    # -------------------------------------------------------------------------

    def update(self, delta: DeltaAttitude):
        """Apply a frame-relative motion: rotate, then move along the new frame."""
        self._attitude.update(delta)

    def update_attitude_eye(self, delta: DeltaAttitude):
        self._attitude.update(delta)

    def update_position_world(self, position: Vec3):
        self._attitude.update_position_world(position)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def model(self) -> M:
        return self._model

    @property
    def attitude(self) -> AttitudeState:
        return self._attitude

    @property
    def has_view_matrix(self) -> bool:
        return self._attitude.has_view_matrix

    @property
    def position(self) -> Vec3:
        return self._attitude.position

    @property
    def up_axis(self) -> Vec3:
        return self._attitude.up_axis

    @property
    def right_axis(self) -> Vec3:
        return self._attitude.right_axis

    @property
    def forward_axis(self) -> Vec3:
        return self._attitude.forward_axis

    @property
    def up_axis_eye(self) -> Vec3:
        self._require_view_matrix("up_axis_eye")
        return EYE_UP.xyz()

    @property
    def right_axis_eye(self) -> Vec3:
        self._require_view_matrix("right_axis_eye")
        return EYE_RIGHT.xyz()

    @property
    def forward_axis_eye(self) -> Vec3:
        self._require_view_matrix("forward_axis_eye")
        return EYE_FORWARD.xyz()

    @property
    def rotation_axis(self) -> Vec3:
        return self._attitude.rotation_axis

    def model_matrix(self) -> Mat4:
        """Translation to the light's position; orientation is not included."""
        return Mat4.translate_vec(self._attitude.position)

    def view_matrix(self) -> Mat4:
        """World-to-light-eye transform."""
        self._require_view_matrix("view_matrix")
        return self._attitude.view_matrix

    def snapshot(self, dtype: Optional[str] = None) -> LightSnapshot:
        return LightSnapshot.from_light(self, dtype=dtype)

    def _require_view_matrix(self, name: str):
        if not self._attitude.has_view_matrix:
            raise NotImplementedError(f"{name} requires cache_view_matrix=True")

    def __repr__(self) -> str:
        return f"Light(model={self._model!r}, attitude={self._attitude!r})"


def PointLight(model_spec, attitude_spec: AttitudeSpec,
               config: Optional[AttitudeConfig] = None) -> Light[PointLightModel]:
    return Light(PointLightModel, model_spec, attitude_spec, config)


def SpotLight(model_spec, attitude_spec: AttitudeSpec,
              config: Optional[AttitudeConfig] = None) -> Light[SpotLightModel]:
    return Light(SpotLightModel, model_spec, attitude_spec, config)
