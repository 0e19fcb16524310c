# luminaire/lighting/attitude.py
"""
AttitudeState - position and orientation of a light in world space.

The light frame is right-handed and faces along its negative z-axis.
Orientation lives in a quaternion accumulator; the basis vectors are always
re-derived from it, never rotated incrementally, so they stay orthonormal
up to floating-point error.

With ``AttitudeConfig.cache_view_matrix`` enabled the state also keeps
translation, rotation and view matrices, and every public mutator leaves
``view_matrix == rotation_matrix @ translation_matrix``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from ..core.math3d import Vec3, Vec4, Mat4, Quat, SingularMatrixError, SINGULAR_EPSILON
from .delta import DeltaAttitude
from .spec import AttitudeSpec

logger = logging.getLogger(__name__)

# Canonical eye-space axes.
EYE_FORWARD = Vec4.direction(0.0, 0.0, -1.0)
EYE_RIGHT = Vec4.direction(1.0, 0.0, 0.0)
EYE_UP = Vec4.direction(0.0, 1.0, 0.0)


class AttitudeInvariantError(RuntimeError):
    """The attitude reached a state no well-formed update sequence can produce."""


@dataclass
class AttitudeConfig:
    cache_view_matrix: bool = True
    snapshot_dtype: str = "f4"
    singular_epsilon: float = SINGULAR_EPSILON


class AttitudeState:
    """Mutable attitude of one light. Not thread-safe; callers serialize mutators."""

    __slots__ = (
        'position', 'forward', 'right', 'up', 'axis', 'config',
        'translation_matrix', 'rotation_matrix', 'view_matrix',
    )

    def __init__(self, position: Vec3, forward: Vec4, right: Vec4, up: Vec4,
                 axis: Quat, config: Optional[AttitudeConfig] = None):
        self.position = position
        self.forward = forward
        self.right = right
        self.up = up
        self.axis = axis
        self.config = config if config is not None else AttitudeConfig()

        self.translation_matrix: Optional[Mat4] = None
        self.rotation_matrix: Optional[Mat4] = None
        self.view_matrix: Optional[Mat4] = None
        if self.config.cache_view_matrix:
            self.translation_matrix = Mat4.translate_vec(-self.position)
            self.rotation_matrix = self.axis.to_mat4()
            self._commit_view_matrix()

    @classmethod
    def from_spec(cls, spec: AttitudeSpec,
                  config: Optional[AttitudeConfig] = None) -> AttitudeState:
        state = cls(
            position=spec.position,
            forward=spec.forward.to_homogeneous(),
            right=spec.right.to_homogeneous(),
            up=spec.up.to_homogeneous(),
            axis=Quat.pure(spec.axis),
            config=config,
        )
        logger.debug("Attitude created from %s (view matrix cached: %s)",
                     spec, state.has_view_matrix)
        return state

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def has_view_matrix(self) -> bool:
        return self.config.cache_view_matrix

    @property
    def forward_axis(self) -> Vec3:
        return self.forward.xyz()

    @property
    def right_axis(self) -> Vec3:
        return self.right.xyz()

    @property
    def up_axis(self) -> Vec3:
        return self.up.xyz()

    @property
    def rotation_axis(self) -> Vec3:
        """Vector part of the accumulator. Not guaranteed to be unit length."""
        return self.axis.vector

    # -------------------------------------------------------------------------
    # Updates
    # -------------------------------------------------------------------------

    def update_orientation(self, delta: DeltaAttitude):
        """Rotate by yaw, then pitch, then roll about the pre-update frame."""
        self._rotate(delta)
        if self.has_view_matrix:
            self._commit_view_matrix()

    def update_position_eye(self, delta: DeltaAttitude):
        """Move along the current frame: -z forward, +y up, +x right."""
        self._translate(delta)
        if self.has_view_matrix:
            self._commit_view_matrix()

    def update_position_world(self, position: Vec3):
        """Place the light at an absolute world position; orientation is untouched."""
        if not self.has_view_matrix:
            raise NotImplementedError(
                "absolute positioning requires cache_view_matrix=True"
            )
        self.position = position
        self.translation_matrix = self._invert(
            Mat4.translate_vec(self.position), "translation"
        )
        self._commit_view_matrix()
        logger.debug("Attitude moved to world position %s", self.position)

    def update(self, delta: DeltaAttitude):
        """Rotate first, then translate along the rotated frame."""
        self._rotate(delta)
        self._translate(delta)
        if self.has_view_matrix:
            self._commit_view_matrix()
        logger.debug("Attitude updated by %s -> position=%s forward=%s",
                     delta, self.position, self.forward)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _rotate(self, delta: DeltaAttitude):
        axis_yaw = self.up.xyz()
        axis_pitch = self.right.xyz()
        axis_roll = self.forward.xyz()

        self.axis = Quat.from_axis_angle(axis_yaw, delta.yaw) * self.axis
        self.axis = Quat.from_axis_angle(axis_pitch, delta.pitch) * self.axis
        self.axis = Quat.from_axis_angle(axis_roll, delta.roll) * self.axis

        # Maps eye space onto world space.
        eye_to_world = self.axis.to_mat4()
        self.forward = eye_to_world @ EYE_FORWARD
        self.right = eye_to_world @ EYE_RIGHT
        self.up = eye_to_world @ EYE_UP

        if self.has_view_matrix:
            self.rotation_matrix = self._invert(eye_to_world, "rotation")

    def _translate(self, delta: DeltaAttitude):
        dp = delta.delta_position
        self.position = self.position + self.forward.xyz() * -dp.z
        self.position = self.position + self.up.xyz() * dp.y
        self.position = self.position + self.right.xyz() * dp.x

        if self.has_view_matrix:
            self.translation_matrix = self._invert(
                Mat4.translate_vec(self.position), "translation"
            )

    def _commit_view_matrix(self):
        self.view_matrix = self.rotation_matrix @ self.translation_matrix

    def _invert(self, matrix: Mat4, what: str) -> Mat4:
        try:
            return matrix.inverse(self.config.singular_epsilon)
        except SingularMatrixError as exc:
            logger.error("Singular %s matrix in light attitude: %r", what, matrix)
            raise AttitudeInvariantError(
                f"{what} matrix is not invertible; the attitude frame is corrupt"
            ) from exc

    def __repr__(self) -> str:
        return (
            f"AttitudeState(position={self.position!r}, forward={self.forward_axis!r}, "
            f"right={self.right_axis!r}, up={self.up_axis!r}, axis={self.axis!r})"
        )
