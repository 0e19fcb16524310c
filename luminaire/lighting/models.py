# luminaire/lighting/models.py
"""
Illumination models - the parameters a light carries into the shading stage.

A model type names its parameter spec in ``Spec`` and builds itself from one
with ``from_spec``. Values are copied verbatim; ranges are a caller contract
(cutoffs within [0, 180] degrees, attenuation coefficients >= 0).
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Type

from ..core.angle import Angle, to_radians
from ..core.math3d import Vec3


class IlluminationModel(ABC):
    """Capability: constructible from a matching parameter spec."""

    Spec: ClassVar[Type]

    @classmethod
    @abstractmethod
    def from_spec(cls, spec) -> IlluminationModel:
        ...


# =============================================================================
# Point Light
# =============================================================================

@dataclass(frozen=True)
class PointLightModelSpec:
    ambient: Vec3 = field(default_factory=Vec3.zero)
    diffuse: Vec3 = field(default_factory=Vec3.zero)
    specular: Vec3 = field(default_factory=Vec3.zero)


@dataclass
class PointLightModel(IlluminationModel):
    ambient: Vec3
    diffuse: Vec3
    specular: Vec3

    Spec: ClassVar[Type] = PointLightModelSpec

    @classmethod
    def from_spec(cls, spec: PointLightModelSpec) -> PointLightModel:
        return cls(
            ambient=spec.ambient,
            diffuse=spec.diffuse,
            specular=spec.specular,
        )


# =============================================================================
# Spot Light
# =============================================================================

@dataclass(frozen=True, init=False)
class SpotLightModelSpec:
    """
    Spotlight parameters.

    cutoff / outer_cutoff bound the inner and outer cone; they accept
    Degrees, Radians or plain degrees and are stored in radians.
    constant, linear and quadratic are the attenuation coefficients.
    """
    cutoff: float
    outer_cutoff: float
    ambient: Vec3
    diffuse: Vec3
    specular: Vec3
    constant: float
    linear: float
    quadratic: float

    def __init__(self, cutoff: Angle, outer_cutoff: Angle,
                 ambient: Vec3, diffuse: Vec3, specular: Vec3,
                 constant: float = 1.0, linear: float = 0.0, quadratic: float = 0.0):
        object.__setattr__(self, 'cutoff', to_radians(cutoff))
        object.__setattr__(self, 'outer_cutoff', to_radians(outer_cutoff))
        object.__setattr__(self, 'ambient', ambient)
        object.__setattr__(self, 'diffuse', diffuse)
        object.__setattr__(self, 'specular', specular)
        object.__setattr__(self, 'constant', float(constant))
        object.__setattr__(self, 'linear', float(linear))
        object.__setattr__(self, 'quadratic', float(quadratic))


@dataclass
class SpotLightModel(IlluminationModel):
    cutoff: float
    outer_cutoff: float
    ambient: Vec3
    diffuse: Vec3
    specular: Vec3
    constant: float
    linear: float
    quadratic: float

    Spec: ClassVar[Type] = SpotLightModelSpec

    @classmethod
    def from_spec(cls, spec: SpotLightModelSpec) -> SpotLightModel:
        return cls(
            cutoff=spec.cutoff,
            outer_cutoff=spec.outer_cutoff,
            ambient=spec.ambient,
            diffuse=spec.diffuse,
            specular=spec.specular,
            constant=spec.constant,
            linear=spec.linear,
            quadratic=spec.quadratic,
        )
