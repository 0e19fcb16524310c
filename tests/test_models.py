import dataclasses
import math
import pytest
from luminaire.core import Vec3, Degrees, Radians
from luminaire.lighting import (
    IlluminationModel,
    PointLightModel,
    PointLightModelSpec,
    SpotLightModel,
    SpotLightModelSpec,
)


def make_spot_spec():
    return SpotLightModelSpec(
        cutoff=Degrees(12.5),
        outer_cutoff=Degrees(17.5),
        ambient=Vec3(0.2, 0.2, 0.2),
        diffuse=Vec3(0.5, 0.5, 0.5),
        specular=Vec3(1.0, 1.0, 1.0),
        constant=1.0,
        linear=0.09,
        quadratic=0.032,
    )


def test_models_name_their_spec_type():
    assert PointLightModel.Spec is PointLightModelSpec
    assert SpotLightModel.Spec is SpotLightModelSpec


def test_capability_cannot_be_instantiated():
    with pytest.raises(TypeError):
        IlluminationModel()


def test_point_model_copies_spec():
    spec = PointLightModelSpec(
        ambient=Vec3(0.1, 0.1, 0.1),
        diffuse=Vec3(0.8, 0.8, 0.8),
        specular=Vec3(1.0, 1.0, 1.0),
    )
    model = PointLightModel.from_spec(spec)
    assert isinstance(model, IlluminationModel)
    assert model.ambient == spec.ambient
    assert model.diffuse == spec.diffuse
    assert model.specular == spec.specular

    with pytest.raises(dataclasses.FrozenInstanceError):
        model.diffuse.x = 0.0
    assert spec.diffuse.x == 0.8


def test_spot_model_copies_spec():
    spec = make_spot_spec()
    model = SpotLightModel.from_spec(spec)
    assert model.cutoff == pytest.approx(math.radians(12.5))
    assert model.outer_cutoff == pytest.approx(math.radians(17.5))
    assert model.ambient == Vec3(0.2, 0.2, 0.2)
    assert model.diffuse == Vec3(0.5, 0.5, 0.5)
    assert model.specular == Vec3(1.0, 1.0, 1.0)
    assert model.constant == 1.0
    assert model.linear == 0.09
    assert model.quadratic == 0.032


def test_spot_cutoffs_accept_any_angle_form():
    spec = SpotLightModelSpec(
        cutoff=Radians(0.2), outer_cutoff=30,
        ambient=Vec3(), diffuse=Vec3(), specular=Vec3(),
    )
    assert spec.cutoff == 0.2
    assert spec.outer_cutoff == pytest.approx(math.pi / 6)
    assert (spec.constant, spec.linear, spec.quadratic) == (1.0, 0.0, 0.0)


def test_out_of_range_values_are_not_validated():
    spec = SpotLightModelSpec(
        cutoff=Degrees(270.0), outer_cutoff=Degrees(-5.0),
        ambient=Vec3(), diffuse=Vec3(), specular=Vec3(),
        linear=-1.0,
    )
    model = SpotLightModel.from_spec(spec)
    assert model.linear == -1.0


def test_model_specs_are_hashable_values():
    point = PointLightModelSpec(diffuse=Vec3(0.5, 0.5, 0.5))
    assert hash(point) == hash(PointLightModelSpec(diffuse=Vec3(0.5, 0.5, 0.5)))

    spot = SpotLightModelSpec(
        cutoff=12.5, outer_cutoff=17.5,
        ambient=Vec3(), diffuse=Vec3(1.0, 1.0, 1.0), specular=Vec3(),
    )
    assert {spot: "key"}[spot] == "key"
    with pytest.raises(dataclasses.FrozenInstanceError):
        spot.diffuse.y = 0.0
