import dataclasses
import math
import pytest

from luminaire.core import Vec3, Mat4, Degrees
from luminaire.lighting import (
    AttitudeConfig,
    AttitudeSpec,
    DeltaAttitude,
    Light,
    PointLight,
    PointLightModel,
    PointLightModelSpec,
    SpotLight,
    SpotLightModel,
    SpotLightModelSpec,
)


def assert_vec3_approx(actual: Vec3, expected: tuple, eps=1e-9):
    assert abs(actual.x - expected[0]) < eps, f"x: {actual.x} != {expected[0]}"
    assert abs(actual.y - expected[1]) < eps, f"y: {actual.y} != {expected[1]}"
    assert abs(actual.z - expected[2]) < eps, f"z: {actual.z} != {expected[2]}"


def point_spec():
    return PointLightModelSpec(
        ambient=Vec3(0.2, 0.2, 0.2),
        diffuse=Vec3(0.5, 0.5, 0.5),
        specular=Vec3(1.0, 1.0, 1.0),
    )


def spot_spec():
    return SpotLightModelSpec(
        cutoff=Degrees(12.5), outer_cutoff=Degrees(17.5),
        ambient=Vec3(0.1, 0.1, 0.1), diffuse=Vec3(0.8, 0.8, 0.8),
        specular=Vec3(1.0, 1.0, 1.0),
        constant=1.0, linear=0.09, quadratic=0.032,
    )


def test_point_light_construction():
    light = PointLight(point_spec(), AttitudeSpec.canonical(Vec3(0.0, 4.0, 0.0)))
    assert isinstance(light.model, PointLightModel)
    assert light.model.diffuse == Vec3(0.5, 0.5, 0.5)
    assert light.position == Vec3(0.0, 4.0, 0.0)
    assert light.forward_axis == Vec3(0.0, 0.0, -1.0)
    assert light.right_axis == Vec3(1.0, 0.0, 0.0)
    assert light.up_axis == Vec3(0.0, 1.0, 0.0)
    assert light.rotation_axis == Vec3(0.0, 1.0, 0.0)


def test_spot_light_construction():
    light = SpotLight(spot_spec(), AttitudeSpec.canonical())
    assert isinstance(light.model, SpotLightModel)
    assert light.model.cutoff == pytest.approx(math.radians(12.5))
    assert light.model.quadratic == 0.032


def test_generic_constructor():
    light = Light(SpotLightModel, spot_spec(), AttitudeSpec.canonical())
    assert isinstance(light.model, SpotLightModel)


def test_scenario_yaw_then_forward():
    light = PointLight(point_spec(), AttitudeSpec.canonical())
    light.update(DeltaAttitude(Vec3(0.0, 0.0, -1.0), yaw=Degrees(90.0)))
    assert_vec3_approx(light.right_axis, (0.0, 0.0, 1.0))
    assert_vec3_approx(light.position, (1.0, 0.0, 0.0))


def test_update_entry_points_agree():
    a = PointLight(point_spec(), AttitudeSpec.canonical())
    b = PointLight(point_spec(), AttitudeSpec.canonical())
    delta = DeltaAttitude(Vec3(0.2, -0.4, -1.0), roll=4.0, yaw=17.0, pitch=-9.0)
    a.update(delta)
    b.update_attitude_eye(delta)
    assert a.position == b.position
    assert a.forward_axis == b.forward_axis
    assert a.view_matrix() == b.view_matrix()


def test_position_accessor_cannot_move_light():
    light = PointLight(point_spec(), AttitudeSpec.canonical())
    with pytest.raises(dataclasses.FrozenInstanceError):
        light.position.x = 10.0
    assert light.position.x == 0.0


def test_model_matrix_is_pure_translation():
    light = PointLight(point_spec(), AttitudeSpec.canonical(Vec3(1.0, 2.0, 3.0)))
    light.update(DeltaAttitude(yaw=45.0, pitch=20.0))
    m = light.model_matrix()
    assert m == Mat4.translate_vec(light.position)


def test_eye_axes_are_constants():
    light = PointLight(point_spec(), AttitudeSpec.canonical())
    light.update(DeltaAttitude(yaw=30.0, roll=60.0))
    assert light.forward_axis_eye == Vec3(0.0, 0.0, -1.0)
    assert light.right_axis_eye == Vec3(1.0, 0.0, 0.0)
    assert light.up_axis_eye == Vec3(0.0, 1.0, 0.0)


def test_world_position_override():
    light = SpotLight(spot_spec(), AttitudeSpec.canonical())
    light.update(DeltaAttitude(Vec3(5.0, 5.0, 5.0), yaw=10.0))
    light.update_position_world(Vec3(-1.0, 0.5, 2.0))
    assert light.position == Vec3(-1.0, 0.5, 2.0)
    attitude = light.attitude
    assert light.view_matrix() == attitude.rotation_matrix @ attitude.translation_matrix


def test_view_matrix_consistent_after_every_mutation():
    light = PointLight(point_spec(), AttitudeSpec.canonical())
    attitude = light.attitude
    steps = [
        lambda: light.update(DeltaAttitude(Vec3(0.0, 0.0, -1.0), yaw=12.0)),
        lambda: light.update_position_world(Vec3(3.0, 3.0, 3.0)),
        lambda: light.update_attitude_eye(DeltaAttitude(pitch=-33.0, roll=7.0)),
        lambda: light.update(DeltaAttitude.zero()),
    ]
    for step in steps:
        step()
        assert light.view_matrix() == attitude.rotation_matrix @ attitude.translation_matrix


def test_legacy_variant_without_view_matrix():
    light = PointLight(
        point_spec(), AttitudeSpec.canonical(),
        AttitudeConfig(cache_view_matrix=False),
    )
    assert not light.has_view_matrix
    light.update(DeltaAttitude(Vec3(0.0, 0.0, -1.0), yaw=90.0))
    assert_vec3_approx(light.position, (1.0, 0.0, 0.0))

    with pytest.raises(NotImplementedError):
        light.view_matrix()
    with pytest.raises(NotImplementedError):
        light.update_position_world(Vec3(1.0, 1.0, 1.0))
    with pytest.raises(NotImplementedError):
        light.forward_axis_eye


def test_lights_are_independent():
    a = PointLight(point_spec(), AttitudeSpec.canonical())
    b = PointLight(point_spec(), AttitudeSpec.canonical())
    a.update(DeltaAttitude(Vec3(1.0, 0.0, 0.0), yaw=45.0))
    assert b.position == Vec3(0.0, 0.0, 0.0)
    assert b.forward_axis == Vec3(0.0, 0.0, -1.0)
