import math

import pytest

from quadgames.camera_math import (
    PITCH_LIMIT,
    CameraControls,
    FirstPersonCamera,
    Vec2,
    Vec3,
    angle_lerp,
    look_direction,
    polar_to_cartesian,
    short_angle_dist,
    wrap_rotation,
)


def test_vec2_normalize_gives_unit_length():
    v = Vec2(3.0, -7.0).normalize()
    assert v.length() == pytest.approx(1.0)


def test_vec2_normalize_zero_raises():
    with pytest.raises(ValueError):
        Vec2().normalize()


def test_vec2_distance_is_symmetric():
    a, b = Vec2(1.0, 2.0), Vec2(-4.0, 6.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((a - b).length())


def test_vec2_angle_between_is_antisymmetric():
    a, b = Vec2(1.0, 0.0), Vec2(0.0, 1.0)
    assert a.angle_between(b) == pytest.approx(math.pi / 2)
    assert b.angle_between(a) == pytest.approx(-a.angle_between(b))


def test_vec3_cross_is_orthogonal():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_vec3_cross_of_axes():
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


@pytest.mark.parametrize("a0,a1", [(0.0, 350.0), (10.0, 200.0), (-90.0, 45.0), (359.0, 1.0)])
def test_short_angle_dist_is_shortest(a0, a1):
    d = short_angle_dist(a0, a1)
    assert abs(d) <= 180.0
    assert math.fmod(a0 + d - a1, 360.0) == pytest.approx(0.0, abs=1e-9) or abs(
        abs(math.fmod(a0 + d - a1, 360.0)) - 360.0
    ) < 1e-9


def test_angle_lerp_endpoints():
    assert angle_lerp(30.0, 100.0, 0.0) == pytest.approx(30.0)
    assert angle_lerp(30.0, 100.0, 1.0) == pytest.approx(100.0)


@pytest.mark.parametrize("angle", [-355.0, -10.0, 0.0, 180.0, 360.0, 719.0])
def test_wrap_rotation_in_range(angle):
    wrapped = wrap_rotation(angle)
    assert 0.0 <= wrapped < 360.0
    assert math.fmod(wrapped - angle, 360.0) == pytest.approx(0.0)


def test_polar_round_trip():
    p = polar_to_cartesian(2.5, 0.7)
    assert p.length() == pytest.approx(2.5)
    assert math.atan2(p.y, p.x) == pytest.approx(0.7)


def test_look_direction_is_unit():
    assert look_direction(1.18, 0.4).length() == pytest.approx(1.0)


def test_first_person_pitch_is_clamped():
    cam = FirstPersonCamera()
    cam.look(0.0, -1e6, 1.0)
    assert cam.pitch == PITCH_LIMIT
    cam.look(0.0, 1e6, 1.0)
    assert cam.pitch == -PITCH_LIMIT


def test_first_person_axes_are_orthonormal():
    cam = FirstPersonCamera(yaw=0.3, pitch=0.2)
    assert cam.front.dot(cam.right) == pytest.approx(0.0, abs=1e-12)
    assert cam.up.dot(cam.front) == pytest.approx(0.0, abs=1e-12)
    assert cam.up.length() == pytest.approx(1.0)


def test_first_person_move_back_and_forth_returns():
    cam = FirstPersonCamera()
    start = cam.position
    cam.move(1, 1)
    assert cam.position.distance if False else (cam.position - start).length() > 0
    cam.move(-1, -1)
    assert (cam.position - start).length() == pytest.approx(0.0, abs=1e-12)


def test_camera_controls_zoom_with_modifier():
    controls = CameraControls()
    controls.apply_wheel(1.0, True)
    assert controls.zoom == pytest.approx(1.1)
    assert controls.rotation == 0.0


def test_camera_controls_rotation_stays_in_range():
    controls = CameraControls()
    controls.apply_wheel(-1.0, False)
    assert 0.0 <= controls.rotation < 360.0
    controls.apply_wheel(0.0, False)
    assert controls.zoom == 1.0


def test_camera_controls_smoothing_converges():
    controls = CameraControls()
    controls.apply_wheel(3.0, False)
    for _ in range(300):
        controls.update()
    assert controls.smooth_rotation == pytest.approx(controls.rotation, abs=1e-3)