import math
import random

import pytest

from quadgames.particle_types import (
    AtlasConfig,
    BatchedCurve,
    BlendMode,
    CircleMesh,
    ColorCurve,
    Curve,
    CustomMesh,
    Interpolation,
    ParticleMaterial,
    PointEmission,
    RectangleMesh,
    RectEmission,
    SphereEmission,
)


def test_curve_defaults():
    curve = Curve()
    assert curve.resolution == 20
    assert curve.interpolation is Interpolation.LINEAR
    assert curve.points == []


def test_linear_curve_batch_follows_line():
    batched = Curve(points=[(0.0, 0.0), (1.0, 1.0)], resolution=4).batch()
    assert batched.points == (0.0, 0.25, 0.5, 0.75, 1.0)


def test_curve_batch_starts_and_ends_on_key_points():
    batched = Curve(points=[(0.0, 0.5), (0.5, 1.0), (1.0, 0.0)], resolution=4).batch()
    assert batched.points[0] == 0.5
    assert batched.points[-1] == 0.0
    assert max(batched.points) == 1.0


def test_bezier_batch_rejected():
    curve = Curve(points=[(0.0, 0.0), (1.0, 1.0)], interpolation=Interpolation.BEZIER)
    with pytest.raises(ValueError):
        curve.batch()


def test_non_positive_resolution_rejected():
    with pytest.raises(ValueError):
        Curve(points=[(0.0, 0.0), (1.0, 1.0)], resolution=0).batch()


def test_batched_curve_get_endpoints_and_clamping():
    batched = BatchedCurve((2.0, 4.0, 6.0))
    assert batched.get(0.0) == 2.0
    assert batched.get(1.0) == 6.0
    assert batched.get(5.0) == 6.0
    assert batched.get(-3.0) == 2.0


def test_batched_curve_get_is_monotonic_for_rising_samples():
    batched = Curve(points=[(0.0, 0.0), (1.0, 1.0)], resolution=10).batch()
    values = [batched.get(i / 50) for i in range(51)]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_empty_batched_curve_rejected():
    with pytest.raises(ValueError):
        BatchedCurve(()).get(0.5)


def test_point_emission_is_origin():
    assert PointEmission().random_point(random.Random(1)) == (0.0, 0.0)


def test_rect_emission_within_bounds():
    rng = random.Random(7)
    shape = RectEmission(width=10.0, height=4.0)
    for _ in range(200):
        x, y = shape.random_point(rng)
        assert -5.0 <= x <= 5.0
        assert -2.0 <= y <= 2.0


def test_sphere_emission_within_radius():
    rng = random.Random(3)
    shape = SphereEmission(radius=3.0)
    for _ in range(200):
        x, y = shape.random_point(rng)
        assert math.hypot(x, y) <= 3.0 + 1e-9


def test_color_curve_default_white():
    curve = ColorCurve()
    assert curve.sample(0.3) == (1.0, 1.0, 1.0, 1.0)


def test_color_curve_key_times():
    start = (1.0, 0.0, 0.0, 1.0)
    mid = (0.0, 1.0, 0.0, 1.0)
    end = (0.0, 0.0, 1.0, 0.0)
    curve = ColorCurve(start=start, mid=mid, end=end)
    assert curve.sample(0.0) == start
    assert curve.sample(0.5) == mid
    assert curve.sample(1.0) == end


def test_rectangle_mesh_geometry():
    vertices, indices = RectangleMesh(aspect_ratio=2.0).geometry()
    assert indices == [0, 1, 2, 0, 2, 3]
    assert len(vertices) == 4 * 9
    xs = vertices[0::9]
    assert xs == [-2.0, 2.0, 2.0, -2.0]


def test_circle_mesh_geometry_consistent():
    vertices, indices = CircleMesh(subdivisions=6).geometry()
    vertex_count = len(vertices) // 9
    assert vertex_count == 6 + 2
    assert len(indices) == 6 * 3
    assert all(0 <= i < vertex_count for i in indices)
    for v in range(1, vertex_count):
        x, y = vertices[v * 9], vertices[v * 9 + 1]
        assert math.isclose(math.hypot(x, y), 1.0)


def test_custom_mesh_round_trip():
    verts = (0.0, 1.0, 2.0)
    idx = (0, 1, 2)
    vertices, indices = CustomMesh(vertices=verts, indices=idx).geometry()
    assert vertices == list(verts)
    assert indices == list(idx)


def test_atlas_open_range_ends_at_cell_count():
    atlas = AtlasConfig.from_range(4, 4, 8, None)
    assert atlas.start_index == 8
    assert atlas.end_index == 16


def test_atlas_bounded_range():
    atlas = AtlasConfig.from_range(4, 4, 0, 8)
    assert (atlas.start_index, atlas.end_index) == (0, 8)


def test_atlas_frame_uv():
    atlas = AtlasConfig.from_range(4, 4)
    assert atlas.frame_uv(0) == (0.0, 0.0, 0.25, 0.25)
    assert atlas.frame_uv(5) == (0.25, 0.25, 0.25, 0.25)


def test_blend_modes_distinct():
    assert BlendMode.ALPHA is not BlendMode.ADDITIVE
    assert BlendMode("additive") is BlendMode.ADDITIVE


def test_particle_material_keeps_sources():
    material = ParticleMaterial(vertex="vs", fragment="fs")
    assert (material.vertex, material.fragment) == ("vs", "fs")