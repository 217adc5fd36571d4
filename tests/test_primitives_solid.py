import math

import pytest

from merlin.geometry import DrawMode
from merlin.primitives_solid import (
    create_cone,
    create_cube,
    create_cylinder,
    create_quad_cube,
    create_sphere,
)


def _dot(a, b):
    return sum(p * q for p, q in zip(a, b))


def _norm(v):
    return math.sqrt(_dot(v, v))


def test_quad_cube_centered_layout():
    mesh = create_quad_cube(2.0, 4.0, 6.0, True)
    assert mesh.draw_mode is DrawMode.QUADS
    assert len(mesh.vertices) == 24
    assert not mesh.has_indices()
    assert mesh.cast_shadow is False
    box = mesh.compute_bounding_box()
    assert box.min == pytest.approx((-1.0, -2.0, -3.0))
    assert box.max == pytest.approx((1.0, 2.0, 3.0))


def test_quad_cube_not_centered_starts_at_origin():
    mesh = create_quad_cube(2.0, 4.0, 6.0, False)
    box = mesh.compute_bounding_box()
    assert box.min == pytest.approx((0.0, 0.0, 0.0))
    assert box.max == pytest.approx((2.0, 4.0, 6.0))


def test_quad_cube_faces_lie_on_their_planes():
    half = (1.0, 2.0, 3.0)
    mesh = create_quad_cube(2.0, 4.0, 6.0, True)
    for vertex in mesh.vertices:
        axis = next(k for k, c in enumerate(vertex.normal) if c != 0)
        assert _dot(vertex.position, vertex.normal) == pytest.approx(half[axis])
        assert _dot(vertex.normal, vertex.tangent) == pytest.approx(0.0)


def test_cube_has_twelve_triangles_on_face_planes():
    mesh = create_cube(2.0, 4.0, 6.0)
    assert mesh.name == "Cube"
    assert mesh.draw_mode is DrawMode.TRIANGLES
    assert len(mesh.vertices) == 36
    half = (1.0, 2.0, 3.0)
    for vertex in mesh.vertices:
        assert _norm(vertex.normal) == pytest.approx(1.0)
        axis = next(k for k, c in enumerate(vertex.normal) if c != 0)
        assert _dot(vertex.position, vertex.normal) == pytest.approx(half[axis])


def test_cube_single_size_is_a_cube():
    mesh = create_cube(3.0)
    box = mesh.compute_bounding_box()
    assert box.max == pytest.approx((1.5, 1.5, 1.5))
    assert box.min == pytest.approx((-1.5, -1.5, -1.5))
    assert box.centroid == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_cone_structure():
    res = 8
    mesh = create_cone(1.5, 3.0, res)
    assert mesh.name == "Cone"
    assert len(mesh.vertices) == res + 2
    assert len(mesh.indices) == 6 * res
    assert all(0 <= i < len(mesh.vertices) for i in mesh.indices)
    assert mesh.vertices[0].position == pytest.approx((0.0, 3.0, 0.0))
    assert mesh.vertices[1].position == pytest.approx((0.0, 0.0, 0.0))
    for vertex in mesh.vertices[2:]:
        x, y, z = vertex.position
        assert y == 0.0
        assert math.hypot(x, z) == pytest.approx(1.5)
        assert _norm(vertex.normal) == pytest.approx(1.0)


def test_cylinder_structure():
    res = 6
    mesh = create_cylinder(2.0, 5.0, res)
    assert mesh.name == "Cylinder"
    assert len(mesh.vertices) == 2 * (res + 1) + 2
    assert len(mesh.indices) == 12 * res
    assert all(0 <= i < len(mesh.vertices) for i in mesh.indices)
    for vertex in mesh.vertices[: 2 * (res + 1)]:
        x, y, z = vertex.position
        assert math.hypot(x, y) == pytest.approx(2.0)
        assert z in (0.0, 5.0)
    assert mesh.vertices[-2].position == (0.0, 0.0, 5.0)
    assert mesh.vertices[-1].normal == (0.0, 0.0, -1.0)


def test_sphere_vertices_on_surface():
    mesh = create_sphere(2.0, 8, 6)
    assert mesh.name == "Sphere"
    assert len(mesh.vertices) == 9 * 7
    for vertex in mesh.vertices:
        assert _norm(vertex.position) == pytest.approx(2.0)
        assert vertex.normal == pytest.approx(tuple(c / 2.0 for c in vertex.position))
    assert mesh.vertices[0].position == pytest.approx((0.0, 2.0, 0.0), abs=1e-9)


def test_sphere_indices_form_valid_triangles():
    mesh = create_sphere(1.0, 5, 4)
    assert len(mesh.indices) % 3 == 0
    assert all(0 <= i < len(mesh.vertices) for i in mesh.indices)
    triangles = list(zip(*[iter(mesh.indices)] * 3))
    for a, b, c in triangles:
        assert len({a, b, c}) == 3


@pytest.mark.parametrize(
    "call",
    [
        lambda: create_cone(1.0, 1.0, 0),
        lambda: create_cylinder(1.0, 1.0, 0),
        lambda: create_sphere(1.0, 0, 4),
        lambda: create_sphere(1.0, 4, 0),
        lambda: create_sphere(0.0, 4, 4),
    ],
)
def test_invalid_arguments_raise(call):
    with pytest.raises(ValueError):
        call()