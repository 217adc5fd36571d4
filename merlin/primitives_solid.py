"""Solid primitives: boxes, cones, cylinders and spheres."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from merlin.geometry import DrawMode, Mesh, Vec2, Vec3, Vertex

_WHITE: Vec3 = (1.0, 1.0, 1.0)
_SPHERE_PI = 3.14159265359

# Face key -> (normal, tangent, bitangent)
_FACES: dict[str, tuple[Vec3, Vec3, Vec3]] = {
    "-x": ((-1.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 1.0, 0.0)),
    "+x": ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 1.0, 0.0)),
    "-y": ((0.0, -1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
    "+y": ((0.0, 1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, -1.0)),
    "-z": ((0.0, 0.0, -1.0), (-1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
    "+z": ((0.0, 0.0, 1.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
}

# Quad faces: face key and its four corners, each corner a string of
# per-axis selectors ('0' = lower bound, '1' = upper bound).
_QUAD_FACES: tuple[tuple[str, tuple[str, str, str, str]], ...] = (
    ("-x", ("000", "010", "011", "001")),
    ("+x", ("100", "110", "111", "101")),
    ("-y", ("000", "100", "101", "001")),
    ("+y", ("010", "110", "111", "011")),
    ("-z", ("000", "100", "110", "010")),
    ("+z", ("001", "101", "111", "011")),
)
_QUAD_UVS: tuple[Vec2, ...] = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (1.0, 1.0))

# Triangle list of the cube: corner selectors, face key, texture coordinate.
_CUBE_TRIANGLES: tuple[tuple[str, str, Vec2], ...] = (
    ("000", "-x", (0.0, 0.0)), ("001", "-x", (1.0, 0.0)), ("011", "-x", (1.0, 1.0)),
    ("110", "-z", (0.0, 1.0)), ("000", "-z", (1.0, 0.0)), ("010", "-z", (1.0, 1.0)),
    ("101", "-y", (0.0, 0.0)), ("000", "-y", (1.0, 1.0)), ("100", "-y", (0.0, 1.0)),
    ("110", "-z", (0.0, 1.0)), ("100", "-z", (0.0, 0.0)), ("000", "-z", (1.0, 0.0)),
    ("000", "-x", (0.0, 0.0)), ("011", "-x", (1.0, 1.0)), ("010", "-x", (0.0, 1.0)),
    ("101", "-y", (0.0, 0.0)), ("001", "-y", (1.0, 0.0)), ("000", "-y", (1.0, 1.0)),
    ("011", "+z", (0.0, 1.0)), ("001", "+z", (0.0, 0.0)), ("101", "+z", (1.0, 0.0)),
    ("111", "+x", (0.0, 1.0)), ("100", "+x", (1.0, 0.0)), ("110", "+x", (1.0, 1.0)),
    ("100", "+x", (1.0, 0.0)), ("111", "+x", (0.0, 1.0)), ("101", "+x", (0.0, 0.0)),
    ("111", "+y", (1.0, 0.0)), ("110", "+y", (1.0, 1.0)), ("010", "+y", (0.0, 1.0)),
    ("111", "+y", (1.0, 0.0)), ("010", "+y", (0.0, 1.0)), ("011", "+y", (0.0, 0.0)),
    ("111", "+z", (1.0, 1.0)), ("011", "+z", (0.0, 1.0)), ("101", "+z", (1.0, 0.0)),
)


def _require(value: int, what: str) -> None:
    if value < 1:
        raise ValueError(f"{what} must be at least 1, got {value}")


def _normalize(v: Sequence[float]) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        raise ValueError("cannot normalize the zero vector")
    return (v[0] / length, v[1] / length, v[2] / length)


def _corner(selectors: str, lows: Vec3, ups: Vec3) -> Vec3:
    return tuple(up if s == "1" else lo for s, lo, up in zip(selectors, lows, ups))  # type: ignore[return-value]


def _face_vertex(position: Vec3, face: str, uv: Vec2) -> Vertex:
    normal, tangent, bitangent = _FACES[face]
    return Vertex(
        position=position,
        normal=normal,
        color=_WHITE,
        tex_coord=uv,
        tangent=tangent,
        bitangent=bitangent,
    )


def create_quad_cube(x: float, y: float, z: float, centered: bool) -> Mesh:
    """Box of six quads; centred on the origin or spanning from it to (x, y, z)."""
    if centered:
        lows: Vec3 = (-x / 2.0, -y / 2.0, -z / 2.0)
        ups: Vec3 = (x / 2.0, y / 2.0, z / 2.0)
    else:
        lows, ups = (0.0, 0.0, 0.0), (float(x), float(y), float(z))
    vertices = [
        _face_vertex(_corner(corner, lows, ups), face, uv)
        for face, corners in _QUAD_FACES
        for corner, uv in zip(corners, _QUAD_UVS)
    ]
    mesh = Mesh("Cube", vertices, [], DrawMode.QUADS)
    mesh.cast_shadow = False
    return mesh


def create_cube(x: float, y: Optional[float] = None, z: Optional[float] = None) -> Mesh:
    """Centred box of twelve unindexed triangles; one argument gives a cube."""
    y = x if y is None else y
    z = x if z is None else z
    lows: Vec3 = (-x / 2.0, -y / 2.0, -z / 2.0)
    ups: Vec3 = (x / 2.0, y / 2.0, z / 2.0)
    vertices = [
        _face_vertex(_corner(corner, lows, ups), face, uv)
        for corner, face, uv in _CUBE_TRIANGLES
    ]
    return Mesh("Cube", vertices, [], DrawMode.TRIANGLES)


def create_cone(r: float, h: float, res: int) -> Mesh:
    """Cone with its apex at (0, h, 0) over a base of radius ``r`` in the XZ plane."""
    _require(res, "resolution")
    step = 2.0 * math.pi / res
    slope = r / math.sqrt(r * r + h * h)

    vertices = [
        Vertex(position=(0.0, h, 0.0), normal=_normalize((1.0, 1.0, 1.0)),
               color=_WHITE, tex_coord=(0.5, 1.0)),
        Vertex(position=(0.0, 0.0, 0.0), normal=_normalize((1.0, -1.0, 1.0)),
               color=_WHITE, tex_coord=(0.5, 0.0)),
    ]
    for i in range(res):
        angle = i * step
        s, c = math.sin(angle), math.cos(angle)
        vertices.append(
            Vertex(
                position=(r * s, 0.0, r * c),
                normal=_normalize((s, slope, c)),
                color=_WHITE,
                tex_coord=(angle / (2.0 * math.pi), 0.0),
            )
        )

    indices: list[int] = []
    for i in range(res):
        i0 = 2 + i
        i1 = 2 + (i + 1) % res
        indices.extend((0, i0, i1, 1, i1, i0))
    return Mesh("Cone", vertices, indices, DrawMode.TRIANGLES)


def create_cylinder(r: float, h: float, res: int) -> Mesh:
    """Closed cylinder along Z from 0 to ``h`` with radius ``r``."""
    _require(res, "resolution")
    step = 2.0 * math.pi / res
    top_center = (res + 1) * 2
    bottom_center = top_center + 1

    indices: list[int] = []
    for i in range(res):
        i0 = i * 2
        i1 = i0 + 1
        i2 = (i + 1) % res * 2
        i3 = i2 + 1
        indices.extend((i0, i1, i2, i2, i1, i3))
        indices.extend((i2, i0, top_center))
        indices.extend((i1, i3, bottom_center))

    vertices: list[Vertex] = []
    for i in range(res + 1):
        angle = i * step
        s, c = math.sin(angle), math.cos(angle)
        u = angle / (2.0 * math.pi)
        normal = _normalize((s, c, 0.0))
        vertices.append(Vertex(position=(r * s, r * c, h), normal=normal,
                               color=_WHITE, tex_coord=(u, 1.0)))
        vertices.append(Vertex(position=(r * s, r * c, 0.0), normal=normal,
                               color=_WHITE, tex_coord=(u, 0.0)))
    vertices.append(Vertex(position=(0.0, 0.0, h), normal=(0.0, 0.0, 1.0), color=_WHITE,
                           tex_coord=(0.5, 1.0), tangent=(1.0, 0.0, 0.0),
                           bitangent=(0.0, 1.0, 0.0)))
    vertices.append(Vertex(position=(0.0, 0.0, 0.0), normal=(0.0, 0.0, -1.0), color=_WHITE,
                           tex_coord=(0.5, 0.0), tangent=(-1.0, 0.0, 0.0),
                           bitangent=(0.0, 1.0, 0.0)))
    return Mesh("Cylinder", vertices, indices, DrawMode.TRIANGLES)


def create_sphere(r: float, hres: int, vres: int) -> Mesh:
    """UV sphere of radius ``r`` with ``hres`` sectors and ``vres`` stacks, poles on Y."""
    _require(hres, "sector count")
    _require(vres, "stack count")
    if r == 0:
        raise ValueError("sphere radius must not be zero")

    sector_step = 2.0 * _SPHERE_PI / hres
    stack_step = _SPHERE_PI / vres
    vertices: list[Vertex] = []
    for i in range(vres + 1):
        stack_angle = _SPHERE_PI / 2.0 - i * stack_step
        xy = r * math.cos(stack_angle)
        z = r * math.sin(stack_angle)
        for j in range(hres + 1):
            sector_angle = j * sector_step
            x = xy * math.cos(sector_angle)
            y = xy * math.sin(sector_angle)
            vertices.append(
                Vertex(
                    position=(x, z, y),
                    normal=(x / r, z / r, y / r),
                    color=_WHITE,
                    tex_coord=(j / hres, i / vres),
                )
            )

    indices: list[int] = []
    for i in range(vres):
        k1 = i * (hres + 1)
        k2 = k1 + hres + 1
        for _ in range(hres):
            if i != 0:
                indices.extend((k1, k2, k1 + 1))
            if i != vres - 1:
                indices.extend((k1 + 1, k2, k2 + 1))
            k1 += 1
            k2 += 1
    return Mesh("Sphere", vertices, indices, DrawMode.TRIANGLES)