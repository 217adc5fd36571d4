"""Flat and line primitives: circles, rectangles, a floor grid, points, lines and axes."""

from __future__ import annotations

import dataclasses
import math
from typing import Sequence

from merlin.geometry import DrawMode, Mesh, Vec3, Vertex

_UP: Vec3 = (0.0, 0.0, 1.0)
_WHITE: Vec3 = (1.0, 1.0, 1.0)
_TANGENT: Vec3 = (1.0, 0.0, 0.0)
_BITANGENT: Vec3 = (0.0, 1.0, 0.0)
_SQUARE = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))


def _require_resolution(res: int) -> None:
    if res < 1:
        raise ValueError(f"resolution must be at least 1, got {res}")


def _rim_vertex(r: float, angle: float) -> Vertex:
    c, s = math.cos(angle), math.sin(angle)
    return Vertex(
        position=(r * c, r * s, 0.0),
        normal=_UP,
        color=_WHITE,
        tex_coord=((c + 1.0) * 0.5, (s + 1.0) * 0.5),
        tangent=_TANGENT,
        bitangent=_BITANGENT,
    )


def create_circle(r: float, res: int) -> Mesh:
    """Filled disc in the XY plane: a centre vertex fanned to ``res`` rim vertices."""
    _require_resolution(res)
    center = Vertex(
        position=(0.0, 0.0, 0.0),
        normal=_UP,
        color=_WHITE,
        tex_coord=(0.5, 0.5),
        tangent=_TANGENT,
        bitangent=_BITANGENT,
    )
    vertices = [center]
    vertices.extend(_rim_vertex(r, 2.0 * math.pi * i / res) for i in range(res))
    indices: list[int] = []
    for i in range(1, res):
        indices.extend((0, i, i + 1))
    indices.extend((0, res, 1))
    return Mesh("Circle", vertices, indices, DrawMode.TRIANGLES)


def create_outlined_circle(r: float, res: int) -> Mesh:
    """Circle outline in the XY plane as a closed line strip."""
    _require_resolution(res)
    vertices = [_rim_vertex(r, 2.0 * math.pi * i / res) for i in range(res)]
    vertices.append(_rim_vertex(r, 0.0))
    return Mesh("Circle", vertices, [], DrawMode.LINE_STRIP)


def _flat_vertex(x: float, y: float, u: float, v: float, normal: Vec3 = _UP) -> Vertex:
    return Vertex(
        position=(x, y, 0.0),
        normal=normal,
        color=_WHITE,
        tex_coord=(u, v),
        tangent=_TANGENT,
        bitangent=_BITANGENT,
    )


def create_rectangle(x: float, y: float) -> Mesh:
    """Centred ``x`` by ``y`` rectangle in the XY plane made of two triangles."""
    hx, hy = x / 2.0, y / 2.0
    vertices = [
        _flat_vertex(-hx, -hy, 0.0, 0.0),
        _flat_vertex(hx, -hy, 1.0, 0.0),
        _flat_vertex(hx, hy, 1.0, 1.0),
        _flat_vertex(-hx, hy, 0.0, 1.0),
    ]
    return Mesh("Rectangle", vertices, [0, 1, 2, 0, 2, 3], DrawMode.TRIANGLES)


def create_quad_rectangle(x: float, y: float, centered: bool) -> Mesh:
    """Rectangle drawn as one quad; centred on the origin or starting at it."""
    if centered:
        x_lo, x_up, y_lo, y_up = -x / 2.0, x / 2.0, -y / 2.0, y / 2.0
    else:
        x_lo, x_up, y_lo, y_up = 0.0, x, 0.0, y
    side: Vec3 = (-1.0, 0.0, 0.0)
    vertices = [
        _flat_vertex(x_lo, y_lo, 0.0, 0.0, side),
        _flat_vertex(x_up, y_lo, 1.0, 0.0, side),
        _flat_vertex(x_up, y_up, 1.0, 1.0, side),
        _flat_vertex(x_lo, y_up, 1.0, 1.0, side),
    ]
    mesh = Mesh("Cube", vertices, [], DrawMode.QUADS)
    mesh.cast_shadow = False
    return mesh


def create_floor(num_tiles: int, tile_size: float) -> Mesh:
    """Checkerboard floor of ``num_tiles`` squared tiles, fading out towards its edge."""
    n = num_tiles
    radius = n / 2.0 * tile_size
    vertices: list[Vertex] = []

    for xi in range(n):
        for yi in range(n):
            tile = xi * n + yi
            x0 = (-n / 2.0 + xi) * tile_size
            y0 = (-n / 2.0 + yi) * tile_size
            lit = (xi + yi) % 2 == 1
            corners: list[Vertex] = []
            for k, (sx, sy) in enumerate(_SQUARE):
                px = x0 + sx * tile_size
                py = y0 + sy * tile_size
                col = 0.0
                if lit:
                    fade = max(0.0, 1.2 - math.hypot(px, py) / radius)
                    col = 0.9 * fade * 2.0
                i = 4 * tile + k
                tx = float((i // 4) // 3)
                ty = float((i // 4) % 3)
                corners.append(
                    Vertex(
                        position=(px, py, 0.0),
                        normal=_UP,
                        color=(col, col, col),
                        tex_coord=(tx / n * tile_size, ty / n * tile_size),
                        tangent=_TANGENT,
                        bitangent=_BITANGENT,
                    )
                )
            a, b, c, d = corners
            vertices.extend((a, b, c, dataclasses.replace(a), dataclasses.replace(c), d))

    mesh = Mesh("Floor", vertices, [], DrawMode.TRIANGLES)
    mesh.use_vertex_colors = True
    return mesh


def create_point() -> Mesh:
    """A single white point at the origin."""
    vertex = Vertex(position=(0.0, 0.0, 0.0), normal=(0.0, 0.0, 0.0), color=_WHITE)
    return Mesh("Point", [vertex], [], DrawMode.POINTS)


def create_line(length: float, direction: Sequence[float]) -> Mesh:
    """Segment from the origin along ``direction`` with the given length."""
    dx, dy, dz = (float(c) for c in direction)
    norm = math.sqrt(dx * dx + dy * dy + dz * dz)
    if norm == 0.0:
        raise ValueError("line direction must not be the zero vector")
    end = (dx / norm * length, dy / norm * length, dz / norm * length)
    vertices = [Vertex(position=(0.0, 0.0, 0.0)), Vertex(position=end)]
    return Mesh("Line", vertices, [], DrawMode.LINES)


def create_coord_system() -> Mesh:
    """Three short axis segments coloured red (X), green (Y) and blue (Z)."""
    zero: Vec3 = (0.0, 0.0, 0.0)
    vertices: list[Vertex] = []
    for axis in ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)):
        tip = (axis[0] * 0.2, axis[1] * 0.2, axis[2] * 0.2)
        vertices.append(Vertex(position=tip, normal=zero, color=axis))
        vertices.append(Vertex(position=zero, normal=zero, color=axis))
    return Mesh("CoordinateSystem", vertices, [], DrawMode.LINES)


def create_from_quad(
    vertices: Sequence[Vertex],
    indices: Sequence[int],
    mode: DrawMode = DrawMode.TRIANGLES,
) -> Mesh:
    """Split 1-based quad indices (a, b, c, d) into two triangles each."""
    if len(indices) % 4:
        raise ValueError(f"quad index count must be a multiple of 4, got {len(indices)}")
    count = len(vertices)
    triangles: list[int] = []
    for quad in zip(*[iter(indices)] * 4):
        for index in quad:
            if not 1 <= index <= count:
                raise ValueError(f"quad index {index} out of range 1..{count}")
        a, b, c, d = (index - 1 for index in quad)
        triangles.extend((a, b, c, a, c, d))
    return Mesh("QuadMesh", list(vertices), triangles, mode)