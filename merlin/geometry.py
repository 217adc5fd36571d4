"""Vertices, bounding boxes and triangle meshes held in plain Python data."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

_ZERO2: Vec2 = (0.0, 0.0)
_ZERO3: Vec3 = (0.0, 0.0, 0.0)


class DrawMode(enum.IntEnum):
    """Primitive assembly modes, valued as the matching OpenGL enums."""

    POINTS = 0x0000
    LINES = 0x0001
    LINE_LOOP = 0x0002
    LINE_STRIP = 0x0003
    TRIANGLES = 0x0004
    TRIANGLE_STRIP = 0x0005
    TRIANGLE_FAN = 0x0006
    QUADS = 0x0007


@dataclass
class Vertex:
    """One mesh vertex with its shading attributes."""

    position: Vec3 = _ZERO3
    normal: Vec3 = _ZERO3
    color: Vec3 = _ZERO3
    tex_coord: Vec2 = _ZERO2
    tangent: Vec3 = _ZERO3
    bitangent: Vec3 = _ZERO3


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box around a set of points, with the points' centroid."""

    min: Vec3 = _ZERO3
    max: Vec3 = _ZERO3
    centroid: Vec3 = _ZERO3

    @property
    def size(self) -> Vec3:
        lo, hi = self.min, self.max
        return (hi[0] - lo[0], hi[1] - lo[1], hi[2] - lo[2])


@dataclass
class Mesh:
    """A named list of vertices, optionally indexed, drawn with one primitive mode."""

    name: str
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    draw_mode: DrawMode = DrawMode.TRIANGLES
    cast_shadow: bool = True
    use_vertex_colors: bool = False
    use_flat_shading: bool = False
    material: Optional[object] = None
    material_name: str = "default"
    shader_name: str = "default"
    bounding_box: BoundingBox = field(default_factory=BoundingBox)

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.indices = [int(i) for i in self.indices]
        self.draw_mode = DrawMode(self.draw_mode)

    def has_indices(self) -> bool:
        return bool(self.indices)

    def has_material(self) -> bool:
        return self.material is not None

    def compute_bounding_box(self) -> BoundingBox:
        """Recompute, store and return the box around all vertex positions."""
        if not self.vertices:
            raise ValueError(f"mesh {self.name!r} has no vertices")
        positions = [v.position for v in self.vertices]
        xs, ys, zs = zip(*positions)
        count = len(positions)
        self.bounding_box = BoundingBox(
            min=(min(xs), min(ys), min(zs)),
            max=(max(xs), max(ys), max(zs)),
            centroid=(sum(xs) / count, sum(ys) / count, sum(zs) / count),
        )
        return self.bounding_box