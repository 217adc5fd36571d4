"""Reading Wavefront OBJ geometry into vertices and indices."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence, TypeVar

from merlin.geometry import Vec2, Vec3, Vertex

T = TypeVar("T")

_FACE = re.compile(
    r"f\s+(\d+)/(\d+)/(\d+)\s+(\d+)/(\d+)/(\d+)\s+(\d+)/(\d+)/(\d+)"
)
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf|nan)", re.I)


class MeshParseError(ValueError):
    """Raised when a mesh file cannot be read or holds malformed data."""


@dataclass
class ModelData:
    """Attribute lists of an OBJ file, referenced by 1-based indices."""

    vertices: list[Vec3] = field(default_factory=list)
    tex_coords: list[Vec2] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)


def _lookup(items: Sequence[T], text: str, what: str) -> T:
    try:
        index = int(text)
    except ValueError:
        raise MeshParseError(f"invalid {what} index: {text!r}") from None
    if not 1 <= index <= len(items):
        raise MeshParseError(f"{what} index {index} out of range 1..{len(items)}")
    return items[index - 1]


def parse_vertex(vertex_string: str, obj_data: ModelData) -> Vertex:
    """Build a vertex from a face element such as '3', '3/1' or '3/1/2'."""
    parts = vertex_string.split("/", 2)
    vertex = Vertex(position=_lookup(obj_data.vertices, parts[0], "position"))
    if len(parts) > 1:
        vertex.tex_coord = _lookup(obj_data.tex_coords, parts[1], "texture coordinate")
    if len(parts) > 2:
        vertex.normal = _lookup(obj_data.normals, parts[2], "normal")
    return vertex


def _scan_floats(text: str, count: int) -> tuple[float, ...]:
    """Read up to ``count`` leading whitespace-separated numbers; missing ones are 0."""
    values: list[float] = []
    for token in text.split()[:count]:
        match = _FLOAT.match(token)
        if not match:
            break
        values.append(float(match.group()))
        if match.end() != len(token):
            break
    values.extend([0.0] * (count - len(values)))
    return tuple(values)


def parse_obj(file_path: str) -> tuple[list[Vertex], list[int]]:
    """Parse triangles given as 'f v/t/n v/t/n v/t/n' into unshared vertices."""
    try:
        with open(file_path, "rb") as handle:
            content = handle.read().decode("utf-8", errors="replace")
    except OSError as exc:
        raise MeshParseError(f"Failed to open OBJ file: {file_path}") from exc

    data = ModelData()
    vertices: list[Vertex] = []
    indices: list[int] = []

    for line in content.split("\n"):
        if not line or line.startswith("#"):
            continue
        if line.startswith("v "):
            data.vertices.append(_scan_floats(line[2:], 3))  # type: ignore[arg-type]
        elif line.startswith("vt "):
            data.tex_coords.append(_scan_floats(line[3:], 2))  # type: ignore[arg-type]
        elif line.startswith("vn "):
            data.normals.append(_scan_floats(line[3:], 3))  # type: ignore[arg-type]
        elif line.startswith("f "):
            match = _FACE.match(line)
            if not match:
                raise MeshParseError(f"Failed to parse face: {line.rstrip()}")
            groups = match.groups()
            for corner in range(3):
                v, t, n = groups[corner * 3: corner * 3 + 3]
                vertices.append(parse_vertex(f"{v}/{t}/{n}", data))
                indices.append(len(indices))

    return vertices, indices