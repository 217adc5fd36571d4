"""Reading STL and OBJ mesh files into vertices, indices and meshes."""

from __future__ import annotations

import math
import struct
from typing import Sequence

from merlin.geometry import DrawMode, Mesh, Vec3, Vertex
from merlin.obj_loader import MeshParseError, parse_obj
from merlin.util import FileType, get_file_name, get_file_type

_HEADER_SIZE = 80
_COUNT = struct.Struct("<I")
_TRIANGLE = struct.Struct("<12fH")


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _normalize(v: Sequence[float]) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


def compute_facet_normal(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> Vec3:
    """Unit normal of the triangle p1, p2, p3 (counter-clockwise winding).

    A degenerate triangle gives a vector of NaNs.
    """
    u = _sub(p2, p1)
    v = _sub(p3, p1)
    cross = (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )
    return _normalize(cross)


def angle_between(a: Sequence[float], b: Sequence[float]) -> float:
    """Angle in radians between two vectors."""
    da = _normalize(a)
    db = _normalize(b)
    if da == db:
        return 0.0
    dot = da[0] * db[0] + da[1] * db[1] + da[2] * db[2]
    return math.acos(max(-1.0, min(1.0, dot)))


def _read_bytes(file_path: str) -> bytes:
    try:
        with open(file_path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise MeshParseError(f"File not found {file_path} or no read access") from exc


def parse_stl(file_path: str) -> tuple[list[Vertex], list[int]]:
    """Parse an STL file, choosing ASCII or binary from its first bytes."""
    header = _read_bytes(file_path)[:_HEADER_SIZE]
    if header.startswith(b"solid"):
        return parse_stl_ascii(file_path)
    return parse_stl_binary(file_path)


def parse_stl_binary(file_path: str) -> tuple[list[Vertex], list[int]]:
    """Parse a binary STL file; normals are recomputed from the triangle corners."""
    data = _read_bytes(file_path)
    if len(data) < _HEADER_SIZE + _COUNT.size:
        raise MeshParseError(f"binary STL file too short: {file_path}")
    (count,) = _COUNT.unpack_from(data, _HEADER_SIZE)
    needed = _HEADER_SIZE + _COUNT.size + count * _TRIANGLE.size
    if len(data) < needed:
        raise MeshParseError(
            f"binary STL file {file_path} declares {count} triangles but is truncated"
        )

    vertices: list[Vertex] = []
    indices: list[int] = []
    offset = _HEADER_SIZE + _COUNT.size
    for values in _TRIANGLE.iter_unpack(data[offset:needed]):
        corners = [tuple(values[3 + 3 * k: 6 + 3 * k]) for k in range(3)]
        normal = compute_facet_normal(*corners)
        base = len(vertices)
        vertices.extend(Vertex(position=corner, normal=normal) for corner in corners)
        indices.extend((base, base + 1, base + 2))
    return vertices, indices


def _leading_floats(tokens: Sequence[str], count: int) -> Vec3:
    values: list[float] = []
    for token in tokens[:count]:
        try:
            values.append(float(token))
        except ValueError:
            break
    values.extend([0.0] * (count - len(values)))
    return tuple(values)  # type: ignore[return-value]


def parse_stl_ascii(file_path: str) -> tuple[list[Vertex], list[int]]:
    """Parse an ASCII STL file; each vertex takes the last facet normal seen."""
    text = _read_bytes(file_path).decode("utf-8", errors="replace")
    vertices: list[Vertex] = []
    indices: list[int] = []
    normal: Vec3 = (0.0, 0.0, 0.0)

    for line in text.splitlines():
        tokens = line.split()
        if not tokens:
            continue
        keyword = tokens[0]
        if keyword.startswith("f"):
            normal = _leading_floats(tokens[2:], 3)
        elif keyword.startswith("v"):
            position = _leading_floats(tokens[1:], 3)
            vertices.append(Vertex(position=position, normal=normal, color=(1.0, 1.0, 1.0)))
            indices.append(len(indices))
    return vertices, indices


def parse_mesh(file_path: str) -> tuple[list[Vertex], list[int]]:
    """Parse an OBJ or STL file, chosen by extension."""
    file_type = get_file_type(file_path)
    if file_type is FileType.OBJ:
        return parse_obj(file_path)
    if file_type is FileType.STL:
        return parse_stl(file_path)
    raise MeshParseError(f"Unknown file type: {file_path}")


def load_mesh(file_path: str) -> Mesh:
    """Load a mesh file into a triangle mesh named after the file."""
    file_type = get_file_type(file_path)
    if file_type not in (FileType.OBJ, FileType.STL, FileType.GEOM):
        raise MeshParseError(f"Unsupported mesh file: {file_path}")
    vertices, indices = parse_mesh(file_path)
    return Mesh(get_file_name(file_path), vertices, indices, DrawMode.TRIANGLES)