import pytest

from merlin.geometry import Vertex
from merlin.obj_loader import MeshParseError, ModelData, parse_obj, parse_vertex

TRIANGLE = """# a triangle
v 0.0 0.0 0.0
v 1.0 0.0 0.0
v 0.0 1.0 0.0
vt 0.0 0.0
vt 1.0 0.0
vt 0.0 1.0
vn 0.0 0.0 1.0

f 1/1/1 2/2/1 3/3/1
"""


def _write(tmp_path, text, name="model.obj", newline="\n"):
    path = tmp_path / name
    path.write_bytes(text.replace("\n", newline).encode())
    return str(path)


def _data():
    return ModelData(
        vertices=[(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)],
        tex_coords=[(0.25, 0.75)],
        normals=[(0.0, 1.0, 0.0)],
    )


def test_parse_vertex_position_only():
    vertex = parse_vertex("2", _data())
    assert vertex.position == (4.0, 5.0, 6.0)
    assert vertex.tex_coord == Vertex().tex_coord


def test_parse_vertex_all_attributes():
    vertex = parse_vertex("1/1/1", _data())
    assert vertex.position == (1.0, 2.0, 3.0)
    assert vertex.tex_coord == (0.25, 0.75)
    assert vertex.normal == (0.0, 1.0, 0.0)


def test_parse_vertex_out_of_range():
    with pytest.raises(MeshParseError):
        parse_vertex("3", _data())
    with pytest.raises(MeshParseError):
        parse_vertex("0", _data())


def test_parse_vertex_empty_index():
    with pytest.raises(MeshParseError):
        parse_vertex("1//1", _data())


def test_parse_obj_triangle(tmp_path):
    vertices, indices = parse_obj(_write(tmp_path, TRIANGLE))
    assert indices == [0, 1, 2]
    assert [v.position for v in vertices] == [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
    assert [v.tex_coord for v in vertices] == [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
    assert all(v.normal == (0.0, 0.0, 1.0) for v in vertices)


def test_parse_obj_crlf_lines(tmp_path):
    lf = parse_obj(_write(tmp_path, TRIANGLE, "a.obj"))
    crlf = parse_obj(_write(tmp_path, TRIANGLE, "b.obj", newline="\r\n"))
    assert lf == crlf


def test_parse_obj_indices_sequential_across_faces(tmp_path):
    text = TRIANGLE + "f 3/3/1 2/2/1 1/1/1\n"
    vertices, indices = parse_obj(_write(tmp_path, text))
    assert indices == list(range(len(vertices)))
    assert vertices[3].position == vertices[2].position


def test_parse_obj_quad_uses_first_three_corners(tmp_path):
    text = TRIANGLE.replace("f 1/1/1 2/2/1 3/3/1", "f 1/1/1 2/2/1 3/3/1 1/1/1")
    vertices, indices = parse_obj(_write(tmp_path, text))
    assert len(vertices) == len(indices) == 3


def test_parse_obj_rejects_face_without_all_indices(tmp_path):
    text = TRIANGLE.replace("f 1/1/1 2/2/1 3/3/1", "f 1 2 3")
    with pytest.raises(MeshParseError):
        parse_obj(_write(tmp_path, text))


def test_parse_obj_missing_file(tmp_path):
    with pytest.raises(MeshParseError):
        parse_obj(str(tmp_path / "missing.obj"))


def test_parse_obj_no_faces(tmp_path):
    vertices, indices = parse_obj(_write(tmp_path, "# empty\nv 1 2 3\n"))
    assert vertices == [] and indices == []