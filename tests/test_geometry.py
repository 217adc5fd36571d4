import pytest

from merlin.geometry import BoundingBox, DrawMode, Mesh, Vertex


def _mesh(points, **kwargs):
    return Mesh("m", [Vertex(position=p) for p in points], **kwargs)


def test_draw_mode_matches_gl_enums():
    assert DrawMode(4) is DrawMode.TRIANGLES
    assert DrawMode(1) is DrawMode.LINES
    assert DrawMode(0) is DrawMode.POINTS


def test_default_draw_mode_is_triangles():
    assert Mesh("x").draw_mode is DrawMode.TRIANGLES


def test_has_indices():
    assert not _mesh([(0, 0, 0)]).has_indices()
    assert _mesh([(0, 0, 0)], indices=[0]).has_indices()


def test_vertices_are_copied():
    verts = [Vertex(position=(1.0, 2.0, 3.0))]
    mesh = Mesh("copy", verts)
    verts.append(Vertex())
    assert len(mesh.vertices) == 1


def test_bounding_box_extremes():
    points = [(-1.0, 2.0, 5.0), (3.0, -4.0, 0.5), (0.0, 0.0, -2.0)]
    box = _mesh(points).compute_bounding_box()
    assert box.min == (-1.0, -4.0, -2.0)
    assert box.max == (3.0, 2.0, 5.0)


def test_bounding_box_is_stored_and_contains_centroid():
    points = [(1.0, 1.0, 1.0), (-1.0, -1.0, -1.0)]
    mesh = _mesh(points)
    box = mesh.compute_bounding_box()
    assert mesh.bounding_box == box
    assert box.centroid == (0.0, 0.0, 0.0)
    for lo, c, hi in zip(box.min, box.centroid, box.max):
        assert lo <= c <= hi


def test_bounding_box_size():
    box = BoundingBox(min=(0.0, 1.0, 2.0), max=(2.0, 1.0, 6.0))
    assert box.size == (2.0, 0.0, 4.0)


def test_empty_mesh_bounding_box_raises():
    with pytest.raises(ValueError):
        Mesh("empty").compute_bounding_box()