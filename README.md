# merlin

Pure-Python building blocks for a small 3D engine. The package covers meshes and
vertices, procedural primitives, OBJ and STL parsing, turning voxel grids into
positions, material descriptions, a resource registry by name, input events,
and a reader for binary integers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `merlin.geometry`: `Vertex`, `BoundingBox` (with `size`), `Mesh` and `DrawMode`.
  `Mesh.compute_bounding_box()` stores and returns the box around the vertex
  positions, including their centroid, and raises `ValueError` for a mesh without
  vertices.
- `merlin.primitives_flat`: `create_circle`, `create_outlined_circle`,
  `create_rectangle`, `create_quad_rectangle`, `create_floor` (a checkerboard that
  fades out towards its edge), `create_point`, `create_line`, `create_coord_system`
  and `create_from_quad`, which splits 1-based quad indices into triangles.
- `merlin.primitives_solid`: `create_quad_cube`, `create_cube`, `create_cone`,
  `create_cylinder` and `create_sphere`.
- `merlin.obj_loader`: `parse_obj` reads faces written as `f v/t/n v/t/n v/t/n`;
  `parse_vertex`, `ModelData` and `MeshParseError` go with it.
- `merlin.model_loader`: `parse_stl` picks `parse_stl_ascii` or `parse_stl_binary`
  from the first bytes of the file; `parse_mesh` dispatches on the `.obj` or `.stl`
  extension; `load_mesh` returns a `Mesh` named after the file. It also has
  `compute_facet_normal` and `angle_between`. Unreadable or malformed files raise
  `MeshParseError`.
- `merlin.voxels`: `voxel_positions` turns an occupancy grid laid over a
  `BoundingBox` into the centres of its non-zero cells (X fastest, then Y, then Z).
- `merlin.materials`: `MaterialType`, `MaterialBase`, `PhongMaterial` and
  `PBRMaterial`.
- `merlin.resources`: `ResourceManager`, which stores resources by name; adding
  a name twice replaces the first with a logged warning, and `get` returns `None`
  for an unknown name.
- `merlin.events`: window, application, key and mouse events, `EventType`,
  `EventCategory` and `EventDispatcher`.
- `merlin.keycodes`: the `Key` and `MouseButton` enums.
- `merlin.timestep`: `Timestep`, a frame duration with `seconds` and
  `milliseconds`.
- `merlin.datastream`: `DataStream` reads signed and unsigned 8, 16 and 32-bit
  integers in either `ByteOrder` (big-endian by default); reading past the end
  raises `ReadPastEndError`, as does every read after that.
- `merlin.util`: `FileType`, `get_file_type`, `get_file_extension`,
  `get_file_name` and `get_file_folder`.

## Example

```python
from merlin.model_loader import load_mesh
from merlin.primitives_solid import create_sphere

mesh = load_mesh("part.stl")
print(mesh.compute_bounding_box())

sphere = create_sphere(1.0, 16, 8)
print(len(sphere.vertices), sphere.has_indices())
```

Events are routed by their class:

```python
from merlin.events import EventDispatcher, KeyPressedEvent
from merlin.keycodes import Key

event = KeyPressedEvent(Key.SPACE, 0)
EventDispatcher(event).dispatch(KeyPressedEvent, lambda e: True)
assert event.handled
```

## What it does not do

The package only builds and reads geometry and data in Python. It opens no
window, draws nothing, compiles no shaders and loads no images or textures;
materials hold texture slots but nothing fills them. It does not compute voxel
grids from a mesh: `voxel_positions` takes a grid that has already been made.
Model files other than OBJ and STL are not read.