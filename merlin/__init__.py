"""Meshes, primitives, OBJ and STL parsing, voxel positions, materials, events and utilities."""

__version__ = "0.1.0"