[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "merlin"
version = "0.1.0"
description = "Mesh primitives, OBJ and STL parsing, voxel grids, materials, input events and small utilities for a 3D engine, in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "3d", "stl", "obj", "voxel", "primitives", "events"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["merlin"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
