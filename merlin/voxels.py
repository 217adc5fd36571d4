"""Turning an occupancy grid over a bounding box into voxel centre positions."""

from __future__ import annotations

import math
from itertools import islice
from typing import Iterable

from merlin.geometry import BoundingBox, Vec3


def voxel_positions(voxels: Iterable[int], aabb: BoundingBox, spacing: float) -> list[Vec3]:
    """Return the centres of the non-zero cells of a grid laid over ``aabb``.

    Cells are ordered with X varying fastest, then Y, then Z. A box side of
    zero length still gets one layer of cells.
    """
    if spacing <= 0:
        raise ValueError(f"spacing must be positive, got {spacing}")
    sizes = []
    for side in aabb.size:
        if side < 0:
            raise ValueError("bounding box max is below its min")
        sizes.append(side if side != 0 else side + spacing)
    gx, gy, gz = (math.ceil(side / spacing) for side in sizes)
    total = gx * gy * gz
    layer = gx * gy

    cells = list(islice(voxels, total))
    if len(cells) < total:
        raise ValueError(f"grid needs {total} cells, got {len(cells)}")

    ox, oy, oz = aabb.min
    positions: list[Vec3] = []
    for index, value in enumerate(cells):
        if value == 0:
            continue
        vz, rest = divmod(index, layer)
        vy, vx = divmod(rest, gx)
        positions.append(
            (
                ox + (vx + 0.5) * spacing,
                oy + (vy + 0.5) * spacing,
                oz + (vz + 0.5) * spacing,
            )
        )
    return positions