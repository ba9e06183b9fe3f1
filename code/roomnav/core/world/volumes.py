"""
Box-shaped volumes handed to the presentation sink.

Each wall segment becomes a slab of the given height extruded one unit along its
normal; each floor box becomes a slab spanning the box. Volumes are returned as
``(centers, half_extents)`` arrays in world space (room ``y`` is world ``z``).
"""

from typing import Tuple

import numpy as np

from .room import Room


def wall_volumes(room: Room, height: float) -> Tuple[np.ndarray, np.ndarray]:
    """Centers and non-negative half extents of the wall slabs, shape ``(n, 3)`` each."""
    centers = np.zeros((len(room.sides), 3))
    half_extents = np.zeros((len(room.sides), 3))
    for i, side in enumerate(room.sides):
        if side.normal[0] == 0:
            scale = np.array([side.x1 - side.x0, height, side.normal[1]], dtype=float)
        else:
            scale = np.array([side.normal[0], height, side.y1 - side.y0], dtype=float)
        centers[i] = [side.x0 + scale[0] / 2.0, scale[1] / 2.0, side.y0 + scale[2] / 2.0]
        # Negative extents along the normal are folded into the center above
        half_extents[i] = np.abs(scale) / 2.0
    return centers, half_extents


def floor_volumes(room: Room, thickness: float = 1.0) -> Tuple[np.ndarray, np.ndarray]:
    """Centers and half extents of the floor slabs, one per box."""
    centers = np.zeros((len(room.boxes), 3))
    half_extents = np.zeros((len(room.boxes), 3))
    for i, box in enumerate(room.boxes):
        scale = np.array([box.width, thickness, box.height], dtype=float)
        centers[i] = [box.left + scale[0] / 2.0, scale[1] / 2.0, box.bottom + scale[2] / 2.0]
        half_extents[i] = scale / 2.0
    return centers, half_extents
