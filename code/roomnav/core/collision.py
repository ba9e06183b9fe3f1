"""
Collision query contract used by followers, plus a wall-only reference implementation.

Provides:
- CollisionGroup: category bit flags used for ray masks
- RayHit: result of a ray query
- CollisionQueryService: protocol for anything that can answer ``cast_ray``
- WallRayCaster: ray tests against a room's wall segments in the horizontal plane
"""

import logging
import math
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Optional, Protocol, Sequence

import numpy as np

from .world.room import Room


class CollisionGroup(IntFlag):
    DEFAULT = 1
    ENEMY = 1 << 1
    PLAYER = 1 << 2
    WALL = 1 << 3
    HURTBOX = 1 << 4
    ALL = DEFAULT | ENEMY | PLAYER | WALL | HURTBOX


@dataclass(frozen=True)
class RayHit:
    """Nearest hit of a ray query; ``distance`` is infinite when nothing was hit."""
    hit: bool
    distance: float
    hit_id: Optional[Any] = None


NO_HIT = RayHit(hit=False, distance=math.inf)


class CollisionQueryService(Protocol):
    def cast_ray(self, origin: Sequence[float], target: Sequence[float], mask: int) -> RayHit:
        ...


class WallRayCaster:
    """
    This class answers ray queries against the wall segments of a room.

    Walls are treated as infinitely tall lines in the ``x``/``z`` plane and belong to
    ``CollisionGroup.WALL``. Rays parallel to a wall never hit it.
    """
    def __init__(self, room: Room, category: CollisionGroup = CollisionGroup.WALL):
        self.room = room
        self.category = category
        self.logger = logging.getLogger(self.__class__.__name__)
        sides = room.sides
        self._starts = np.array([[s.x0, s.y0] for s in sides], dtype=float).reshape(-1, 2)
        self._edges = np.array([[s.x1 - s.x0, s.y1 - s.y0] for s in sides], dtype=float).reshape(-1, 2)

    def cast_ray(self, origin: Sequence[float], target: Sequence[float], mask: int) -> RayHit:
        if not (int(mask) & int(self.category)) or len(self._starts) == 0:
            return NO_HIT

        origin = np.asarray(origin, dtype=float)
        target = np.asarray(target, dtype=float)
        ray_3d = target - origin
        ray = np.array([ray_3d[0], ray_3d[2]])
        if not np.any(ray):
            return NO_HIT

        to_start = self._starts - np.array([origin[0], origin[2]])
        denom = ray[0] * self._edges[:, 1] - ray[1] * self._edges[:, 0]
        parallel = denom == 0
        safe_denom = np.where(parallel, 1.0, denom)
        t = (to_start[:, 0] * self._edges[:, 1] - to_start[:, 1] * self._edges[:, 0]) / safe_denom
        u = (to_start[:, 0] * ray[1] - to_start[:, 1] * ray[0]) / safe_denom

        hits = ~parallel & (t >= 0.0) & (t <= 1.0) & (u >= 0.0) & (u <= 1.0)
        if not np.any(hits):
            return NO_HIT

        candidates = np.flatnonzero(hits)
        nearest = candidates[np.argmin(t[candidates])]
        distance = float(t[nearest] * np.linalg.norm(ray_3d))
        return RayHit(hit=True, distance=distance, hit_id=int(nearest))
