import logging
from dataclasses import dataclass
from functools import cached_property
from typing import List, Optional, Tuple

import numpy as np

from .graph import Adjacency, BREADTH_FIRST, RoomGraph, find_box_path
from .shapes import Bounds, Box, WallSegment


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Room:
    """
    Immutable result of room construction: boxes, surviving walls, extents and box adjacency.

    Built once by the geometry builder and shared read-only by every follower and
    by the presentation helpers. Walls are frozen and adjacency is a read-only mapping.
    Room coordinates ``(x, y)`` map to world ``(x, z)``.
    """
    boxes: Tuple[Box, ...]
    sides: Tuple[WallSegment, ...]
    bounds: Bounds
    adjacency: Adjacency

    @cached_property
    def graph(self) -> RoomGraph:
        return RoomGraph(self)

    @property
    def total_area(self) -> int:
        return sum(box.area for box in self.boxes)

    def box_for_coordinate(self, x: float, y: float) -> Optional[int]:
        """Index of the first box containing the point, or None for walls and the outside."""
        for i, box in enumerate(self.boxes):
            if box.contains(x, y):
                return i
        return None

    def find_path(self, start: int, finish: int, strategy: str = BREADTH_FIRST) -> Optional[List[int]]:
        """Box path from ``start`` to ``finish`` through openings, or None when unreachable."""
        path = find_box_path(self.adjacency, start, finish, strategy)
        if path is None:
            logger.debug(f"Box {finish} unreachable from box {start}")
        return path

    def find_point_path(self, start_xy: Tuple[float, float], finish_xy: Tuple[float, float],
                        strategy: str = BREADTH_FIRST) -> Optional[List[int]]:
        """Locate both points and search between their boxes."""
        start = self.box_for_coordinate(*start_xy)
        finish = self.box_for_coordinate(*finish_xy)
        if start is None or finish is None:
            logger.debug(f"Point lookup failed: start={start_xy} -> {start}, finish={finish_xy} -> {finish}")
            return None
        return self.find_path(start, finish, strategy)

    def waypoints(self, box_path: List[int]) -> List[np.ndarray]:
        """Convert box indices to world-space box centers ``(x, 0, z)``."""
        points = []
        for index in box_path:
            cx, cy = self.boxes[index].center
            points.append(np.array([cx, 0.0, cy]))
        return points

    def to_dict(self) -> dict:
        return {
            'boxes': [box.to_dict() for box in self.boxes],
            'sides': [side.to_dict() for side in self.sides],
            'bounds': list(self.bounds),
            'adjacency': {str(i): sorted(adjacent) for i, adjacent in self.adjacency.items()},
        }
