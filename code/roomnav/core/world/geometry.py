import logging
from dataclasses import replace
from types import MappingProxyType
from typing import List, Optional, Sequence, Tuple

from .graph import build_adjacency
from .room import Room
from .shapes import (
    Bounds, Box, WallSegment,
    NORMAL_DOWN, NORMAL_LEFT, NORMAL_UP, NORMAL_RIGHT,
)


def box_sides(box: Box) -> List[WallSegment]:
    """Wall candidates of a single box: top, right, bottom, left."""
    return [
        WallSegment(box.left, box.top, box.right, box.top, NORMAL_DOWN),
        WallSegment(box.right, box.bottom, box.right, box.top, NORMAL_LEFT),
        WallSegment(box.left, box.bottom, box.right, box.bottom, NORMAL_UP),
        WallSegment(box.left, box.bottom, box.left, box.top, NORMAL_RIGHT),
    ]


def compute_bounds(boxes: Sequence[Box]) -> Bounds:
    return Bounds(
        min_x=min(box.left for box in boxes),
        min_y=min(box.bottom for box in boxes),
        max_x=max(box.right for box in boxes),
        max_y=max(box.top for box in boxes),
    )


def _span(side: WallSegment, horizontal: bool):
    return (side.x0, side.x1) if horizontal else (side.y0, side.y1)


def _with_span(side: WallSegment, horizontal: bool, lo: int, hi: int, **changes) -> WallSegment:
    if horizontal:
        return replace(side, x0=lo, x1=hi, **changes)
    return replace(side, y0=lo, y1=hi, **changes)


def merge_collinear(side: WallSegment, other: WallSegment) -> Optional[Tuple[WallSegment, WallSegment]]:
    """
    Resolve the overlap between two collinear wall candidates.

    The overlapping span becomes an opening. When one segment contains the other,
    the container keeps the part before the contained segment and the contained
    segment takes over the tail, along with the container's normal.

    Returns:
        The trimmed ``(side, other)`` pair, or None when the segments do not overlap.
    """
    if side.is_horizontal and other.is_horizontal and side.y0 == other.y0:
        horizontal = True
    elif side.is_vertical and other.is_vertical and side.x0 == other.x0:
        horizontal = False
    else:
        return None

    s_lo, s_hi = _span(side, horizontal)
    o_lo, o_hi = _span(other, horizontal)

    if s_lo <= o_lo and s_hi >= o_hi:
        # side contains other
        return (_with_span(side, horizontal, s_lo, o_lo),
                _with_span(other, horizontal, o_hi, s_hi, normal=side.normal))
    if s_lo >= o_lo and s_hi <= o_hi:
        # other contains side
        return (_with_span(side, horizontal, s_hi, o_hi, normal=other.normal),
                _with_span(other, horizontal, o_lo, s_lo))
    if o_lo < s_lo < o_hi < s_hi:
        # near end of side lies inside other
        return (_with_span(side, horizontal, o_hi, s_hi),
                _with_span(other, horizontal, o_lo, s_lo))
    if s_lo < o_lo < s_hi < o_hi:
        # far end of side lies inside other
        return (_with_span(side, horizontal, s_lo, o_lo),
                _with_span(other, horizontal, s_hi, o_hi))
    return None


class RoomGeometryBuilder:
    """
    This class turns a box layout into a Room: bounds, trimmed wall segments and adjacency.

    The merge pass visits ordered pairs ``(i, j)`` by insertion index and repeats full
    scans until one changes nothing. Every change shortens the total wall length, so the
    scans terminate and no two collinear walls overlap afterwards.
    """
    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def build(self, boxes: Sequence[Box]) -> Room:
        if not boxes:
            raise ValueError("Cannot build a room from an empty box list")

        boxes = tuple(boxes)
        bounds = compute_bounds(boxes)

        sides = []
        for box in boxes:
            sides.extend(box_sides(box))
        candidate_count = len(sides)

        scans = self._merge_sides(sides)

        sides = tuple(side for side in sides if not side.is_degenerate)
        adjacency = MappingProxyType(build_adjacency(boxes, sides))

        self.logger.debug(
            f"Built room from {len(boxes)} boxes: {candidate_count} wall candidates -> "
            f"{len(sides)} walls after {scans} merge scans"
        )
        return Room(boxes=boxes, sides=sides, bounds=bounds, adjacency=adjacency)

    @staticmethod
    def _merge_sides(sides: List[WallSegment]) -> int:
        """Run merge scans until stable; returns the number of scans performed."""
        scans = 0
        changed = True
        while changed:
            changed = False
            scans += 1
            for i in range(len(sides)):
                for j in range(len(sides)):
                    if i == j or sides[i].is_degenerate or sides[j].is_degenerate:
                        continue
                    merged = merge_collinear(sides[i], sides[j])
                    if merged is not None:
                        sides[i], sides[j] = merged
                        changed = True
        return scans


def build_room(boxes: Sequence[Box]) -> Room:
    """Build a Room from a box layout."""
    return RoomGeometryBuilder().build(boxes)
