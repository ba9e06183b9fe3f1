import logging
from collections import deque
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence

from igraph import Graph

from .shapes import Box, WallSegment


BREADTH_FIRST = 'breadth_first'
DEPTH_FIRST = 'depth_first'
SEARCH_STRATEGIES = (BREADTH_FIRST, DEPTH_FIRST)

Adjacency = Mapping[int, FrozenSet[int]]


def _overlaps(lo_a: int, hi_a: int, lo_b: int, hi_b: int) -> bool:
    """Open intervals overlap with positive length."""
    return min(hi_a, hi_b) - max(lo_a, lo_b) > 0


def boxes_share_opening(a: Box, b: Box) -> bool:
    """Check whether two boxes touch along an edge with a positive-length overlap."""
    if a.right == b.left or a.left == b.right:
        return _overlaps(a.bottom, a.top, b.bottom, b.top)
    if a.top == b.bottom or a.bottom == b.top:
        return _overlaps(a.left, a.right, b.left, b.right)
    return False


def build_adjacency(boxes: Sequence[Box], sides: Optional[Sequence[WallSegment]] = None) -> Dict[int, FrozenSet[int]]:
    """
    Build the box adjacency mapping.

    Two boxes are adjacent when their shared boundary was opened by the merge pass.
    Boxes never overlap, so every flush edge overlap is an opening and the walls
    themselves are not needed; ``sides`` is accepted for callers that have them.
    """
    neighbors = {i: set() for i in range(len(boxes))}
    for i in range(len(boxes)):
        for j in range(i + 1, len(boxes)):
            if boxes_share_opening(boxes[i], boxes[j]):
                neighbors[i].add(j)
                neighbors[j].add(i)
    return {i: frozenset(adjacent) for i, adjacent in neighbors.items()}


def find_box_path(adjacency: Adjacency, start: int, finish: int,
                  strategy: str = BREADTH_FIRST) -> Optional[List[int]]:
    """
    Search the adjacency graph from ``start`` to ``finish``.

    ``breadth_first`` marks boxes when they are discovered and returns a path with the
    fewest boxes. ``depth_first`` keeps the legacy stack order: boxes are marked when
    popped and a predecessor is overwritten by every box that discovers it, which
    still yields a valid path but not necessarily a shortest one.

    Returns:
        Box indices from start to finish inclusive, or None when unreachable.
    """
    if strategy not in SEARCH_STRATEGIES:
        raise ValueError(f"search strategy must be one of {SEARCH_STRATEGIES}, got {strategy}")
    if start not in adjacency or finish not in adjacency:
        return None

    prev_box = {start: start}

    if strategy == BREADTH_FIRST:
        frontier = deque([start])
        while frontier:
            current = frontier.popleft()
            if current == finish:
                break
            for nxt in sorted(adjacency[current]):
                if nxt not in prev_box:
                    prev_box[nxt] = current
                    frontier.append(nxt)
    else:
        stack = [start]
        visited = set()
        while stack:
            current = stack.pop()
            if current == finish:
                break
            if current in visited:
                continue
            visited.add(current)
            for nxt in sorted(adjacency[current]):
                if nxt in visited:
                    continue
                stack.append(nxt)
                prev_box[nxt] = current

    if finish not in prev_box:
        return None

    path = [finish]
    current = finish
    while current != start:
        current = prev_box[current]
        path.append(current)
    path.reverse()
    return path


class RoomGraph:
    """
    This class holds the igraph representation of a room's box adjacency and answers
    whole-graph questions (connectivity, components, distances).
    """
    def __init__(self, room):
        self.room = room
        self.logger = logging.getLogger(self.__class__.__name__)
        self.igraph = Graph(directed=False)
        self.igraph.add_vertices(len(room.boxes))
        edges = sorted(
            (i, j) for i, adjacent in room.adjacency.items() for j in adjacent if i < j
        )
        self.igraph.add_edges(edges)
        for i, box in enumerate(room.boxes):
            self.igraph.vs[i]['center'] = box.center
            self.igraph.vs[i]['area'] = box.area

    @property
    def edge_count(self) -> int:
        return self.igraph.ecount()

    def is_connected(self) -> bool:
        return self.igraph.vcount() > 0 and self.igraph.is_connected()

    def component_count(self) -> int:
        return len(self.igraph.connected_components())

    def reachable_from(self, index: int) -> List[int]:
        """All box indices reachable from ``index`` (including itself)."""
        return sorted(self.igraph.subcomponent(index))

    def shortest_path_length(self, start: int, finish: int) -> Optional[int]:
        """Number of openings crossed on a shortest path, or None when unreachable."""
        distances = self.igraph.distances(source=start, target=finish)
        length = distances[0][0]
        return int(length) if length != float('inf') else None

    def diameter(self) -> int:
        return int(self.igraph.diameter(directed=False))

    def find_path(self, start: int, finish: int, strategy: str = BREADTH_FIRST) -> Optional[List[int]]:
        path = find_box_path(self.room.adjacency, start, finish, strategy)
        if path is None:
            self.logger.debug(f"No path from box {start} to box {finish}")
        return path
