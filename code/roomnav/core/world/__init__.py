"""
World module for room generation, geometry and navigation.

This module provides:
- RoomGenerator / generate_boxes: seeded box layout generation
- RoomGeometryBuilder / build_room: wall derivation and Room construction
- Room: immutable room aggregate with box lookup and path search
- RoomGraph: igraph view of box adjacency
- build_adjacency / find_box_path: graph construction and search
- wall_volumes / floor_volumes: slab volumes for the presentation sink
"""

from .shapes import Box, WallSegment, Bounds
from .generator import RoomGenerator, generate_boxes
from .graph import RoomGraph, build_adjacency, find_box_path, BREADTH_FIRST, DEPTH_FIRST, SEARCH_STRATEGIES
from .room import Room
from .geometry import RoomGeometryBuilder, build_room
from .volumes import wall_volumes, floor_volumes

__all__ = [
    'Box',
    'WallSegment',
    'Bounds',
    'RoomGenerator',
    'generate_boxes',
    'RoomGraph',
    'build_adjacency',
    'find_box_path',
    'BREADTH_FIRST',
    'DEPTH_FIRST',
    'SEARCH_STRATEGIES',
    'Room',
    'RoomGeometryBuilder',
    'build_room',
    'wall_volumes',
    'floor_volumes',
]
