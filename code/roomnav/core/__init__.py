"""
Core room generation, navigation and collision query components.
"""

from .world import Room, build_room, generate_boxes
from .collision import CollisionGroup, CollisionQueryService, RayHit, WallRayCaster

__all__ = [
    'Room',
    'build_room',
    'generate_boxes',
    'CollisionGroup',
    'CollisionQueryService',
    'RayHit',
    'WallRayCaster',
]
