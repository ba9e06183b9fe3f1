"""
Simulation module.

This module provides:
- ChaseSimulation: fixed-timestep loop ticking followers against a shared room
- KinematicBody: position and facing of a simulated agent
- build_room_from_config: seeded room construction from configuration
- survey_rooms / room_metrics: per-seed layout and graph metrics
"""

from .runner import ChaseSimulation, KinematicBody, build_room_from_config
from .survey import survey_rooms, room_metrics

__all__ = [
    'ChaseSimulation',
    'KinematicBody',
    'build_room_from_config',
    'survey_rooms',
    'room_metrics'
]
