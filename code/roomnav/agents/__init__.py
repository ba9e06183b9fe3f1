"""
Agent module for room navigation agents.

This module provides:
- Agent: Base agent class with common functionality
- PathFollower: Agent that chases a target by sight or along box paths
- PathState / MovementIntent: per-agent state and per-tick output
- TargetRegistry: id-based lookup of target positions
"""

from .base import Agent
from .follower import PathFollower, PathState, MovementIntent, MODE_DIRECT, MODE_PATH, MODE_HOLD
from .targets import TargetRegistry

__all__ = [
    'Agent',
    'PathFollower',
    'PathState',
    'MovementIntent',
    'MODE_DIRECT',
    'MODE_PATH',
    'MODE_HOLD',
    'TargetRegistry'
]
