"""
Configuration module for room generation and navigation settings.

Provides:
- RoomConfig: dataclass-based configuration with YAML loading and dot-notation overrides
- GenerationConfig: box layout generation
- NavigationConfig: path search
- FollowerConfig: per-agent following behavior
- RenderConfig: presentation and debug raster settings
- SimulationSettings: fixed-timestep chase simulation
"""

from .config import (
    RoomConfig,
    GenerationConfig,
    NavigationConfig,
    FollowerConfig,
    RenderConfig,
    SimulationSettings,
)

__all__ = [
    'RoomConfig',
    'GenerationConfig',
    'NavigationConfig',
    'FollowerConfig',
    'RenderConfig',
    'SimulationSettings',
]
