"""
Main configuration classes for room generation and navigation.

Provides a dataclass-based configuration system loaded from YAML.
All default values are defined in default.yaml, not in Python code.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from .schema import (
    validate_box_sizes,
    validate_follower,
    validate_minimum_area,
    validate_search_strategy,
    validate_timestep,
)

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'default.yaml')


@dataclass
class GenerationConfig:
    """Box layout generation settings"""
    seed: Optional[int]
    minimum_area: int
    min_box_size: int
    max_box_size: int

    def __post_init__(self):
        validate_minimum_area(self.minimum_area)
        validate_box_sizes(self.min_box_size, self.max_box_size)


@dataclass
class NavigationConfig:
    """Path search settings"""
    search: str

    def __post_init__(self):
        validate_search_strategy(self.search)


@dataclass
class FollowerConfig:
    """Per-agent following behavior"""
    repath_interval: float
    waypoint_radius: float
    speed: float
    eye_offset: List[float] = field(default_factory=lambda: [0.0, 1.0, 0.0])

    def __post_init__(self):
        self.eye_offset = [float(v) for v in self.eye_offset]
        validate_follower(self.repath_interval, self.waypoint_radius, self.speed, self.eye_offset)


@dataclass
class RenderConfig:
    """Presentation and debug raster settings"""
    wall_height: float
    floor_thickness: float
    raster_seed: int = 0


@dataclass
class SimulationSettings:
    """Fixed-timestep chase simulation settings"""
    dt: float
    ticks: int
    log_dir: str

    def __post_init__(self):
        validate_timestep(self.dt, self.ticks)


@dataclass
class RoomConfig:
    """Top-level configuration"""
    generation: GenerationConfig
    navigation: NavigationConfig
    follower: FollowerConfig
    render: RenderConfig
    simulation: SimulationSettings

    @classmethod
    def from_params(cls, base_config_path: Optional[str] = None, **params) -> 'RoomConfig':
        """
        Create configuration from the YAML defaults, an optional YAML file and overrides.

        Args:
            base_config_path: Path to a YAML file merged over the defaults; must exist if given
            **params: Parameters to override using dot notation keys

        Example:
            config = RoomConfig.from_params(
                **{
                    'generation.seed': 7,
                    'generation.minimum_area': 900,
                    'follower.repath_interval': 0.5,
                }
            )
        """
        with open(DEFAULT_CONFIG_PATH, 'r') as f:
            defaults = yaml.safe_load(f)

        if base_config_path is not None:
            if not os.path.exists(base_config_path):
                raise FileNotFoundError(f"Config file not found: {base_config_path}")
            with open(base_config_path, 'r') as f:
                custom = yaml.safe_load(f) or {}
            defaults = cls._deep_update(defaults, custom)

        if params:
            nested_overrides = cls._params_to_nested_dict(params)
            defaults = cls._deep_update(defaults, nested_overrides)

        return cls(
            generation=GenerationConfig(**defaults['generation']),
            navigation=NavigationConfig(**defaults['navigation']),
            follower=FollowerConfig(**defaults['follower']),
            render=RenderConfig(**defaults['render']),
            simulation=SimulationSettings(**defaults['simulation']),
        )

    @staticmethod
    def _params_to_nested_dict(params: Dict[str, Any]) -> Dict[str, Any]:
        """Convert dot notation parameters to nested dictionary"""
        result = {}
        for key, value in params.items():
            keys = key.split('.')
            current = result
            for k in keys[:-1]:
                if k not in current:
                    current[k] = {}
                current = current[k]
            current[keys[-1]] = value
        return result

    @staticmethod
    def _deep_update(base_dict: Dict, update_dict: Dict) -> Dict:
        """Deep update dictionary, handling nested structures"""
        result = base_dict.copy()
        for key, value in update_dict.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = RoomConfig._deep_update(result[key], value)
            else:
                result[key] = value
        return result
