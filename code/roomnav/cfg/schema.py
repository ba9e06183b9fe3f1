"""
Configuration validation for room generation and navigation settings.

Provides validators called by the configuration dataclasses so invalid values
fail when the configuration is built rather than deep inside a run.
"""

from typing import Sequence

SEARCH_STRATEGIES = ['breadth_first', 'depth_first']


def validate_box_sizes(min_box_size: int, max_box_size: int) -> None:
    """Validate the inclusive box side range"""
    if min_box_size < 1:
        raise ValueError("min_box_size must be positive")
    if max_box_size < min_box_size:
        raise ValueError(f"max_box_size ({max_box_size}) must be >= min_box_size ({min_box_size})")


def validate_minimum_area(minimum_area: int) -> None:
    if minimum_area < 0:
        raise ValueError("minimum_area must be non-negative")


def validate_search_strategy(search: str) -> str:
    """Validate path search strategy parameter"""
    if search not in SEARCH_STRATEGIES:
        raise ValueError(f"search must be one of {SEARCH_STRATEGIES}, got {search}")
    return search


def validate_follower(repath_interval: float, waypoint_radius: float, speed: float,
                      eye_offset: Sequence[float]) -> None:
    if repath_interval <= 0:
        raise ValueError("repath_interval must be positive")
    if waypoint_radius <= 0:
        raise ValueError("waypoint_radius must be positive")
    if speed < 0:
        raise ValueError("speed must be non-negative")
    if len(eye_offset) != 3:
        raise ValueError(f"eye_offset must have 3 components, got {len(eye_offset)}")


def validate_timestep(dt: float, ticks: int) -> None:
    if dt <= 0:
        raise ValueError("dt must be positive")
    if ticks < 0:
        raise ValueError("ticks must be non-negative")
