"""
Various math utilities for steering in the horizontal plane.
"""

import math
from typing import Sequence

import numpy as np


def heading_angle(direction: Sequence[float]) -> float:
    """Facing angle about the vertical axis, ``atan2(dx, dz)``."""
    return math.atan2(direction[0], direction[2])


def forward_vector(facing: float) -> np.ndarray:
    """Unit vector in the horizontal plane for a facing angle."""
    return np.array([math.sin(facing), 0.0, math.cos(facing)])


def horizontal_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Distance between two points ignoring the vertical axis."""
    return float(math.hypot(a[0] - b[0], a[2] - b[2]))
