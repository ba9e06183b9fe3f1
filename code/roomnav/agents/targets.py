import logging
from typing import Dict, Optional, Sequence

import numpy as np

from ..core.collision import CollisionGroup


class TargetRegistry:
    """
    This class maps stable target ids to their current positions and collision categories.

    Followers hold a target id and resolve it here on every tick, so a removed target
    simply stops resolving instead of leaving a dangling reference.
    """
    def __init__(self):
        self._positions: Dict[str, np.ndarray] = {}
        self._categories: Dict[str, CollisionGroup] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def register(self, target_id: str, position: Sequence[float],
                 category: CollisionGroup = CollisionGroup.PLAYER) -> None:
        self._positions[target_id] = np.asarray(position, dtype=float).copy()
        self._categories[target_id] = category
        self.logger.debug(f"Registered target {target_id} at {self._positions[target_id]}")

    def move(self, target_id: str, position: Sequence[float]) -> None:
        if target_id not in self._positions:
            raise KeyError(f"Unknown target: {target_id}")
        self._positions[target_id] = np.asarray(position, dtype=float).copy()

    def remove(self, target_id: str) -> None:
        self._positions.pop(target_id, None)
        self._categories.pop(target_id, None)

    def position(self, target_id: str) -> Optional[np.ndarray]:
        """Current position of the target, or None if it no longer exists."""
        position = self._positions.get(target_id)
        return None if position is None else position.copy()

    def category(self, target_id: str) -> CollisionGroup:
        return self._categories.get(target_id, CollisionGroup.PLAYER)

    def __contains__(self, target_id: str) -> bool:
        return target_id in self._positions
