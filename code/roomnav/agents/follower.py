"""
Path follower agent: chases a target by line of sight, falling back to box-graph paths.

Each tick the follower casts a ray from its eye to the target. A clear view steers
straight at the target. A blocked view steers through the box centers of a path
found on the room's adjacency graph; the path is recomputed at most once per
repath interval.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from .base import Agent
from .targets import TargetRegistry
from ..cfg import FollowerConfig
from ..core.collision import CollisionGroup, CollisionQueryService
from ..core.world import BREADTH_FIRST, Room
from ..utils.math_utils import heading_angle, horizontal_distance

MODE_DIRECT = 'direct'
MODE_PATH = 'path'
MODE_HOLD = 'hold'


@dataclass
class PathState:
    """Per-agent following state, created by ``follow`` and mutated every tick."""
    target_id: str
    path: List[np.ndarray] = field(default_factory=list)
    box_path: List[int] = field(default_factory=list)
    waypoint_index: int = 0
    repath_timer: float = 0.0


@dataclass(frozen=True)
class MovementIntent:
    """What the agent wants to do this tick; ``facing`` is None when holding."""
    mode: str
    facing: Optional[float] = None
    speed: float = 0.0
    waypoint: Optional[np.ndarray] = None

    @property
    def is_moving(self) -> bool:
        return self.mode != MODE_HOLD


HOLD = MovementIntent(mode=MODE_HOLD)


class PathFollower(Agent):
    """
    Follower agent bound to a shared room, a collision query service and a target registry.
    """

    def __init__(self, agent_id: str, room: Room, collision: CollisionQueryService,
                 targets: TargetRegistry, config: FollowerConfig,
                 search: str = BREADTH_FIRST, category: CollisionGroup = CollisionGroup.ENEMY):
        super().__init__(agent_id, "follower", config)
        self.room = room
        self.collision = collision
        self.targets = targets
        self.search = search
        self.category = category
        self.eye_offset = np.asarray(config.eye_offset, dtype=float)
        self.state: Optional[PathState] = None
        self.replan_count = 0

    def follow(self, target_id: str) -> PathState:
        """Start following a target; the first blocked tick plans a path immediately."""
        self.state = PathState(target_id=target_id, repath_timer=self.config.repath_interval)
        self.logger.info(f"Following target {target_id}")
        return self.state

    def stop(self) -> None:
        self.state = None

    def update(self, position: Sequence[float], dt: float) -> MovementIntent:
        """
        Advance the following state machine by one step.

        Args:
            position: Agent position in world space ``(x, y, z)``
            dt: Fixed simulation step

        Returns:
            The movement intent for this tick.
        """
        state = self.state
        if state is None:
            return HOLD

        state.repath_timer += dt

        target = self.targets.position(state.target_id)
        if target is None:
            self.logger.debug(f"Target {state.target_id} no longer exists, holding")
            return HOLD

        origin = np.asarray(position, dtype=float) + self.eye_offset
        mask = CollisionGroup.ALL ^ (self.category | self.targets.category(state.target_id))
        hit = self.collision.cast_ray(origin, target, mask)
        distance_to_target = float(np.linalg.norm(target - origin))

        if hit.distance >= distance_to_target:
            return self._steer(origin, target, MODE_DIRECT)

        if state.repath_timer >= self.config.repath_interval:
            state.repath_timer -= self.config.repath_interval
            self._repath(state, origin, target)

        if state.path and state.waypoint_index < len(state.path):
            waypoint = state.path[state.waypoint_index]
            if horizontal_distance(origin, waypoint) <= self.config.waypoint_radius:
                state.waypoint_index += 1
            return self._steer(origin, waypoint, MODE_PATH)

        return HOLD

    def _repath(self, state: PathState, origin: np.ndarray, target: np.ndarray) -> None:
        start = self.room.box_for_coordinate(origin[0], origin[2])
        finish = self.room.box_for_coordinate(target[0], target[2])
        if start is None or finish is None:
            self.logger.debug(f"Box lookup failed (start={start}, finish={finish}), keeping current path")
            return

        self.replan_count += 1
        box_path = self.room.find_path(start, finish, self.search) or []
        state.box_path = box_path
        state.path = self.room.waypoints(box_path)
        state.waypoint_index = 0
        if box_path:
            self.logger.debug(f"Planned path through boxes {box_path}")
        else:
            self.logger.debug(f"Box {finish} unreachable from box {start}, holding")

    def _steer(self, origin: np.ndarray, point: np.ndarray, mode: str) -> MovementIntent:
        return MovementIntent(
            mode=mode,
            facing=heading_angle(point - origin),
            speed=self.config.speed,
            waypoint=np.array(point, dtype=float),
        )
