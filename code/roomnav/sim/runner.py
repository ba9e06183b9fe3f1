"""
Fixed-timestep chase simulation.

Builds rooms from configuration and ticks every follower sequentially against a
shared, immutable room. Agents are kinematic: their movement intent is integrated
directly, without a physics engine.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from ..agents import MovementIntent, PathFollower, TargetRegistry
from ..cfg import GenerationConfig, RoomConfig
from ..core.collision import CollisionGroup, CollisionQueryService, WallRayCaster
from ..core.world import Room, RoomGenerator, build_room
from ..utils.math_utils import forward_vector


def build_room_from_config(generation: GenerationConfig, on_step=None) -> Room:
    """Generate boxes from a seed and build the room."""
    generator = RoomGenerator(generation.seed)
    boxes = generator.generate(
        generation.minimum_area,
        generation.min_box_size,
        generation.max_box_size,
        on_step=on_step,
    )
    return build_room(boxes)


@dataclass
class KinematicBody:
    position: np.ndarray
    facing: float = 0.0


class ChaseSimulation:
    """
    This class owns the target registry, the followers and their kinematic bodies.
    """
    def __init__(self, room: Room, config: RoomConfig, collision: Optional[CollisionQueryService] = None):
        self.room = room
        self.config = config
        self.collision = collision if collision is not None else WallRayCaster(room)
        self.targets = TargetRegistry()
        self.followers: Dict[str, PathFollower] = {}
        self.bodies: Dict[str, KinematicBody] = {}
        self.tick = 0
        self.time = 0.0
        self.logger = logging.getLogger(self.__class__.__name__)

    def add_target(self, target_id: str, position: Sequence[float],
                   category: CollisionGroup = CollisionGroup.PLAYER) -> None:
        self.targets.register(target_id, position, category)

    def move_target(self, target_id: str, position: Sequence[float]) -> None:
        self.targets.move(target_id, position)

    def remove_target(self, target_id: str) -> None:
        self.targets.remove(target_id)

    def add_follower(self, agent_id: str, position: Sequence[float], target_id: str) -> PathFollower:
        """Create a follower at ``position`` chasing ``target_id``."""
        if agent_id in self.followers:
            raise ValueError(f"Agent {agent_id} already exists")
        follower = PathFollower(
            agent_id, self.room, self.collision, self.targets,
            self.config.follower, search=self.config.navigation.search,
        )
        follower.follow(target_id)
        self.followers[agent_id] = follower
        self.bodies[agent_id] = KinematicBody(position=np.asarray(position, dtype=float).copy())
        return follower

    def remove_follower(self, agent_id: str) -> None:
        self.followers.pop(agent_id, None)
        self.bodies.pop(agent_id, None)

    def step(self, dt: Optional[float] = None) -> Dict[str, MovementIntent]:
        """Tick every follower once, in insertion order, and integrate their movement."""
        dt = self.config.simulation.dt if dt is None else dt
        intents = {}
        for agent_id, follower in self.followers.items():
            body = self.bodies[agent_id]
            intent = follower.update(body.position, dt)
            if intent.is_moving:
                body.facing = intent.facing
                body.position = body.position + forward_vector(intent.facing) * intent.speed * dt
            intents[agent_id] = intent
        self.tick += 1
        self.time += dt
        return intents

    def run(self, ticks: Optional[int] = None, dt: Optional[float] = None) -> List[Dict[str, Any]]:
        """
        Run the simulation and record one trajectory row per agent per tick.

        Returns:
            Rows with tick, time, agent id, position, mode and waypoint index.
        """
        ticks = self.config.simulation.ticks if ticks is None else ticks
        rows = []
        for _ in range(ticks):
            intents = self.step(dt)
            for agent_id, intent in intents.items():
                body = self.bodies[agent_id]
                state = self.followers[agent_id].state
                rows.append({
                    'tick': self.tick,
                    'time': self.time,
                    'agent_id': agent_id,
                    'x': float(body.position[0]),
                    'y': float(body.position[1]),
                    'z': float(body.position[2]),
                    'mode': intent.mode,
                    'box': self.room.box_for_coordinate(body.position[0], body.position[2]),
                    'waypoint_index': state.waypoint_index if state is not None else None,
                })
        self.logger.info(f"Ran {ticks} ticks with {len(self.followers)} followers")
        return rows
