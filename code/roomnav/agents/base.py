"""
Base agent class for room navigation agents.

Provides common functionality for agents ticked by the simulation loop.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..cfg import FollowerConfig


class Agent(ABC):
    """Base class for all ticked agents"""

    def __init__(self, agent_id: str, agent_type: str, config: FollowerConfig):
        self.agent_id = agent_id
        self.agent_type = agent_type
        self.config = config
        self.logger = logging.getLogger(f"{self.__class__.__name__}[{agent_id}]")
        self.logger.debug(f"Initialized {self.__class__.__name__} as {agent_type}")

    @abstractmethod
    def update(self, *args, **kwargs) -> Any:
        """Advance the agent by one fixed simulation step"""
        pass
