import os
import sys

import pytest

# Ensure the package directory is importable without an install
CODE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if CODE_DIR not in sys.path:
    sys.path.insert(0, CODE_DIR)

from roomnav.cfg import RoomConfig  # noqa: E402
from roomnav.core.collision import RayHit  # noqa: E402
from roomnav.core.world import Box, build_room, generate_boxes  # noqa: E402

SURVEY_SEEDS = list(range(12))


class BlockedView:
    """Collision stub that reports a wall right in front of the ray origin."""
    def __init__(self):
        self.calls = []

    def cast_ray(self, origin, target, mask):
        self.calls.append((origin, target, mask))
        return RayHit(hit=True, distance=0.0, hit_id='wall')


@pytest.fixture
def config():
    return RoomConfig.from_params()


@pytest.fixture
def blocked_view():
    return BlockedView()


@pytest.fixture
def flush_pair_room():
    """Two 10x10 boxes side by side sharing the full edge at x=10."""
    return build_room([Box(0, 10, 0, 10), Box(10, 20, 0, 10)])


@pytest.fixture
def l_room():
    """Three boxes in an L: 0 -> 1 to the right, 1 -> 2 above."""
    return build_room([Box(0, 10, 0, 10), Box(10, 20, 0, 10), Box(10, 20, 10, 20)])


@pytest.fixture
def corner_room():
    """Two boxes touching only at a corner; no opening between them."""
    return build_room([Box(0, 10, 0, 10), Box(10, 20, 10, 20)])


@pytest.fixture(scope="session")
def generated_rooms():
    return {seed: build_room(generate_boxes(seed, 2500, 5, 15)) for seed in SURVEY_SEEDS}
