import math

import numpy as np
import pytest

from roomnav.agents import MODE_DIRECT, MODE_HOLD, MODE_PATH, PathFollower, TargetRegistry
from roomnav.cfg import FollowerConfig
from roomnav.core.collision import CollisionGroup, WallRayCaster
from roomnav.core.world import Box, DEPTH_FIRST, Room, build_room


def _follower_config(repath_interval=100.0, waypoint_radius=1.0, speed=5.0):
    return FollowerConfig(repath_interval=repath_interval, waypoint_radius=waypoint_radius,
                          speed=speed, eye_offset=[0, 1, 0])


def _make_follower(room, collision, target_position, **config_kwargs):
    targets = TargetRegistry()
    targets.register('player', target_position)
    follower = PathFollower('enemy', room, collision, targets, _follower_config(**config_kwargs))
    follower.follow('player')
    return follower, targets


def test_clear_view_steers_directly_and_never_searches(monkeypatch):
    room = build_room([Box(0, 40, 0, 40)])
    searches = []
    monkeypatch.setattr(Room, 'find_path', lambda self, *args: searches.append(args))

    follower, _ = _make_follower(room, WallRayCaster(room), (15, 0, 20))
    for _ in range(10):
        intent = follower.update((5, 0, 20), 1 / 60)
        assert intent.mode == MODE_DIRECT
        assert intent.facing == pytest.approx(math.pi / 2)
        assert intent.speed == 5.0

    assert searches == []
    assert follower.replan_count == 0
    assert follower.state.path == []


def test_blocked_view_walks_the_box_path(l_room, blocked_view):
    follower, _ = _make_follower(l_room, blocked_view, (15, 0, 15))

    intent = follower.update((5, 0, 5), 1 / 60)
    assert intent.mode == MODE_PATH
    assert follower.state.box_path == [0, 1, 2]
    expected = [[5, 0, 5], [15, 0, 5], [15, 0, 15]]
    for waypoint, center in zip(follower.state.path, expected):
        np.testing.assert_allclose(waypoint, center)
    assert follower.state.waypoint_index == 1

    intent = follower.update((8, 0, 5), 1 / 60)
    assert intent.mode == MODE_PATH
    assert intent.facing == pytest.approx(math.pi / 2)
    assert follower.state.waypoint_index == 1

    follower.update((15, 0, 5), 1 / 60)
    assert follower.state.waypoint_index == 2
    intent = follower.update((15, 0, 10), 1 / 60)
    assert intent.facing == pytest.approx(0.0)
    follower.update((15, 0, 15), 1 / 60)
    assert follower.state.waypoint_index == 3

    assert follower.update((15, 0, 15), 1 / 60).mode == MODE_HOLD
    assert follower.replan_count == 1


def test_first_blocked_tick_plans_immediately(l_room, blocked_view):
    follower, _ = _make_follower(l_room, blocked_view, (15, 0, 15))
    assert follower.state.repath_timer == follower.config.repath_interval
    follower.update((5, 0, 5), 0.01)
    assert follower.replan_count == 1
    assert follower.state.repath_timer == pytest.approx(0.01)


def test_repath_timer_keeps_the_remainder(l_room, blocked_view):
    follower, _ = _make_follower(l_room, blocked_view, (15, 0, 15), repath_interval=0.5)
    follower.state.repath_timer = 0.5

    follower.update((5, 0, 5), 0.2)
    assert follower.replan_count == 1
    assert follower.state.repath_timer == pytest.approx(0.2)
    follower.update((5, 0, 5), 0.2)
    assert follower.state.repath_timer == pytest.approx(0.4)
    assert follower.replan_count == 1
    follower.update((5, 0, 5), 0.2)
    assert follower.state.repath_timer == pytest.approx(0.1)
    assert follower.replan_count == 2


def test_ray_skips_own_and_target_categories(l_room, blocked_view):
    follower, _ = _make_follower(l_room, blocked_view, (15, 0, 15))
    follower.update((5, 0, 5), 0.1)
    origin, target, mask = blocked_view.calls[0]
    np.testing.assert_allclose(origin, [5, 1, 5])
    np.testing.assert_allclose(target, [15, 0, 15])
    assert mask == CollisionGroup.DEFAULT | CollisionGroup.WALL | CollisionGroup.HURTBOX


def test_removed_target_holds(l_room, blocked_view):
    follower, targets = _make_follower(l_room, blocked_view, (15, 0, 15))
    targets.remove('player')
    assert follower.update((5, 0, 5), 0.1).mode == MODE_HOLD
    assert blocked_view.calls == []


def test_not_following_holds(l_room, blocked_view):
    follower, _ = _make_follower(l_room, blocked_view, (15, 0, 15))
    follower.stop()
    intent = follower.update((5, 0, 5), 0.1)
    assert intent.mode == MODE_HOLD
    assert not intent.is_moving
    assert intent.facing is None


def test_failed_box_lookup_keeps_the_current_path(l_room, blocked_view):
    follower, targets = _make_follower(l_room, blocked_view, (15, 0, 15), repath_interval=0.5)
    follower.update((5, 0, 5), 0.1)
    assert follower.state.box_path == [0, 1, 2]

    # Agent stands in the gap outside every box
    follower.state.repath_timer = 0.5
    intent = follower.update((5, 0, 15), 0.1)
    assert follower.replan_count == 1
    assert follower.state.box_path == [0, 1, 2]
    assert intent.mode == MODE_PATH
    assert follower.state.repath_timer == pytest.approx(0.1)


def test_unreachable_target_holds(corner_room, blocked_view):
    follower, _ = _make_follower(corner_room, blocked_view, (15, 0, 15))
    intent = follower.update((5, 0, 5), 0.1)
    assert follower.replan_count == 1
    assert follower.state.path == []
    assert intent.mode == MODE_HOLD


def test_moving_target_is_read_every_tick(l_room):
    follower, targets = _make_follower(l_room, WallRayCaster(l_room), (15, 0, 5))
    assert follower.update((5, 0, 5), 0.1).mode == MODE_DIRECT
    targets.move('player', (15, 0, 15))
    assert follower.update((5, 0, 5), 0.1).mode == MODE_PATH
    with pytest.raises(KeyError):
        targets.move('ghost', (0, 0, 0))


def test_depth_first_follower_still_reaches_the_target(l_room, blocked_view):
    targets = TargetRegistry()
    targets.register('player', (15, 0, 15))
    follower = PathFollower('enemy', l_room, blocked_view, targets, _follower_config(), search=DEPTH_FIRST)
    follower.follow('player')
    follower.update((5, 0, 5), 0.1)
    assert follower.state.box_path == [0, 1, 2]


def test_registry_returns_copies():
    targets = TargetRegistry()
    targets.register('player', [1, 2, 3])
    position = targets.position('player')
    position[0] = 99
    np.testing.assert_allclose(targets.position('player'), [1, 2, 3])
    assert targets.category('player') == CollisionGroup.PLAYER
    assert 'player' in targets
    assert targets.position('ghost') is None
