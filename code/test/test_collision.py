import math

import pytest

from roomnav.core.collision import NO_HIT, CollisionGroup, WallRayCaster
from roomnav.core.world import Box, build_room

WALLS_ONLY = CollisionGroup.ALL ^ (CollisionGroup.ENEMY | CollisionGroup.PLAYER)


@pytest.fixture
def box_room():
    return build_room([Box(0, 10, 0, 10)])


def test_ray_hits_the_nearest_wall(box_room):
    caster = WallRayCaster(box_room)
    hit = caster.cast_ray((5, 1, 5), (5, 1, 20), WALLS_ONLY)
    assert hit.hit
    assert hit.distance == pytest.approx(5.0)
    assert box_room.sides[hit.hit_id].y0 == 10


def test_ray_inside_a_box_hits_nothing(box_room):
    hit = WallRayCaster(box_room).cast_ray((2, 1, 2), (8, 0, 8), WALLS_ONLY)
    assert not hit.hit
    assert math.isinf(hit.distance)


def test_distance_is_measured_along_the_full_ray(box_room):
    # Vertical drop does not change where the wall is crossed, only the ray length
    hit = WallRayCaster(box_room).cast_ray((5, 4, 5), (5, 0, 8), WALLS_ONLY)
    assert not hit.hit
    hit = WallRayCaster(box_room).cast_ray((5, 0, 5), (5, 0, 15), WALLS_ONLY)
    assert hit.distance == pytest.approx(5.0)


def test_mask_without_walls_ignores_them(box_room):
    mask = CollisionGroup.PLAYER | CollisionGroup.HURTBOX
    assert WallRayCaster(box_room).cast_ray((5, 1, 5), (5, 1, 20), mask) is NO_HIT


def test_zero_length_ray(box_room):
    assert WallRayCaster(box_room).cast_ray((5, 1, 5), (5, 3, 5), WALLS_ONLY) is NO_HIT


def test_ray_parallel_to_a_wall_misses_it(box_room):
    hit = WallRayCaster(box_room).cast_ray((0, 1, -5), (0, 1, -1), WALLS_ONLY)
    assert not hit.hit


def test_openings_let_rays_through(flush_pair_room):
    caster = WallRayCaster(flush_pair_room)
    assert not caster.cast_ray((5, 1, 5), (15, 1, 5), WALLS_ONLY).hit


def test_corner_blocks_line_of_sight(l_room):
    caster = WallRayCaster(l_room)
    hit = caster.cast_ray((5, 1, 5), (15, 0, 15), WALLS_ONLY)
    assert hit.hit
    assert hit.distance < math.dist((5, 1, 5), (15, 0, 15))


def test_follower_mask_keeps_walls():
    mask = CollisionGroup.ALL ^ (CollisionGroup.ENEMY | CollisionGroup.PLAYER)
    assert mask == CollisionGroup.DEFAULT | CollisionGroup.WALL | CollisionGroup.HURTBOX
