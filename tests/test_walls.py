import math

import pytest

from galaxysim.particle import Color, Vec2
from galaxysim.walls import (
    LightRay,
    Wall,
    color_strength,
    next_wall_id,
    rotate_vec2,
)


def test_color_strength_white_is_one():
    assert color_strength(Color(255, 255, 255, 255)) == pytest.approx(1.0)


def test_color_strength_black_is_zero():
    assert color_strength(Color(0, 0, 0, 255)) == 0.0


def test_color_strength_uses_brightest_channel():
    assert color_strength(Color(200, 100, 50, 255)) == pytest.approx(200 / 255)


def test_color_strength_transparent_is_zero():
    assert color_strength(Color(255, 255, 255, 0)) == 0.0


def test_wall_computes_color_values():
    wall = Wall(Vec2(0, 0), Vec2(1, 0), base_color=Color(100, 20, 30, 255))
    assert wall.base_color_val == pytest.approx(color_strength(Color(100, 20, 30, 255)))
    assert wall.specular_color_val == pytest.approx(1.0)
    assert wall.is_being_spawned is True
    assert wall.is_selected is False


def test_wall_ids_are_unique_and_increasing():
    first = next_wall_id()
    a = Wall(Vec2(0, 0), Vec2(1, 0))
    b = Wall(Vec2(0, 0), Vec2(1, 0))
    assert first < a.id < b.id


def test_rotate_quarter_turn():
    r = rotate_vec2(Vec2(1, 0), math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


def test_rotate_zero_is_identity():
    v = Vec2(3.0, -2.0)
    assert rotate_vec2(v, 0.0) == v


@pytest.mark.parametrize("angle", [0.3, 1.7, -2.2, 5.0])
def test_rotate_preserves_length(angle):
    v = Vec2(3.0, 4.0)
    assert rotate_vec2(v, angle).length() == pytest.approx(v.length())


def test_rotate_round_trip():
    v = Vec2(1.5, -0.5)
    back = rotate_vec2(rotate_vec2(v, 0.8), -0.8)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_light_ray_defaults():
    ray = LightRay(Vec2(0, 0), Vec2(1, 0))
    assert ray.max_length == 100000.0
    assert ray.length == 10000.0
    assert ray.medium_ior_stack == [1.0]
    assert ray.has_hit is False


def test_light_ray_stacks_are_independent():
    a = LightRay(Vec2(0, 0), Vec2(1, 0))
    b = LightRay(Vec2(0, 0), Vec2(1, 0))
    a.medium_ior_stack.append(1.5)
    assert b.medium_ior_stack == [1.0]


def test_light_ray_end():
    ray = LightRay(Vec2(1, 2), Vec2(0, 1), length=5.0)
    assert ray.end == Vec2(1, 7)