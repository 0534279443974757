import random

import pytest

from galaxysim.particle import BASE_MASS, Vec2
from galaxysim.spawning import DARK_MATTER_MASS, HEAVY_PARTICLE_INIT_MASS, ParticlesSpawning

CENTER = Vec2(10.0, -5.0)


@pytest.fixture
def spawner():
    return ParticlesSpawning(particle_amount_multiplier=0.01, dm_amount_multiplier=0.01)


def test_heavy_particle(spawner):
    physics, rendering = spawner.heavy_particle(CENTER, Vec2(1.0, 2.0))
    assert len(physics) == 1 and len(rendering) == 1
    assert physics[0].mass == HEAVY_PARTICLE_INIT_MASS
    assert physics[0].vel == Vec2(1.0, 2.0)
    assert rendering[0].is_solid and rendering[0].unique_color
    assert rendering[0].size == 0.3


def test_heavy_particle_weight_multiplier():
    spawner = ParticlesSpawning(heavy_particle_weight_multiplier=2.0)
    physics, _ = spawner.heavy_particle(CENTER, Vec2())
    assert physics[0].mass == HEAVY_PARTICLE_INIT_MASS * 2.0


def test_big_galaxy_counts(spawner):
    physics, rendering = spawner.big_galaxy(CENTER, Vec2(), True, random.Random(1))
    assert len(physics) == len(rendering) == 400 + 120
    assert sum(r.is_dark_matter for r in rendering) == 120


def test_small_galaxy_without_dark_matter(spawner):
    physics, rendering = spawner.small_galaxy(CENTER, Vec2(), False, random.Random(2))
    assert len(physics) == 120
    assert not any(r.is_dark_matter for r in rendering)


def test_small_galaxy_dark_matter_count(spawner):
    _, rendering = spawner.small_galaxy(CENTER, Vec2(), True, random.Random(2))
    assert sum(r.is_dark_matter for r in rendering) == 36


def test_galaxy_disk_rotates(spawner):
    physics, rendering = spawner.big_galaxy(CENTER, Vec2(), False, random.Random(3))
    for p in physics:
        d = p.pos - CENTER
        assert 0.0099 <= d.length() <= 800.0 + 1e-6
        assert abs(p.vel.dot(d)) <= 1e-6 * d.length() * p.vel.length() + 1e-9


def test_galaxy_drift_added(spawner):
    still, _ = spawner.small_galaxy(CENTER, Vec2(), False, random.Random(4))
    moving, _ = spawner.small_galaxy(CENTER, Vec2(10.0, 0.0), False, random.Random(4))
    for a, b in zip(still, moving):
        assert b.vel.x - a.vel.x == pytest.approx(3.0)
        assert b.vel.y == pytest.approx(a.vel.y)


def test_masses(spawner):
    physics, rendering = spawner.big_galaxy(CENTER, Vec2(), True, random.Random(5))
    for p, r in zip(physics, rendering):
        expected = DARK_MATTER_MASS / 0.01 if r.is_dark_matter else BASE_MASS / 0.01
        assert p.mass == pytest.approx(expected)


def test_masses_without_multiplier():
    spawner = ParticlesSpawning(particle_amount_multiplier=0.01, mass_multiplier_enabled=False)
    physics, _ = spawner.star(CENTER, Vec2(), random.Random(6))
    assert all(p.mass == BASE_MASS for p in physics)


def test_star_is_compact(spawner):
    physics, rendering = spawner.star(CENTER, Vec2(2.0, 4.0), random.Random(7))
    assert len(physics) == 100
    for p in physics:
        assert 0.1 - 1e-9 <= (p.pos - CENTER).length() <= 5.1 + 1e-9
        assert p.vel.x == pytest.approx(0.6)
        assert p.vel.y == pytest.approx(1.2)
    assert all(r.is_sph and r.can_be_subdivided for r in rendering)


def test_big_bang_moves_radially(spawner):
    physics, rendering = spawner.big_bang(CENTER, True, random.Random(8))
    assert len(physics) == 520
    for p in physics:
        d = p.pos - CENTER
        assert abs(p.vel.cross(d)) <= 1e-6 * (1.0 + d.length() * p.vel.length())
        assert p.vel.dot(d) >= 0.0


def test_dark_matter_rendering_flags(spawner):
    _, rendering = spawner.big_bang(CENTER, True, random.Random(9))
    dark = [r for r in rendering if r.is_dark_matter]
    assert dark
    assert all(r.unique_color and not r.is_sph and r.color.a == 0 for r in dark)


def test_deterministic_with_seed(spawner):
    a, _ = spawner.big_galaxy(CENTER, Vec2(), True, random.Random(10))
    b, _ = spawner.big_galaxy(CENTER, Vec2(), True, random.Random(10))
    assert [p.pos for p in a] == [p.pos for p in b]
    assert [p.vel for p in a] == [p.vel for p in b]