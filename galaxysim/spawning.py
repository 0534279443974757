"""Spawning of heavy bodies, galaxies, stars and big bangs."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from galaxysim.particle import BASE_MASS, Color, ParticlePhysics, ParticleRendering, Vec2

DARK_MATTER_MASS = 141_600_000_000.0
HEAVY_PARTICLE_INIT_MASS = 300_000_000_000_000.0

_DRIFT_FACTOR = 0.3
_APPROX_PI = 3.14159

_VISIBLE_COLOR = Color(128, 128, 128, 100)
_DARK_COLOR = Color(128, 128, 128, 0)
_HEAVY_COLOR = Color(255, 255, 255, 255)
_SMALL_SIZE = 0.125
_HEAVY_SIZE = 0.3

_DM_OUTER_RADIUS = 2000.0
_DM_CORE_RADIUS = 3.5
_DM_VEL_LOW = -30
_DM_VEL_HIGH = 29

_BANG_JITTER = 15
_BANG_SPEED = 300.0
_BANG_SPEED_SCALE = 35.0

Batch = tuple[list[ParticlePhysics], list[ParticleRendering]]


def _default_material(pos: Vec2, vel: Vec2, mass: float, rest_dens: float = 0.008) -> ParticlePhysics:
    return ParticlePhysics.spawn(pos, vel, mass, rest_dens, 1.0, 1.0, 1.0)


def _visible_rendering() -> ParticleRendering:
    return ParticleRendering.spawn(
        _VISIBLE_COLOR, _SMALL_SIZE,
        False, False, False, True, True, False, True,
        -1.0, 0,
    )


def _dark_rendering() -> ParticleRendering:
    return ParticleRendering.spawn(
        _DARK_COLOR, _SMALL_SIZE,
        True, False, False, False, True, True, False,
        -1.0, 0,
    )


@dataclass
class ParticlesSpawning:
    """Creates particle batches; every method returns new (physics, rendering) lists."""

    heavy_particle_weight_multiplier: float = 1.0
    predict_path_length: int = 1000
    particle_amount_multiplier: float = 1.0
    dm_amount_multiplier: float = 1.0
    correction_substeps: int = 24
    enable_path_prediction: bool = False
    is_spawning_allowed: bool = True
    mass_multiplier_enabled: bool = True
    heavy_particle_init_mass: float = HEAVY_PARTICLE_INIT_MASS

    def _visible_mass(self) -> float:
        if self.mass_multiplier_enabled:
            return BASE_MASS / self.particle_amount_multiplier
        return BASE_MASS

    def _dark_mass(self) -> float:
        if self.mass_multiplier_enabled:
            return DARK_MATTER_MASS / self.dm_amount_multiplier
        return DARK_MATTER_MASS

    def heavy_particle(self, pos: Vec2, vel: Vec2) -> Batch:
        """A single massive, solid, uniquely coloured body."""
        p = ParticlePhysics.spawn(
            pos, vel,
            self.heavy_particle_init_mass * self.heavy_particle_weight_multiplier,
            0.008, 1.0, 1.0, 1.0,
        )
        r = ParticleRendering.spawn(
            _HEAVY_COLOR, _HEAVY_SIZE,
            True, False, True, False, False, False, False,
            -1.0, 0,
        )
        return [p], [r]

    def _disk(self, center, drift, rng, count, scale_length, max_radius, speed_constant, batch) -> None:
        mass = self._visible_mass()
        drift_vel = drift * _DRIFT_FACTOR
        physics, rendering = batch
        for _ in range(count):
            normalized = rng.random()
            angle = rng.random() * 2.0 * math.pi
            radius = -scale_length * math.log(1.0 - normalized)
            radius = max(min(radius, max_radius), 0.01)
            pos = center + Vec2(radius * math.cos(angle), radius * math.sin(angle))
            d = pos - center
            tangent = Vec2(d.y, -d.x)
            tangent = tangent / tangent.length()
            speed = 10.5 * math.sqrt(speed_constant / (radius + 54.7))
            physics.append(_default_material(pos, tangent * speed + drift_vel, mass))
            rendering.append(_visible_rendering())

    def _halo(self, center, drift, rng, count, batch) -> None:
        mass = self._dark_mass()
        drift_vel = drift * _DRIFT_FACTOR
        growth = 1.0 + (_DM_OUTER_RADIUS / _DM_CORE_RADIUS) ** 2
        physics, rendering = batch
        for _ in range(count):
            normalized = rng.random()
            radius = _DM_CORE_RADIUS * math.sqrt(growth ** normalized - 1.0)
            angle = rng.random() * 2.0 * math.pi
            pos = center + Vec2(radius * math.cos(angle), radius * math.sin(angle))
            vel = Vec2(
                float(rng.randint(_DM_VEL_LOW, _DM_VEL_HIGH)),
                float(rng.randint(_DM_VEL_LOW, _DM_VEL_HIGH)),
            )
            physics.append(_default_material(pos, vel + drift_vel, mass))
            rendering.append(_dark_rendering())

    def big_galaxy(self, center: Vec2, drift: Vec2, dark_matter: bool, rng: random.Random | None = None) -> Batch:
        """A large rotating exponential disk, optionally with a dark-matter halo.

        ``drift`` is the slingshot velocity; 30% of it is added to every particle.
        """
        rng = rng if rng is not None else random.Random()
        batch: Batch = ([], [])
        self._disk(center, drift, rng, int(40000 * self.particle_amount_multiplier),
                   90.0, 200.0 + 600.0, 1758.0, batch)
        if dark_matter:
            self._halo(center, drift, rng, int(12000 * self.dm_amount_multiplier), batch)
        return batch

    def small_galaxy(self, center: Vec2, drift: Vec2, dark_matter: bool, rng: random.Random | None = None) -> Batch:
        """A small rotating exponential disk, optionally with a dark-matter halo."""
        rng = rng if rng is not None else random.Random()
        batch: Batch = ([], [])
        self._disk(center, drift, rng, int(12000 * self.particle_amount_multiplier),
                   45.0, 100.0 + 300.0, 505.0, batch)
        if dark_matter:
            self._halo(center, drift, rng, int(3600 * self.dm_amount_multiplier), batch)
        return batch

    def star(self, center: Vec2, drift: Vec2, rng: random.Random | None = None) -> Batch:
        """A compact ball of particles moving with 30% of the drift velocity."""
        rng = rng if rng is not None else random.Random()
        mass = self._visible_mass()
        vel = drift * _DRIFT_FACTOR
        physics: list[ParticlePhysics] = []
        rendering: list[ParticleRendering] = []
        for _ in range(int(10000 * self.particle_amount_multiplier)):
            angle = rng.random() * 2.0 * _APPROX_PI
            distance = math.sqrt(rng.random()) * 5.0 + 0.1
            pos = center + Vec2(math.cos(angle) * distance, math.sin(angle) * distance)
            physics.append(_default_material(pos, vel, mass))
            rendering.append(_visible_rendering())
        return physics, rendering

    def _explosion(self, center, rng, count, mass, make_rendering, batch) -> None:
        physics, rendering = batch
        for _ in range(count):
            angle = rng.random() * 2.0 * _APPROX_PI
            distance = math.sqrt(rng.random()) * 20.0 + 1.0
            offset = Vec2(
                math.cos(angle) * distance + float(rng.randint(-_BANG_JITTER, _BANG_JITTER)),
                math.sin(angle) * distance + float(rng.randint(-_BANG_JITTER, _BANG_JITTER)),
            )
            pos = center + offset
            norm = (pos - center) / distance
            vel = norm * (_BANG_SPEED * (distance / _BANG_SPEED_SCALE))
            physics.append(_default_material(pos, vel, mass))
            rendering.append(make_rendering())

    def big_bang(self, center: Vec2, dark_matter: bool, rng: random.Random | None = None) -> Batch:
        """A cloud of particles flying radially away from ``center``."""
        rng = rng if rng is not None else random.Random()
        batch: Batch = ([], [])
        self._explosion(center, rng, int(40000 * self.particle_amount_multiplier),
                        self._visible_mass(), _visible_rendering, batch)
        if dark_matter:
            self._explosion(center, rng, int(12000 * self.dm_amount_multiplier),
                            self._dark_mass(), _dark_rendering, batch)
        return batch