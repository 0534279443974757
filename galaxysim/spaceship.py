"""A steerable group of selected particles that can emit exhaust gas."""

from __future__ import annotations

import enum
import random
from collections.abc import Iterable
from dataclasses import dataclass

from galaxysim.materials import material_by_label
from galaxysim.particle import BASE_MASS, ParticlePhysics, ParticleRendering, Vec2

_EXHAUST_DISTANCE = 3.3
_EXHAUST_SPEED = 10.0
_EXHAUST_JITTER = 2.0
_EXHAUST_SIZE_RATIO = 0.7
_EXHAUST_LIFE_SPAN = 3.0
_EXHAUST_TEMPERATURE = 440.0
_IMMORTAL = -1.0


class Thrust(enum.Enum):
    """Thrust directions, in screen coordinates (y grows downwards)."""

    UP = (0.0, -1.0)
    RIGHT = (1.0, 0.0)
    DOWN = (0.0, 1.0)
    LEFT = (-1.0, 0.0)

    @property
    def direction(self) -> Vec2:
        return Vec2(*self.value)


@dataclass
class ParticleSpaceship:
    """Accelerates selected particles and spawns short-lived water-vapour exhaust."""

    gas_multiplier: int = 2
    acceleration: float = 8.0
    is_ship_enabled: bool = False

    def update(
        self,
        physics: list[ParticlePhysics],
        rendering: list[ParticleRendering],
        dt: float,
        thrusts: Iterable[Thrust],
        gas_enabled: bool,
        rng: random.Random | None = None,
    ) -> bool:
        """Age and expire exhaust, then apply the requested thrusts.

        Returns whether the ship is thrusting this frame.
        """
        rng = rng if rng is not None else random.Random()
        active = set(thrusts)

        for r in rendering:
            if r.life_span > 0.0:
                r.life_span -= dt

        alive = [
            k for k, r in enumerate(rendering)
            if not (r.life_span <= 0.0 and r.life_span != _IMMORTAL)
        ]
        physics[:] = [physics[k] for k in alive]
        rendering[:] = [rendering[k] for k in alive]

        if not physics:
            self.is_ship_enabled = False
            return False

        self.is_ship_enabled = bool(active)
        if not self.is_ship_enabled:
            return False

        rock = material_by_label("rock")
        water = material_by_label("water")
        ordered = [t for t in Thrust if t in active]

        for i in range(len(physics)):
            if not rendering[i].is_selected:
                continue
            ship = physics[i]
            ship.mass = BASE_MASS * rock.mass_mult
            ship.sph_mass = rock.mass_mult

            for thrust in ordered:
                direction = thrust.direction
                ship.acc = ship.acc + direction * self.acceleration
                if not gas_enabled:
                    continue
                side = Vec2(abs(direction.y), abs(direction.x))
                for _ in range(self.gas_multiplier):
                    jitter = side * (2.0 * _EXHAUST_JITTER * rng.random() - _EXHAUST_JITTER)
                    gas_p = ParticlePhysics.spawn(
                        ship.pos - direction * _EXHAUST_DISTANCE + jitter,
                        ship.vel - direction * _EXHAUST_SPEED + jitter,
                        BASE_MASS * water.mass_mult,
                        water.rest_dens,
                        water.stiff,
                        water.visc,
                        water.cohesion,
                    )
                    gas_p.temp = _EXHAUST_TEMPERATURE
                    gas_r = ParticleRendering.spawn(
                        water.color,
                        rendering[i].size * _EXHAUST_SIZE_RATIO,
                        False, False, False, True, True, False, True,
                        _EXHAUST_LIFE_SPAN,
                        water.id,
                    )
                    gas_r.sph_color = water.color
                    physics.append(gas_p)
                    rendering.append(gas_r)

        return True