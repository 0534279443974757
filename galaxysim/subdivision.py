"""Splitting particles into four smaller particles."""

from __future__ import annotations

import random
from dataclasses import dataclass

from galaxysim.particle import ParticlePhysics, ParticleRendering, Vec2

_QUADRANTS = ((-1, -1), (1, -1), (-1, 1), (1, 1))
_OFFSET_SCALE = 0.25


class SubdivisionNeedsConfirmation(RuntimeError):
    """Raised when subdividing would exceed the particle threshold without confirmation."""


@dataclass
class ParticleSubdivision:
    """Replaces particles by four quarter-mass particles arranged around them."""

    particles_threshold: int = 80000
    warning_text: str = "Subdividing further might slow down the program a lot"

    def subdivide(
        self,
        physics: list[ParticlePhysics],
        rendering: list[ParticleRendering],
        texture_half_size: float,
        selected_only: bool = False,
        confirmed: bool = False,
        rng: random.Random | None = None,
    ) -> int:
        """Subdivide every subdivisible particle (or only the selected ones) in place.

        Raises SubdivisionNeedsConfirmation when the particle count has reached
        the threshold and ``confirmed`` is false. Returns the number of
        particles that were split.
        """
        if len(physics) != len(rendering):
            raise ValueError(
                f"physics and rendering lists differ in length: {len(physics)} != {len(rendering)}"
            )
        if len(physics) >= self.particles_threshold and not confirmed:
            raise SubdivisionNeedsConfirmation(self.warning_text)

        rng = rng if rng is not None else random.Random()
        split = 0

        for i in reversed(range(len(physics))):
            parent_p = physics[i]
            parent_r = rendering[i]
            if not parent_r.can_be_subdivided:
                continue
            if selected_only and not parent_r.is_selected:
                continue

            half_offset = parent_r.previous_size / 2.0 * texture_half_size * _OFFSET_SCALE
            half_size = parent_r.previous_size / 2.0

            for mx, my in _QUADRANTS:
                offset = Vec2(
                    mx * half_offset + rng.randint(-1, 1),
                    my * half_offset + rng.randint(-1, 1),
                )
                child_p = ParticlePhysics.spawn(
                    parent_p.pos + offset,
                    parent_p.vel,
                    parent_p.mass / 4.0,
                    parent_p.rest_dens,
                    parent_p.stiff,
                    parent_p.visc,
                    parent_p.cohesion,
                )
                child_p.temp = parent_p.temp

                child_r = ParticleRendering.spawn(
                    parent_r.color,
                    half_size,
                    parent_r.unique_color,
                    parent_r.is_selected,
                    parent_r.is_solid,
                    parent_r.can_be_subdivided,
                    parent_r.can_be_resized,
                    parent_r.is_dark_matter,
                    parent_r.is_sph,
                    parent_r.life_span,
                    parent_r.sph_label,
                )
                child_r.p_color = parent_r.p_color
                child_r.s_color = parent_r.s_color
                child_r.sph_color = parent_r.sph_color

                physics.append(child_p)
                rendering.append(child_r)

            physics[i] = physics.pop()
            rendering[i] = rendering.pop()
            split += 1

        return split