"""Removal of selected particles and of isolated stray particles."""

from __future__ import annotations

from galaxysim.particle import ParticlePhysics, ParticleRendering

_SQUARED_DISTANCE_THRESHOLD = 10.0 * 10.0
_X_BREAK_THRESHOLD = 2.4
_SPH_RADIUS_MULTIPLIER = 6.0
_MIN_NEIGHBORS = 5


def _check_aligned(physics: list[ParticlePhysics], rendering: list[ParticleRendering]) -> None:
    if len(physics) != len(rendering):
        raise ValueError(
            f"physics and rendering lists differ in length: {len(physics)} != {len(rendering)}"
        )


def delete_selected(physics: list[ParticlePhysics], rendering: list[ParticleRendering]) -> int:
    """Remove every selected particle in place and return how many were removed.

    Each removed particle is swapped with the last one before being dropped,
    so the order of the remaining particles may change.
    """
    _check_aligned(physics, rendering)
    removed = 0
    for i in reversed(range(len(physics))):
        if not rendering[i].is_selected:
            continue
        physics[i], physics[-1] = physics[-1], physics[i]
        rendering[i], rendering[-1] = rendering[-1], rendering[i]
        physics.pop()
        rendering.pop()
        removed += 1
    return removed


def delete_strays(
    physics: list[ParticlePhysics], rendering: list[ParticleRendering], sph_enabled: bool
) -> int:
    """Remove non-solid particles with fewer than five close neighbours.

    The scan assumes the particles are ordered along x: for each particle it
    stops at the first later particle further away in x than the break
    threshold. Returns the number of particles removed.
    """
    _check_aligned(physics, rendering)
    multiplier = _SPH_RADIUS_MULTIPLIER if sph_enabled else 1.0
    break_x = _X_BREAK_THRESHOLD * multiplier
    radius_sq = _SQUARED_DISTANCE_THRESHOLD * multiplier

    count = len(physics)
    neighbors = [0] * count
    for i, particle in enumerate(physics):
        pos = particle.pos
        for j in range(i + 1, count):
            other = physics[j].pos
            if abs(other.x - pos.x) > break_x:
                break
            d = pos - other
            if d.dot(d) < radius_sq:
                neighbors[i] += 1
                neighbors[j] += 1

    keep = [
        k for k in range(count)
        if not (neighbors[k] < _MIN_NEIGHBORS and not rendering[k].is_solid)
    ]
    physics[:] = [physics[k] for k in keep]
    rendering[:] = [rendering[k] for k in keep]
    return count - len(keep)