"""Selecting particles by proximity, cluster membership or box."""

from __future__ import annotations

import sys

from galaxysim.particle import ParticlePhysics, ParticleRendering, Vec2

SELECTION_THRESHOLD_SQ = 100.0
_CLUSTER_DISTANCE_SQ = 10.0 * 10.0
_X_BREAK_THRESHOLD = 2.4
_CLUSTER_MIN_NEIGHBORS = 3


def _distance_sq(a: Vec2, b: Vec2) -> float:
    d = a - b
    return d.dot(d)


def cluster_neighbor_counts(
    physics: list[ParticlePhysics], rendering: list[ParticleRendering]
) -> list[int]:
    """Neighbour counts used to decide cluster membership; dark matter is ignored.

    Particles are assumed to be ordered along x: the scan for a particle stops
    at the first later visible particle further away in x than the break threshold.
    """
    count = len(physics)
    neighbors = [0] * count
    for i, particle in enumerate(physics):
        if rendering[i].is_dark_matter:
            continue
        pos = particle.pos
        for j in range(i + 1, count):
            if rendering[j].is_dark_matter:
                continue
            other = physics[j].pos
            if abs(other.x - pos.x) > _X_BREAK_THRESHOLD:
                break
            if _distance_sq(pos, other) < _CLUSTER_DISTANCE_SQ:
                neighbors[i] += 1
                neighbors[j] += 1
    return neighbors


def select_cluster(
    physics: list[ParticlePhysics],
    rendering: list[ParticleRendering],
    point: Vec2,
    additive: bool,
) -> None:
    """Select clustered particles near ``point``; without ``additive`` all others are deselected."""
    neighbors = cluster_neighbor_counts(physics, rendering)
    for p, r, n in zip(physics, rendering, neighbors):
        near = _distance_sq(p.pos, point) < SELECTION_THRESHOLD_SQ
        if near and n > _CLUSTER_MIN_NEIGHBORS and not r.is_dark_matter:
            r.is_selected = True
        elif not additive:
            r.is_selected = False


def select_closest(
    physics: list[ParticlePhysics],
    rendering: list[ParticleRendering],
    point: Vec2,
    additive: bool,
) -> None:
    """Select the visible particle closest to ``point`` if it lies within range.

    Without ``additive`` the selection is replaced, and clicking an already
    selected particle deselects it; with ``additive`` its selection is toggled.
    """
    closest = 0
    min_distance_sq = sys.float_info.max
    for i, (p, r) in enumerate(zip(physics, rendering)):
        if r.is_dark_matter:
            continue
        distance_sq = _distance_sq(p.pos, point)
        if distance_sq < min_distance_sq:
            min_distance_sq = distance_sq
            closest = i

    in_range = bool(physics) and min_distance_sq < SELECTION_THRESHOLD_SQ

    if additive:
        if in_range:
            rendering[closest].is_selected = not rendering[closest].is_selected
        return

    was_selected = rendering[closest].is_selected if in_range else False
    for r in rendering:
        r.is_selected = False
    if in_range and not was_selected and not rendering[closest].is_dark_matter:
        rendering[closest].is_selected = True


def select_many_clusters(physics: list[ParticlePhysics], rendering: list[ParticleRendering]) -> None:
    """Select exactly the visible particles that belong to any cluster."""
    neighbors = cluster_neighbor_counts(physics, rendering)
    for r, n in zip(rendering, neighbors):
        r.is_selected = not r.is_dark_matter and n > _CLUSTER_MIN_NEIGHBORS


def box_select(
    physics: list[ParticlePhysics],
    rendering: list[ParticleRendering],
    corner_a: Vec2,
    corner_b: Vec2,
    additive: bool,
    deselect: bool,
) -> None:
    """Select (or, with ``deselect``, deselect) particles inside the box spanned by two corners."""
    x1, x2 = sorted((corner_a.x, corner_b.x))
    y1, y2 = sorted((corner_a.y, corner_b.y))

    if not additive and not deselect:
        for r in rendering:
            r.is_selected = False

    for p, r in zip(physics, rendering):
        if x1 <= p.pos.x <= x2 and y1 <= p.pos.y <= y2:
            r.is_selected = not deselect


def invert_selection(rendering: list[ParticleRendering]) -> None:
    """Flip the selection state of every particle."""
    for r in rendering:
        r.is_selected = not r.is_selected


def deselect_all(rendering: list[ParticleRendering]) -> None:
    """Clear the selection."""
    for r in rendering:
        r.is_selected = False


def selected_particles(
    physics: list[ParticlePhysics], rendering: list[ParticleRendering]
) -> tuple[list[ParticlePhysics], list[ParticleRendering]]:
    """The selected particles' physics and rendering states, in order."""
    chosen = [(p, r) for p, r in zip(physics, rendering) if r.is_selected]
    return [p for p, _ in chosen], [r for _, r in chosen]