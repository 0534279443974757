"""Trails of dots left behind by moving particles."""

from __future__ import annotations

from dataclasses import dataclass, field

from galaxysim.particle import Color, ParticlePhysics, ParticleRendering, Vec2

WHITE_TRAIL_COLOR = Color(230, 230, 230, 180)


@dataclass
class TrailDot:
    """One recorded particle position; ``offset`` is relative to the selection centre."""

    pos: Vec2
    offset: Vec2
    color: Color


@dataclass
class ParticleTrails:
    """Accumulates trail dots for all particles or for the selected ones."""

    size: float = 5.0
    trail_thickness: float = 0.07
    white_trails: bool = False
    trail_dots: list[TrailDot] = field(default_factory=list)
    selected_particles_average_pos: Vec2 = Vec2()
    _was_local_enabled: bool = field(default=False, repr=False)

    def clear(self) -> None:
        """Remove every trail dot."""
        self.trail_dots.clear()

    def update(
        self,
        physics: list[ParticlePhysics],
        rendering: list[ParticleRendering],
        selected_physics: list[ParticlePhysics],
        selected_rendering: list[ParticleRendering],
        time_factor: float,
        global_enabled: bool,
        selected_enabled: bool,
        local_enabled: bool,
        max_length: int,
    ) -> None:
        """Record one frame of trail dots and trim the trail to ``max_length`` frames.

        Global trails follow every particle and take precedence over selected
        trails. Local trails are drawn relative to the selection's centre.
        """
        if time_factor > 0:
            if global_enabled:
                self._record(physics, rendering, selected_physics, local_enabled, max_length)
            elif selected_enabled:
                self._record(
                    selected_physics, selected_rendering, selected_physics, local_enabled, max_length
                )

        if not global_enabled and not selected_enabled:
            self.clear()

    def _record(self, physics, rendering, selected_physics, local_enabled, max_length) -> None:
        centre = self.selected_particles_average_pos
        for p, r in zip(physics, rendering):
            self.trail_dots.append(TrailDot(p.pos, p.pos - centre, r.color))

        max_dots = int(max_length * len(physics))
        excess = len(self.trail_dots) - max_dots
        if excess > 0:
            del self.trail_dots[:excess]

        if not local_enabled:
            self._was_local_enabled = False
            return

        if not self._was_local_enabled:
            self.clear()

        if selected_physics:
            count = len(selected_physics)
            centre = Vec2(
                sum(p.pos.x for p in selected_physics) / count,
                sum(p.pos.y for p in selected_physics) / count,
            )
            self.selected_particles_average_pos = centre
            for dot in self.trail_dots:
                dot.pos = dot.offset + centre
        self._was_local_enabled = True