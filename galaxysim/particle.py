"""Particle state: 2D vectors, colours and per-particle physics and rendering data."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field

BASE_MASS = 8_500_000_000.0
"""Mass of a standard particle; SPH masses are expressed relative to it."""

DEFAULT_TEMPERATURE = 288.0
DEFAULT_SPAWN_CORRECT_ITER = 100_000_000

_particle_ids = itertools.count()


def next_particle_id() -> int:
    """Return a fresh, process-wide unique particle id."""
    return next(_particle_ids)


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, axis: int) -> float:
        if axis == 0:
            return self.x
        if axis == 1:
            return self.y
        raise IndexError(f"Vec2 axis out of range: {axis}")

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; raises ZeroDivisionError for a zero vector."""
        return self / self.length()

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """Z component of the 3D cross product of the two vectors."""
        return self.x * other.y - self.y * other.x


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255


WHITE = Color(255, 255, 255, 255)
SPH_DEFAULT_COLOR = Color(128, 128, 128, 128)


@dataclass
class ParticlePhysics:
    """Physical state of one particle."""

    pos: Vec2 = Vec2()
    pred_pos: Vec2 = Vec2()
    vel: Vec2 = Vec2()
    prev_vel: Vec2 = Vec2()
    pred_vel: Vec2 = Vec2()
    acc: Vec2 = Vec2()
    mass: float = BASE_MASS

    press: float = 0.0
    press_tmp: float = 0.0
    press_f: Vec2 = Vec2()
    dens: float = 0.0
    pred_dens: float = 0.0
    sph_mass: float = 1.0

    rest_dens: float = 0.0
    stiff: float = 0.0
    visc: float = 0.0
    cohesion: float = 0.0

    temp: float = 0.0
    ke: float = 0.0
    prev_ke: float = 0.0
    morton_key: int = 0
    id: int = field(default_factory=next_particle_id)
    neighbor_ids: list[int] = field(default_factory=list)

    is_hot_point: bool = False
    has_solidified: bool = False

    @classmethod
    def spawn(cls, pos, vel, mass, rest_dens, stiff, visc, cohesion) -> ParticlePhysics:
        """Create a freshly spawned particle at room temperature."""
        return cls(
            pos=pos,
            vel=vel,
            mass=mass,
            sph_mass=mass / BASE_MASS,
            rest_dens=rest_dens,
            stiff=stiff,
            visc=visc,
            cohesion=cohesion,
            temp=DEFAULT_TEMPERATURE,
        )


@dataclass
class ParticleRendering:
    """Visual state of one particle."""

    color: Color = WHITE
    p_color: Color = WHITE
    s_color: Color = WHITE
    sph_color: Color = SPH_DEFAULT_COLOR
    size: float = 1.0
    unique_color: bool = False
    is_solid: bool = False
    can_be_subdivided: bool = False
    can_be_resized: bool = False
    is_dark_matter: bool = False
    is_sph: bool = False
    is_selected: bool = False
    is_grabbed: bool = False
    previous_size: float = 1.0
    neighbors: int = 0
    total_radius: float = 0.0
    life_span: float = -1.0
    sph_label: int = 0
    is_pinned: bool = False
    is_being_drawn: bool = True
    spawn_correct_iter: int = DEFAULT_SPAWN_CORRECT_ITER

    @classmethod
    def spawn(
        cls,
        color,
        size,
        unique_color,
        is_selected,
        is_solid,
        can_be_subdivided,
        can_be_resized,
        is_dark_matter,
        is_sph,
        life_span,
        sph_label,
    ) -> ParticleRendering:
        """Create rendering state for a freshly spawned particle."""
        return cls(
            color=color,
            size=size,
            unique_color=unique_color,
            is_solid=is_solid,
            can_be_subdivided=can_be_subdivided,
            can_be_resized=can_be_resized,
            is_dark_matter=is_dark_matter,
            is_sph=is_sph,
            is_selected=is_selected,
            previous_size=size,
            life_span=life_span,
            sph_label=sph_label,
            is_being_drawn=False,
        )