"""Walls and light rays of the 2D optics scene, with small vector helpers."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field

from galaxysim.particle import WHITE, Color, Vec2

DEFAULT_BASE_COLOR = Color(200, 200, 200, 255)
DEFAULT_SPECULAR_COLOR = Color(255, 255, 255, 255)
DEFAULT_REFRACTION_COLOR = Color(255, 255, 255, 255)
DEFAULT_EMISSION_COLOR = Color(255, 255, 255, 0)

DEFAULT_SPECULAR_ROUGHNESS = 0.5
DEFAULT_REFRACTION_ROUGHNESS = 0.0
DEFAULT_REFRACTION_AMOUNT = 0.0
DEFAULT_IOR = 1.5
DEFAULT_DISPERSION = 0.0

RAY_MAX_LENGTH = 100000.0
RAY_LENGTH = 10000.0
AIR_IOR = 1.0

_wall_ids = itertools.count()


def next_wall_id() -> int:
    """Return a fresh, process-wide unique wall id."""
    return next(_wall_ids)


def color_strength(color: Color) -> float:
    """Brightest channel of the colour, weighted by its alpha, in [0, 1]."""
    return max(color.r, color.g, color.b) * (color.a / 255.0) / 255.0


def rotate_vec2(v: Vec2, angle: float) -> Vec2:
    """Rotate a vector counter-clockwise by ``angle`` radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    return Vec2(v.x * c - v.y * s, v.x * s + v.y * c)


@dataclass
class Wall:
    """A line segment with surface material properties."""

    va: Vec2
    vb: Vec2
    is_shape_wall: bool = False
    base_color: Color = DEFAULT_BASE_COLOR
    specular_color: Color = DEFAULT_SPECULAR_COLOR
    refraction_color: Color = DEFAULT_REFRACTION_COLOR
    emission_color: Color = DEFAULT_EMISSION_COLOR
    specular_roughness: float = DEFAULT_SPECULAR_ROUGHNESS
    refraction_roughness: float = DEFAULT_REFRACTION_ROUGHNESS
    refraction_amount: float = DEFAULT_REFRACTION_AMOUNT
    ior: float = DEFAULT_IOR
    dispersion_strength: float = DEFAULT_DISPERSION

    normal: Vec2 = Vec2()
    normal_va: Vec2 = Vec2()
    normal_vb: Vec2 = Vec2()

    is_being_spawned: bool = True
    va_is_being_moved: bool = False
    vb_is_being_moved: bool = False

    apparent_color: Color = WHITE

    is_shape_closed: bool = False
    shape_id: int = 0
    is_selected: bool = False
    id: int = field(default_factory=next_wall_id)

    base_color_val: float = field(init=False)
    specular_color_val: float = field(init=False)
    refraction_color_val: float = field(init=False)

    def __post_init__(self) -> None:
        self.base_color_val = color_strength(self.base_color)
        self.specular_color_val = color_strength(self.specular_color)
        self.refraction_color_val = color_strength(self.refraction_color)


@dataclass
class LightRay:
    """A ray of light travelling from ``source`` along ``direction``."""

    source: Vec2
    direction: Vec2
    bounce_level: int = 1
    color: Color = WHITE
    max_length: float = RAY_MAX_LENGTH
    length: float = RAY_LENGTH
    hit_point: Vec2 = Vec2()
    has_hit: bool = False
    wall: Wall | None = None
    reflect_specular: bool = False
    refracted: bool = False
    medium_ior_stack: list[float] = field(default_factory=lambda: [AIR_IOR])
    has_been_dispersed: bool = False
    has_been_scattered: bool = False
    scatter_source: Vec2 = Vec2()

    @property
    def end(self) -> Vec2:
        """The point the ray reaches at its current length."""
        return self.source + self.direction * self.length