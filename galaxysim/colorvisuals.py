"""Colouring of particles by density, velocity, force, pressure or temperature."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from galaxysim.materials import material_by_id
from galaxysim.particle import Color, ParticlePhysics, ParticleRendering

SELECTED_COLOR = Color(255, 20, 20, 255)
VISIBLE_DARK_MATTER_COLOR = Color(128, 128, 128, 170)
HIDDEN_DARK_MATTER_COLOR = Color(0, 0, 0, 0)


class BlendMode(enum.IntEnum):
    """How particle colours are blended when drawn."""

    ALPHA = 0
    ADDITIVE = 1


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def color_lerp(a: Color, b: Color, t: float) -> Color:
    """Linear interpolation between two colours; ``t`` is clamped to [0, 1]."""
    t = _clamp(t, 0.0, 1.0)

    def mix(x: int, y: int) -> int:
        return int((1.0 - t) * x + t * y)

    return Color(mix(a.r, b.r), mix(a.g, b.g), mix(a.b, b.b), mix(a.a, b.a))


def color_from_hsv(hue: float, saturation: float, value: float) -> Color:
    """Opaque colour from hue in degrees and saturation/value in [0, 1]."""

    def channel(offset: float) -> int:
        k = math.fmod(offset + hue / 60.0, 6.0)
        k = _clamp(min(k, 4.0 - k), 0.0, 1.0)
        return int((value - value * saturation * k) * 255.0)

    return Color(channel(5.0), channel(3.0), channel(1.0), 255)


def _hue_for(normalized: float) -> float:
    return (1.0 - normalized) * 240.0


@dataclass
class ColorVisuals:
    """Colouring modes and their parameters; several modes may be active at once."""

    solid_color: bool = False
    density_color: bool = True
    velocity_color: bool = False
    shockwave_color: bool = False
    force_color: bool = False
    pressure_color: bool = False
    temperature_color: bool = False
    gas_temp_color: bool = False
    sph_color: bool = False

    show_dark_matter: bool = False
    selected_color: bool = True

    blend_mode: BlendMode = BlendMode.ADDITIVE

    p_color: Color = Color(0, 40, 68, 100)
    s_color: Color = Color(155, 80, 40, 75)

    hue: float = 180.0
    saturation: float = 0.8
    value: float = 0.5

    max_neighbors: int = 60

    max_color_acc: float = 40.0
    min_color_acc: float = 0.0

    shockwave_max_acc: float = 18.0
    shockwave_min_acc: float = 0.0

    max_vel: float = 100.0
    min_vel: float = 0.0

    max_press: float = 1000.0
    min_press: float = 0.0

    min_temp: float = 274.0

    temp_color_min_temp: float = 1.0
    temp_color_max_temp: float = 1000.0

    def _heat_map(self, normalized: float) -> Color:
        self.hue = _hue_for(normalized)
        self.saturation = 1.0
        self.value = 1.0
        return color_from_hsv(self.hue, self.saturation, self.value)

    def _refresh_palette(self, r: ParticleRendering) -> None:
        if not r.unique_color:
            r.p_color = self.p_color
            r.s_color = self.s_color

    def apply(self, physics: list[ParticlePhysics], rendering: list[ParticleRendering]) -> None:
        """Set every particle's colour according to the enabled modes, in order."""
        pairs = list(zip(physics, rendering))

        if self.solid_color:
            for _, r in pairs:
                if not r.unique_color:
                    r.p_color = self.p_color
                r.color = r.p_color
            self.blend_mode = BlendMode.ADDITIVE

        if self.density_color:
            inv_max = 1.0 / self.max_neighbors
            for _, r in pairs:
                if r.is_dark_matter:
                    continue
                self._refresh_palette(r)
                density = min(r.neighbors * inv_max, 1.0)
                r.color = color_lerp(r.p_color, r.s_color, density)
            self.blend_mode = BlendMode.ADDITIVE

        if self.velocity_color:
            for p, r in pairs:
                speed_sq = p.vel.dot(p.vel)
                clamped = _clamp(speed_sq, self.min_vel, self.max_vel)
                r.color = self._heat_map(clamped / self.max_vel)
            self.blend_mode = BlendMode.ALPHA

        if self.force_color:
            for p, r in pairs:
                if r.is_dark_matter:
                    continue
                acc = _clamp(p.acc.length(), self.min_color_acc, self.max_color_acc)
                self._refresh_palette(r)
                r.color = color_lerp(r.p_color, r.s_color, acc / self.max_color_acc)
            self.blend_mode = BlendMode.ADDITIVE

        if self.shockwave_color:
            for p, r in pairs:
                shock = _clamp(p.acc.length(), self.shockwave_min_acc, self.shockwave_max_acc)
                r.color = self._heat_map(shock / self.shockwave_max_acc)
            self.blend_mode = BlendMode.ALPHA

        if self.pressure_color:
            for p, r in pairs:
                press = _clamp(p.press, self.min_press, self.max_press)
                r.color = self._heat_map(press / self.max_press)
            self.blend_mode = BlendMode.ALPHA

        if self.temperature_color:
            for p, r in pairs:
                temp = _clamp(p.temp, self.temp_color_min_temp, self.temp_color_max_temp)
                r.color = self._heat_map(temp / self.temp_color_max_temp)
            self.blend_mode = BlendMode.ALPHA

        if self.gas_temp_color:
            span = self.temp_color_max_temp - self.temp_color_min_temp
            for p, r in pairs:
                self._refresh_palette(r)
                normalized = _clamp((p.temp - self.temp_color_min_temp) / span, 0.0, 1.0)
                r.color = color_lerp(r.p_color, r.s_color, normalized)
            self.blend_mode = BlendMode.ADDITIVE

        if self.sph_color:
            for p, r in pairs:
                if r.unique_color:
                    r.color = r.p_color
                    continue
                try:
                    material = material_by_id(r.sph_label)
                except KeyError:
                    continue
                if p.temp < material.cold_point:
                    r.color = material.cold_color
                else:
                    normalized = (p.temp - self.min_temp) / (material.hot_point - self.min_temp)
                    r.color = color_lerp(
                        r.sph_color, material.hot_color, _clamp(normalized, 0.0, 1.0)
                    )
            self.blend_mode = BlendMode.ALPHA

        if self.selected_color:
            for r in rendering:
                if r.is_selected:
                    r.color = SELECTED_COLOR

        dark_color = VISIBLE_DARK_MATTER_COLOR if self.show_dark_matter else HIDDEN_DARK_MATTER_COLOR
        for r in rendering:
            if r.is_dark_matter:
                r.color = dark_color