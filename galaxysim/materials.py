"""Built-in SPH materials and lookups over them."""

from __future__ import annotations

from dataclasses import dataclass

from galaxysim.particle import Color


@dataclass(frozen=True)
class SPHMaterial:
    """Parameters of a fluid/solid material at its base, hot and cold states."""

    id: int = 0
    sph_label: str = "material"

    mass_mult: float = 1.0
    rest_dens: float = 0.008
    stiff: float = 1.0
    visc: float = 1.0
    cohesion: float = 1.0
    color: Color = Color(255, 255, 255, 255)

    hot_point: float = 1000.0
    hot_rest_dens: float = 0.01
    hot_mass_mult: float = 1.0
    hot_stiff: float = 1.0
    hot_visc: float = 1.0
    hot_cohesion: float = 1.0
    hot_color: Color = Color(255, 100, 100, 255)

    cold_point: float = 0.0
    cold_rest_dens: float = 0.01
    cold_mass_mult: float = 1.0
    cold_stiff: float = 1.0
    cold_visc: float = 1.0
    cold_cohesion: float = 1.0
    cold_color: Color = Color(255, 255, 255, 255)

    heat_conductivity: float = 0.1
    constraint_resistance: float = 1.0
    constraint_plastic_point: float = 0.5
    constraint_plastic_point_mult: float = 2.0
    constraint_stiffness: float = 60.0
    is_plastic: bool = False


_MOLTEN = Color(255, 105, 0, 255)


def _without_cold_phase(*, plastic_ratio: float = 0.5, **params) -> SPHMaterial:
    """A material whose cold state equals its base state (it never freezes)."""
    return SPHMaterial(
        cold_point=0.0,
        cold_mass_mult=params["mass_mult"],
        cold_rest_dens=params["rest_dens"],
        cold_stiff=params["stiff"],
        cold_visc=params["visc"],
        cold_cohesion=params["cohesion"],
        cold_color=params["color"],
        constraint_plastic_point=params["constraint_resistance"] * plastic_ratio,
        **params,
    )


_MATERIALS: tuple[SPHMaterial, ...] = (
    SPHMaterial(
        id=1, sph_label="water",
        mass_mult=0.6, rest_dens=0.095, stiff=1.0, visc=0.075, cohesion=0.05,
        color=Color(30, 65, 230, 150),
        hot_point=373.2, hot_mass_mult=0.3, hot_rest_dens=0.045, hot_stiff=1.0,
        hot_visc=0.075, hot_cohesion=0.0, hot_color=Color(230, 230, 250, 190),
        cold_point=273.2, cold_mass_mult=0.5, cold_rest_dens=0.046, cold_stiff=0.6,
        cold_visc=2.2, cold_cohesion=2500.0, cold_color=Color(230, 230, 240, 250),
        heat_conductivity=0.15, constraint_resistance=0.06,
        constraint_plastic_point=0.06 * 0.5, constraint_plastic_point_mult=0.0,
        constraint_stiffness=55.0, is_plastic=False,
    ),
    _without_cold_phase(
        id=2, sph_label="rock",
        mass_mult=3.3, rest_dens=0.008, stiff=1.4, visc=3.0, cohesion=1750.0,
        color=Color(150, 155, 160, 255),
        hot_point=1370.0, hot_mass_mult=2.8, hot_rest_dens=0.005, hot_stiff=1.0,
        hot_visc=0.6, hot_cohesion=300.0, hot_color=_MOLTEN,
        heat_conductivity=0.02, constraint_resistance=0.211,
        constraint_plastic_point_mult=0.0, constraint_stiffness=60.0, is_plastic=False,
    ),
    _without_cold_phase(
        id=3, sph_label="iron", plastic_ratio=0.45,
        mass_mult=4.0, rest_dens=0.008, stiff=1.4, visc=3.0, cohesion=1750.0,
        color=Color(110, 125, 157, 255),
        hot_point=1740.0, hot_mass_mult=2.8, hot_rest_dens=0.005, hot_stiff=1.0,
        hot_visc=0.6, hot_cohesion=300.0, hot_color=_MOLTEN,
        heat_conductivity=0.02, constraint_resistance=0.24,
        constraint_plastic_point_mult=1.8, constraint_stiffness=60.0, is_plastic=True,
    ),
    _without_cold_phase(
        id=4, sph_label="sand",
        mass_mult=2.1, rest_dens=0.008, stiff=1.255, visc=0.74, cohesion=1.0,
        color=Color(200, 185, 100, 255),
        hot_point=1200.0, hot_mass_mult=1.9, hot_rest_dens=0.011, hot_stiff=1.12,
        hot_visc=0.6, hot_cohesion=1.0, hot_color=_MOLTEN,
        heat_conductivity=0.01, constraint_resistance=0.08,
        constraint_plastic_point_mult=0.0, constraint_stiffness=55.0, is_plastic=False,
    ),
    _without_cold_phase(
        id=5, sph_label="soil",
        mass_mult=1.9, rest_dens=0.008, stiff=1.0, visc=2.23, cohesion=3000.0,
        color=Color(156, 110, 30, 255),
        hot_point=950.0, hot_mass_mult=1.8, hot_rest_dens=0.013, hot_stiff=0.9,
        hot_visc=1.8, hot_cohesion=600.0, hot_color=_MOLTEN,
        heat_conductivity=0.02, constraint_resistance=0.09,
        constraint_plastic_point_mult=2.0, constraint_stiffness=30.0, is_plastic=True,
    ),
    _without_cold_phase(
        id=6, sph_label="mud",
        mass_mult=2.3, rest_dens=0.0095, stiff=1.0, visc=0.6, cohesion=100.0,
        color=Color(106, 60, 3, 255),
        hot_point=1000.0, hot_mass_mult=2.1, hot_rest_dens=0.011, hot_stiff=1.0,
        hot_visc=0.5, hot_cohesion=40.0, hot_color=_MOLTEN,
        heat_conductivity=0.1, constraint_resistance=0.03,
        constraint_plastic_point_mult=2.0, constraint_stiffness=20.0, is_plastic=True,
    ),
    _without_cold_phase(
        id=7, sph_label="rubber",
        mass_mult=1.7, rest_dens=0.0095, stiff=1.0, visc=0.6, cohesion=100.0,
        color=Color(226, 166, 114, 255),
        hot_point=453.0, hot_mass_mult=1.6, hot_rest_dens=0.011, hot_stiff=1.0,
        hot_visc=0.5, hot_cohesion=40.0, hot_color=_MOLTEN,
        heat_conductivity=1.1, constraint_resistance=5.5,
        constraint_plastic_point_mult=2.0, constraint_stiffness=6.0, is_plastic=True,
    ),
)

_BY_ID = {material.id: material for material in _MATERIALS}
_BY_LABEL = {material.sph_label: material for material in _MATERIALS}


def all_materials() -> tuple[SPHMaterial, ...]:
    """All built-in materials, in registration order."""
    return _MATERIALS


def material_by_id(material_id: int) -> SPHMaterial:
    """Look up a material by its id; raises KeyError if unknown."""
    try:
        return _BY_ID[material_id]
    except KeyError:
        raise KeyError(f"no SPH material with id {material_id}") from None


def material_by_label(label: str) -> SPHMaterial:
    """Look up a material by its label; raises KeyError if unknown."""
    try:
        return _BY_LABEL[label]
    except KeyError:
        raise KeyError(f"no SPH material labelled {label!r}") from None