"""Distance constraints between pairs of particles."""

from __future__ import annotations

from dataclasses import dataclass

GLOBAL_CONSTRAINT_DAMPING = 0.001
STIFF_CORRECTION_RATIO = 0.013333
"""Heuristic that maps a constraint's stiffness to an intuitive scale."""

_UINT32_MAX = 0xFFFFFFFF


def constraint_key(id1: int, id2: int) -> int:
    """Order-independent 64-bit key identifying the pair of particle ids."""
    for value in (id1, id2):
        if not 0 <= value <= _UINT32_MAX:
            raise ValueError(f"particle id out of 32-bit range: {value}")
    low, high = sorted((id1, id2))
    return (low << 32) | high


@dataclass
class ParticleConstraint:
    """A spring-like link between two particles, identified by their ids."""

    id1: int
    id2: int
    rest_length: float
    original_length: float
    stiffness: float
    resistance: float
    displacement: float = 0.0
    plasticity_point: float = 0.0
    is_broken: bool = False
    is_plastic: bool = False

    @property
    def key(self) -> int:
        """The pair key under which this constraint is indexed."""
        return constraint_key(self.id1, self.id2)