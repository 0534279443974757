"""Smoothed-particle hydrodynamics kernels and spatial grid."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass, field

from galaxysim.particle import Vec2

_CELL_STRIDE = 10000


@dataclass
class SPH:
    """SPH parameters, smoothing kernels and the uniform spatial hash."""

    radius_multiplier: float = 3.0
    mass: float = 0.03
    stiff_multiplier: float = 1.0
    viscosity: float = 0.1
    cohesion_coefficient: float = 1.0
    bound_damping: float = -0.1
    delta: float = 9500.0
    vertical_gravity: float = 3.0
    dens_tolerance: float = 0.08
    max_iter: int = 1
    iter: int = 0
    cell_size: float | None = None
    grid: dict[int, list[int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.cell_size is None:
            self.cell_size = self.radius_multiplier

    def smoothing_kernel(self, dst: float, radius: float) -> float:
        """Density kernel; zero at and beyond ``radius``."""
        if dst >= radius:
            return 0.0
        volume = math.pi * radius ** 4 / 6.0
        return (radius - dst) * (radius - dst) / volume

    def spiky_kernel_derivative(self, dst: float, radius: float) -> float:
        """Derivative of the spiky kernel, used for pressure gradients."""
        if dst >= radius:
            return 0.0
        scale = -45.0 / (math.pi * radius ** 6)
        return scale * (radius - dst) ** 2

    def smoothing_kernel_laplacian(self, dst: float, radius: float) -> float:
        """Viscosity kernel Laplacian; constant inside ``radius``."""
        if dst >= radius:
            return 0.0
        return 45.0 / (math.pi * radius ** 6)

    def smoothing_kernel_cohesion(self, r: float, h: float) -> float:
        """Cohesion kernel; attractive below h/2, repulsive between h/2 and h."""
        if r >= h:
            return 0.0
        q = r / h
        return (1.0 - q) * (0.5 - q) * (0.5 - q) * 30.0 / (math.pi * h * h)

    def grid_index(self, pos: Vec2) -> int:
        """Hash of the grid cell that holds the position."""
        cell_x = math.floor(pos.x / self.cell_size)
        cell_y = math.floor(pos.y / self.cell_size)
        return cell_x * _CELL_STRIDE + cell_y

    def neighbor_cells(self, cell_index: int) -> list[int]:
        """The nine cell hashes of the 3x3 block centred on the cell."""
        return [cell_index + i * _CELL_STRIDE + j for i in (-1, 0, 1) for j in (-1, 0, 1)]

    def update_grid(self, physics, rendering) -> None:
        """Rebuild the spatial hash from the non-dark-matter particles."""
        grid: dict[int, list[int]] = defaultdict(list)
        for i, (p, r) in enumerate(zip(physics, rendering)):
            if r.is_dark_matter:
                continue
            grid[self.grid_index(p.pos)].append(i)
        self.grid = dict(grid)

    def compute_delta(self, kernel_gradients, dt: float, mass: float, rest_density: float) -> float:
        """PCISPH pressure scaling factor from a neighbourhood's kernel gradients.

        Raises ZeroDivisionError when the gradients (or ``dt``, ``mass``) vanish.
        """
        beta = (dt * dt * mass * mass) / (rest_density * rest_density)
        sum_x = 0.0
        sum_y = 0.0
        sum_dot = 0.0
        for grad in kernel_gradients:
            sum_x += grad.x
            sum_y += grad.y
            sum_dot += grad.dot(grad)
        sum_sq = sum_x * sum_x + sum_y * sum_y
        return -1.0 / (beta * (-sum_sq - sum_dot))