"""Neighbour counting on spatial grids and size-by-density/force rendering."""

from __future__ import annotations

import math
import sys
from collections import defaultdict
from dataclasses import dataclass, field

from galaxysim.particle import ParticlePhysics, ParticleRendering, Vec2

_CELL_STRIDE = 10000
_MIN_CELL_SIZE = 1.0
_MAX_CELL_SIZE = 4.0
_TOTAL_SIZE_MULTIPLIER = 1.5
_FLOAT_MAX = sys.float_info.max


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass
class DensitySize:
    """Resizes particles according to their acceleration or local density."""

    min_size: float = 0.17
    max_size: float = 0.62
    size_acc: float = 22.0

    def size_by_density(self, physics, rendering, density_size_enabled, force_size_enabled, size_multiplier) -> None:
        """Set each visible particle's size from its acceleration and/or neighbour count."""
        large = self.max_size * size_multiplier
        small = self.min_size * size_multiplier

        if force_size_enabled:
            for p, r in zip(physics, rendering):
                if r.is_solid or r.is_dark_matter:
                    continue
                acc = _clamp(p.acc.length(), 0.0, self.size_acc)
                r.size = _lerp(large, small, acc / self.size_acc)

        if density_size_enabled:
            for r in rendering:
                if r.is_dark_matter or r.is_solid:
                    continue
                normal_density = min(r.neighbors / 25, 1.0)
                r.size = _lerp(large, small, normal_density ** 2)


def id_to_index(physics) -> dict[int, int]:
    """Map each particle id to its position in the list."""
    return {p.id: i for i, p in enumerate(physics)}


@dataclass
class NeighborSearch:
    """Spatial-hash and uniform-grid neighbour searches."""

    density_radius: float = 4.5
    cell_size: float = 3.0
    grid: dict[int, list[int]] = field(default_factory=dict)

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

    def neighbor_search_hash(self, physics, rendering) -> None:
        """Append to each particle's neighbour ids every particle closer than one cell size."""
        h2 = self.cell_size * self.cell_size
        self.update_grid(physics, rendering)

        for i, (pi, ri) in enumerate(zip(physics, rendering)):
            if ri.is_dark_matter:
                continue
            for cell in self.neighbor_cells(self.grid_index(pi.pos)):
                for j in self.grid.get(cell, ()):
                    if j == i or rendering[j].is_dark_matter:
                        continue
                    pj = physics[j]
                    d = pj.pos - pi.pos
                    if d.dot(d) >= h2:
                        continue
                    pi.neighbor_ids.append(pj.id)

    def count_neighbors(self, physics, rendering, size_multiplier, texture_half_size) -> None:
        """Set ``neighbors`` of every ordinary particle to the count within the density radius."""
        if not physics:
            return

        radius_sq = self.density_radius * self.density_radius

        to_process = []
        for i, r in enumerate(rendering):
            if not r.is_dark_matter and not r.unique_color:
                to_process.append(i)
                r.neighbors = 0
        if not to_process:
            return

        size_factor = size_multiplier * texture_half_size * _TOTAL_SIZE_MULTIPLIER
        cell_size = min(
            (r.size * size_factor for r in rendering
             if not (r.is_dark_matter or r.unique_color or r.is_solid)),
            default=_FLOAT_MAX,
        )
        cell_size = _clamp(cell_size, _MIN_CELL_SIZE, _MAX_CELL_SIZE)

        xs = [physics[i].pos.x for i in to_process]
        ys = [physics[i].pos.y for i in to_process]
        min_x, max_x = min(xs) - cell_size, max(xs) + cell_size
        min_y, max_y = min(ys) - cell_size, max(ys) + cell_size

        width = max(1, int((max_x - min_x) / cell_size) + 1)
        height = max(1, int((max_y - min_y) / cell_size) + 1)

        def cell_of(pos: Vec2) -> tuple[int, int]:
            cx = int((pos.x - min_x) / cell_size)
            cy = int((pos.y - min_y) / cell_size)
            return _clamp(cx, 0, width - 1), _clamp(cy, 0, height - 1)

        cells: dict[tuple[int, int], list[int]] = defaultdict(list)
        for i in to_process:
            cells[cell_of(physics[i].pos)].append(i)

        for i in to_process:
            pos = physics[i].pos
            cx, cy = cell_of(pos)
            count = 0
            for ny in range(max(0, cy - 1), min(height - 1, cy + 1) + 1):
                for nx in range(max(0, cx - 1), min(width - 1, cx + 1) + 1):
                    for j in cells.get((nx, ny), ()):
                        if j == i:
                            continue
                        d = pos - physics[j].pos
                        if d.dot(d) < radius_sq:
                            count += 1
            rendering[i].neighbors += count