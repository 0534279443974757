import pytest

from galaxysim.density import DensitySize, NeighborSearch, id_to_index
from galaxysim.particle import ParticlePhysics, ParticleRendering, Vec2


def _particles(positions, **rendering_kwargs):
    physics = [ParticlePhysics(pos=Vec2(x, y)) for x, y in positions]
    rendering = [ParticleRendering(**rendering_kwargs) for _ in positions]
    return physics, rendering


def test_force_size_zero_and_large_acceleration():
    ds = DensitySize()
    physics, rendering = _particles([(0, 0), (1, 1)])
    physics[1].acc = Vec2(1000.0, 0.0)
    ds.size_by_density(physics, rendering, False, True, 2.0)
    assert rendering[0].size == pytest.approx(ds.max_size * 2.0)
    assert rendering[1].size == pytest.approx(ds.min_size * 2.0)


def test_force_size_skips_solid_and_dark_matter():
    ds = DensitySize()
    physics, rendering = _particles([(0, 0), (1, 1)])
    rendering[0].is_solid = True
    rendering[1].is_dark_matter = True
    ds.size_by_density(physics, rendering, True, True, 1.0)
    assert [r.size for r in rendering] == [1.0, 1.0]


def test_density_size_bounds_and_monotonic():
    ds = DensitySize()
    physics, rendering = _particles([(0, 0), (1, 1), (2, 2)])
    rendering[0].neighbors = 0
    rendering[1].neighbors = 10
    rendering[2].neighbors = 40
    ds.size_by_density(physics, rendering, True, False, 1.0)
    assert rendering[0].size == pytest.approx(ds.max_size)
    assert rendering[2].size == pytest.approx(ds.min_size)
    assert ds.min_size < rendering[1].size < ds.max_size


def test_grid_index():
    ns = NeighborSearch()
    assert ns.grid_index(Vec2(0.0, 0.0)) == 0
    assert ns.grid_index(Vec2(3.5, 7.0)) == 10002
    assert ns.grid_index(Vec2(0.1, 0.2)) == ns.grid_index(Vec2(2.9, 2.9))


def test_neighbor_cells_block():
    ns = NeighborSearch()
    index = ns.grid_index(Vec2(30.0, 30.0))
    cells = ns.neighbor_cells(index)
    assert len(set(cells)) == 9
    assert index in cells
    assert ns.grid_index(Vec2(33.0, 27.0)) in cells
    assert ns.grid_index(Vec2(36.0, 30.0)) not in cells


def test_update_grid_skips_dark_matter():
    ns = NeighborSearch()
    physics, rendering = _particles([(0, 0), (0.5, 0.5), (10, 10)])
    rendering[2].is_dark_matter = True
    ns.update_grid(physics, rendering)
    assert sorted(i for indices in ns.grid.values() for i in indices) == [0, 1]


def test_neighbor_search_hash_records_close_ids():
    ns = NeighborSearch()
    physics, rendering = _particles([(1, 1), (2, 1), (50, 50)])
    ns.neighbor_search_hash(physics, rendering)
    assert physics[0].neighbor_ids == [physics[1].id]
    assert physics[1].neighbor_ids == [physics[0].id]
    assert physics[2].neighbor_ids == []


def test_count_neighbors_line_of_particles():
    ns = NeighborSearch()
    physics, rendering = _particles([(0, 0), (1, 0), (2, 0), (100, 0)])
    ns.count_neighbors(physics, rendering, 1.0, 1.0)
    assert [r.neighbors for r in rendering] == [2, 2, 2, 0]


def test_count_neighbors_ignores_dark_matter_and_unique():
    ns = NeighborSearch()
    physics, rendering = _particles([(0, 0), (1, 0), (0, 1)])
    rendering[1].is_dark_matter = True
    rendering[2].unique_color = True
    rendering[2].neighbors = 7
    ns.count_neighbors(physics, rendering, 1.0, 1.0)
    assert rendering[0].neighbors == 0
    assert rendering[2].neighbors == 7


def test_count_neighbors_symmetric():
    ns = NeighborSearch()
    physics, rendering = _particles([(0, 0), (0.5, 0.5), (3, 3), (-2, 1), (8, 8)])
    ns.count_neighbors(physics, rendering, 1.0, 1.0)
    assert sum(r.neighbors for r in rendering) % 2 == 0
    assert all(r.neighbors <= len(rendering) - 1 for r in rendering)


def test_id_to_index():
    physics, _ = _particles([(0, 0), (1, 1)])
    mapping = id_to_index(physics)
    assert mapping == {physics[0].id: 0, physics[1].id: 1}