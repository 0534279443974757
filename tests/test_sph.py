import pytest

from galaxysim.particle import ParticlePhysics, ParticleRendering, Vec2
from galaxysim.sph import SPH


def test_cell_size_defaults_to_radius():
    sph = SPH(radius_multiplier=5.0)
    assert sph.cell_size == 5.0
    assert SPH(cell_size=2.0).cell_size == 2.0


@pytest.mark.parametrize("method", [
    "smoothing_kernel", "spiky_kernel_derivative",
    "smoothing_kernel_laplacian", "smoothing_kernel_cohesion",
])
def test_kernels_vanish_outside_radius(method):
    sph = SPH()
    kernel = getattr(sph, method)
    assert kernel(3.0, 3.0) == 0.0
    assert kernel(7.5, 3.0) == 0.0


def test_smoothing_kernel_decreasing_and_scaled():
    sph = SPH()
    values = [sph.smoothing_kernel(d, 3.0) for d in (0.0, 1.0, 2.0, 2.9)]
    assert values == sorted(values, reverse=True)
    assert all(v > 0 for v in values)
    assert sph.smoothing_kernel(0.0, 2.0) * 4 == pytest.approx(sph.smoothing_kernel(0.0, 3.0) * 9)


def test_spiky_derivative_negative_and_related_to_laplacian():
    sph = SPH()
    for d in (0.0, 0.5, 2.0):
        spiky = sph.spiky_kernel_derivative(d, 3.0)
        assert spiky < 0
        assert spiky / sph.smoothing_kernel_laplacian(d, 3.0) == pytest.approx(-(3.0 - d) ** 2)


def test_laplacian_constant_inside():
    sph = SPH()
    assert sph.smoothing_kernel_laplacian(0.0, 3.0) == sph.smoothing_kernel_laplacian(2.5, 3.0)


def test_cohesion_sign_changes():
    sph = SPH()
    assert sph.smoothing_kernel_cohesion(1.5, 3.0) == 0.0
    assert sph.smoothing_kernel_cohesion(0.5, 3.0) > 0
    assert sph.smoothing_kernel_cohesion(2.0, 3.0) > 0


def test_grid_index():
    sph = SPH()
    assert sph.grid_index(Vec2(0.0, 0.0)) == 0
    assert sph.grid_index(Vec2(3.5, 7.0)) == 10002


def test_neighbor_cells():
    sph = SPH()
    cell = sph.grid_index(Vec2(31.0, 40.0))
    cells = sph.neighbor_cells(cell)
    assert len(set(cells)) == 9
    assert cell in cells
    assert cell + 10001 in cells and cell - 10001 in cells


def test_update_grid_skips_dark_matter():
    sph = SPH()
    physics = [ParticlePhysics(pos=Vec2(x, 1.0)) for x in (0.5, 1.0, 10.0, 11.0)]
    rendering = [ParticleRendering() for _ in physics]
    rendering[3].is_dark_matter = True
    sph.update_grid(physics, rendering)
    indices = sorted(i for cell in sph.grid.values() for i in cell)
    assert indices == [0, 1, 2]
    assert sph.grid[sph.grid_index(Vec2(0.5, 1.0))] == [0, 1]


def test_compute_delta_scaling():
    sph = SPH()
    grads = [Vec2(1.0, 0.5), Vec2(-0.3, 0.2)]
    base = sph.compute_delta(grads, 0.1, 1.0, 1.0)
    doubled = sph.compute_delta([g * 2.0 for g in grads], 0.1, 1.0, 1.0)
    assert base > 0
    assert doubled == pytest.approx(base / 4.0)


def test_compute_delta_empty_raises():
    with pytest.raises(ZeroDivisionError):
        SPH().compute_delta([], 0.1, 1.0, 1.0)