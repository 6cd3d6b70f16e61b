import pytest

from rvbench import sor
from rvbench.rng import Random


def test_num_flops_zero_for_thin_grid():
    assert sor.num_flops(1, 10, 5) == 0.0


def test_num_flops_linear_in_iterations():
    assert sor.num_flops(10, 10, 4) == pytest.approx(2 * sor.num_flops(10, 10, 2))


def test_boundary_unchanged():
    grid = Random(101010).matrix(6, 6)
    original = [list(r) for r in grid]
    sor.execute(1.25, grid, 3)
    assert grid[0] == original[0]
    assert grid[-1] == original[-1]
    assert [r[0] for r in grid] == [r[0] for r in original]
    assert [r[-1] for r in grid] == [r[-1] for r in original]


def test_zero_iterations_no_change():
    grid = Random(1).matrix(4, 4)
    original = [list(r) for r in grid]
    sor.execute(1.25, grid, 0)
    assert grid == original


def test_single_centre_point_gauss_seidel():
    grid = [[4.0, 4.0, 4.0], [4.0, 0.0, 4.0], [4.0, 4.0, 4.0]]
    sor.execute(1.0, grid, 1)
    assert grid[1][1] == 4.0


def test_constant_grid_is_fixed_point():
    grid = [[2.5] * 5 for _ in range(5)]
    sor.execute(1.25, grid, 10)
    assert all(v == pytest.approx(2.5) for row in grid for v in row)


def test_converges_to_boundary_value():
    grid = [[1.0] * 6 for _ in range(6)]
    for i in range(1, 5):
        for j in range(1, 5):
            grid[i][j] = 0.0
    sor.execute(1.25, grid, 200)
    assert all(v == pytest.approx(1.0) for row in grid for v in row)