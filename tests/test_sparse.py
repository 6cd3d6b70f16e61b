import pytest

from rvbench import sparse


def test_num_flops_uses_whole_rows():
    assert sparse.num_flops(3, 7, 2) == sparse.num_flops(3, 6, 2)


def test_num_flops_value():
    assert sparse.num_flops(100, 500, 1) == 1000.0


def test_identity_returns_x():
    x = [4.0, 5.0, 6.0]
    y = sparse.matmult([1.0, 1.0, 1.0], [0, 1, 2, 3], [0, 1, 2], x, 1)
    assert y == x


def test_small_matrix():
    val = [2.0, 1.0, 3.0]
    row = [0, 1, 3]
    col = [0, 0, 1]
    assert sparse.matmult(val, row, col, [1.0, 2.0], 1) == [2.0, 7.0]


def test_repeated_iterations_same_result():
    val = [2.0, 1.0, 3.0]
    row = [0, 1, 3]
    col = [0, 0, 1]
    once = sparse.matmult(val, row, col, [1.5, -2.0], 1)
    many = sparse.matmult(val, row, col, [1.5, -2.0], 5)
    assert many == once


def test_empty_row_gives_zero():
    y = sparse.matmult([3.0], [0, 0, 1], [1], [10.0, 2.0], 1)
    assert y == [0.0, 6.0]


def test_scaling_is_linear():
    val = [0.5, 1.5, 2.5, 3.5]
    row = [0, 2, 4]
    col = [0, 1, 0, 1]
    x = [1.0, 2.0]
    y1 = sparse.matmult(val, row, col, x, 1)
    y2 = sparse.matmult(val, row, col, [2 * v for v in x], 1)
    assert y2 == pytest.approx([2 * v for v in y1])