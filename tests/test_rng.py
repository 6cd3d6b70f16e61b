import pytest

from rvbench.rng import Random


def test_same_seed_same_sequence():
    a = Random(101010)
    b = Random(101010)
    assert a.vector(50) == b.vector(50)


def test_different_seeds_differ():
    assert Random(113).vector(10) != Random(101010).vector(10)


def test_values_in_unit_interval():
    values = Random(113).vector(1000)
    assert all(0.0 <= v <= 1.0 for v in values)


def test_even_seed_matches_preceding_odd_seed():
    assert Random(4).vector(30) == Random(3).vector(30)
    assert Random(101010).vector(30) == Random(101009).vector(30)


def test_negative_seed_uses_absolute_value():
    assert Random(-113).vector(30) == Random(113).vector(30)


def test_seed_is_remembered():
    assert Random(-7).seed == -7


def test_range_maps_unit_values():
    plain = Random(113).vector(100)
    ranged = Random(113, -2.0, 3.0).vector(100)
    for p, r in zip(plain, ranged):
        assert r == pytest.approx(-2.0 + 5.0 * p)
        assert -2.0 <= r <= 3.0


def test_vector_matches_repeated_next_double():
    a = Random(42)
    b = Random(42)
    assert a.vector(20) == [b.next_double() for _ in range(20)]


def test_matrix_shape_and_order():
    a = Random(9)
    b = Random(9)
    mat = a.matrix(3, 4)
    assert len(mat) == 3
    assert all(len(row) == 4 for row in mat)
    assert [v for row in mat for v in row] == b.vector(12)


def test_empty_vector():
    assert Random(1).vector(0) == []