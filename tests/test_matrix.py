from rvbench import matrix


def test_zeros_shape():
    z = matrix.zeros(3, 4)
    assert len(z) == 3
    assert all(row == [0.0] * 4 for row in z)


def test_zeros_rows_independent():
    z = matrix.zeros(2, 2)
    z[0][0] = 1.0
    assert z[1][0] == 0.0


def test_copy_equal():
    a = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    assert matrix.copy(a) == a


def test_copy_independent():
    a = [[1.0, 2.0], [3.0, 4.0]]
    b = matrix.copy(a)
    b[0][0] = 9.0
    assert a[0][0] == 1.0
    assert b[0] is not a[0]


def test_copy_empty():
    assert matrix.copy([]) == []