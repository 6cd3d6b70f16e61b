"""Sparse matrix-vector multiply in compressed-row format."""

from __future__ import annotations


def num_flops(n: int, nz: int, num_iterations: int) -> float:
    """Operation count, using the whole-row share of ``nz`` nonzeros."""
    actual_nz = (nz // n) * n
    return float(actual_nz) * 2.0 * float(num_iterations)


def matmult(
    val: list[float],
    row: list[int],
    col: list[int],
    x: list[float],
    num_iterations: int,
) -> list[float]:
    """Return ``A @ x`` for the CSR matrix (val, row, col), repeated as asked.

    ``row`` holds one more entry than the matrix has rows; row ``r`` spans
    ``val[row[r]:row[r + 1]]``.
    """
    m = len(row) - 1
    y = [0.0] * m
    for _ in range(num_iterations):
        for r, (start, end) in enumerate(zip(row, row[1:])):
            total = 0.0
            for v, c in zip(val[start:end], col[start:end]):
                total += x[c] * v
            y[r] = total
    return y