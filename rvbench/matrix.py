"""Dense two-dimensional arrays as lists of rows."""

from __future__ import annotations


def zeros(m: int, n: int) -> list[list[float]]:
    """Return an ``m`` by ``n`` matrix of zeros."""
    return [[0.0] * n for _ in range(m)]


def copy(a: list[list[float]]) -> list[list[float]]:
    """Return a copy of ``a`` whose rows are independent of the original."""
    return [list(row) for row in a]