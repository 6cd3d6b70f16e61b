"""LU factorisation with partial pivoting."""

from __future__ import annotations


class SingularMatrixError(ArithmeticError):
    """Raised when a zero pivot stops the factorisation."""

    def __init__(self, column: int) -> None:
        super().__init__(f"zero pivot in column {column}")
        self.column = column


def num_flops(n: int) -> float:
    """Approximate operation count, roughly 2/3 n^3."""
    nd = float(n)
    return 2.0 * nd * nd * nd / 3.0


def factor(a: list[list[float]]) -> list[int]:
    """Factor ``a`` in place into L and U, and return the pivot rows.

    Rows of ``a`` are swapped as pivoting requires. Raises
    SingularMatrixError on a zero pivot.
    """
    m = len(a)
    n = len(a[0]) if m else 0
    min_mn = min(m, n)
    pivot: list[int] = []

    for j in range(min_mn):
        jp = max(range(j, m), key=lambda i: abs(a[i][j]))
        pivot.append(jp)

        if a[jp][j] == 0:
            raise SingularMatrixError(j)

        if jp != j:
            a[j], a[jp] = a[jp], a[j]

        if j < m - 1:
            recp = 1.0 / a[j][j]
            for row in a[j + 1:]:
                row[j] *= recp

        if j < min_mn - 1:
            aj_tail = a[j][j + 1:]
            for row in a[j + 1:]:
                factor_ij = row[j]
                row[j + 1:] = [
                    v - factor_ij * u for v, u in zip(row[j + 1:], aj_tail)
                ]

    return pivot