"""Timed benchmark kernels reporting approximate Mflops."""

from __future__ import annotations

import contextlib
import math
from collections.abc import Callable

from rvbench import fft, lu, matrix, montecarlo, sor, sparse
from rvbench.rng import Random
from rvbench.stopwatch import Stopwatch

SOR_OMEGA = 1.25


def _calibrate(body: Callable[[int], object], min_time: float) -> tuple[int, float]:
    """Run ``body(cycles)``, doubling cycles until it takes ``min_time``.

    Returns the final cycle count and the time that run took.
    """
    watch = Stopwatch()
    cycles = 1
    while True:
        watch.start()
        body(cycles)
        watch.stop()
        if watch.read() >= min_time:
            return cycles, watch.read()
        cycles *= 2


def _mflops(flops: float, elapsed: float) -> float:
    if elapsed == 0:
        return math.inf
    return flops / elapsed * 1.0e-6


def measure_fft(n: int, min_time: float, rng: Random) -> float:
    """Mflops of forward plus inverse FFTs of ``n`` complex points."""
    x = rng.vector(2 * n)

    def body(cycles: int) -> None:
        for _ in range(cycles):
            fft.transform(x)
            fft.inverse(x)

    cycles, elapsed = _calibrate(body, min_time)
    return _mflops(fft.num_flops(n) * cycles, elapsed)


def measure_sor(n: int, min_time: float, rng: Random) -> float:
    """Mflops of successive over-relaxation on an ``n`` x ``n`` grid."""
    grid = rng.matrix(n, n)

    def body(cycles: int) -> None:
        sor.execute(SOR_OMEGA, grid, cycles)

    cycles, elapsed = _calibrate(body, min_time)
    return _mflops(sor.num_flops(n, n, cycles), elapsed)


def measure_monte_carlo(min_time: float, rng: Random) -> float:
    """Mflops of the Monte Carlo pi estimate; ``rng`` is not used."""

    def body(cycles: int) -> None:
        montecarlo.integrate(cycles)

    cycles, elapsed = _calibrate(body, min_time)
    return _mflops(montecarlo.num_flops(cycles), elapsed)


def measure_sparse_mat_mult(n: int, nz: int, min_time: float, rng: Random) -> float:
    """Mflops of sparse matrix-vector products with about ``nz`` nonzeros."""
    x = rng.vector(n)
    nr = nz // n
    if nr < 1:
        raise ValueError(f"need at least one nonzero per row: n={n}, nz={nz}")
    anz = nr * n
    val = rng.vector(anz)

    row = [r * nr for r in range(n + 1)]
    col: list[int] = []
    for r in range(n):
        step = max(r // nr, 1)
        col.extend(i * step for i in range(nr))

    def body(cycles: int) -> None:
        sparse.matmult(val, row, col, x, cycles)

    cycles, elapsed = _calibrate(body, min_time)
    return _mflops(sparse.num_flops(n, nz, cycles), elapsed)


def measure_lu(n: int, min_time: float, rng: Random) -> float:
    """Mflops of copying and LU-factoring an ``n`` x ``n`` random matrix."""
    a = rng.matrix(n, n)

    def body(cycles: int) -> None:
        for _ in range(cycles):
            work = matrix.copy(a)
            with contextlib.suppress(lu.SingularMatrixError):
                lu.factor(work)

    cycles, elapsed = _calibrate(body, min_time)
    return _mflops(lu.num_flops(n) * cycles, elapsed)