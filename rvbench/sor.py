"""Successive over-relaxation on a two-dimensional grid."""

from __future__ import annotations


def num_flops(m: int, n: int, num_iterations: int) -> float:
    """Operation count for ``num_iterations`` sweeps of an ``m`` x ``n`` grid."""
    return (float(m) - 1) * (float(n) - 1) * float(num_iterations) * 6.0


def execute(omega: float, g: list[list[float]], num_iterations: int) -> None:
    """Relax the interior points of ``g`` in place."""
    omega_over_four = omega * 0.25
    one_minus_omega = 1.0 - omega
    m = len(g)
    n = len(g[0]) if m else 0

    for _ in range(num_iterations):
        for i in range(1, m - 1):
            gi = g[i]
            gim1 = g[i - 1]
            gip1 = g[i + 1]
            for j in range(1, n - 1):
                gi[j] = (
                    omega_over_four * (gim1[j] + gip1[j] + gi[j - 1] + gi[j + 1])
                    + one_minus_omega * gi[j]
                )