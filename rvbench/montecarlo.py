"""Monte Carlo estimate of pi from points in the unit square."""

from __future__ import annotations

import math

from rvbench.rng import Random

SEED = 113


def num_flops(num_samples: int) -> float:
    """Operation count: three for x*x+y*y and one per random number."""
    return float(num_samples) * 4.0


def integrate(num_samples: int) -> float:
    """Estimate pi with ``num_samples`` points; NaN when there are none."""
    rng = Random(SEED)
    under_curve = 0
    for _ in range(num_samples):
        x = rng.next_double()
        y = rng.next_double()
        if x * x + y * y <= 1.0:
            under_curve += 1
    if num_samples == 0:
        return math.nan
    return (float(under_curve) / num_samples) * 4.0