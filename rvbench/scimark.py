"""SciMark2 numeric benchmark driver."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass

from rvbench import kernel
from rvbench.rng import Random

VERSION = 2.0
RESOLUTION_DEFAULT = 0.01
RANDOM_SEED = 101010

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class ProblemSizes:
    """Problem sizes for the five kernels."""

    fft_size: int = 128
    sor_size: int = 10
    sparse_size_m: int = 100
    sparse_size_nz: int = 500
    lu_size: int = 10

    @classmethod
    def small(cls) -> ProblemSizes:
        """Cache-contained default sizes."""
        return cls()

    @classmethod
    def large(cls) -> ProblemSizes:
        """Out-of-cache sizes."""
        return cls(
            fft_size=1048576,
            sor_size=1000,
            sparse_size_m=100000,
            sparse_size_nz=1000000,
            lu_size=1000,
        )

    @classmethod
    def tiny(cls) -> ProblemSizes:
        """Very small sizes for quick runs."""
        return cls(
            fft_size=16,
            sor_size=10,
            sparse_size_m=10,
            sparse_size_nz=50,
            lu_size=10,
        )


@dataclass(frozen=True)
class Results:
    """Mflops measured for each kernel."""

    fft: float
    sor: float
    monte_carlo: float
    sparse_mat_mult: float
    lu: float

    @property
    def composite(self) -> float:
        """Average of the five kernel scores."""
        return (self.fft + self.sor + self.monte_carlo + self.sparse_mat_mult + self.lu) / 5


def _run(
    sizes: ProblemSizes,
    min_time: float,
    seed: int,
    announce: Callable[[str], object],
) -> Results:
    rng = Random(seed)
    announce("measure FFT.")
    fft = kernel.measure_fft(sizes.fft_size, min_time, rng)
    announce("measure SOR.")
    sor = kernel.measure_sor(sizes.sor_size, min_time, rng)
    announce("measure MonteCarlo.")
    mc = kernel.measure_monte_carlo(min_time, rng)
    announce("measure SparseMatMult.")
    sp = kernel.measure_sparse_mat_mult(
        sizes.sparse_size_m, sizes.sparse_size_nz, min_time, rng
    )
    announce("measure LU.")
    lu = kernel.measure_lu(sizes.lu_size, min_time, rng)
    return Results(fft=fft, sor=sor, monte_carlo=mc, sparse_mat_mult=sp, lu=lu)


def run(
    sizes: ProblemSizes | None = None,
    min_time: float = RESOLUTION_DEFAULT,
    seed: int = RANDOM_SEED,
) -> Results:
    """Run all five kernels with one shared generator."""
    return _run(sizes or ProblemSizes.small(), min_time, seed, lambda _msg: None)


def format_report(results: Results, sizes: ProblemSizes) -> str:
    """Return the result table as text."""
    lines = [
        f"Composite Score:        {results.composite:8.4f}",
        f"FFT             Mflops: {results.fft:8.4f}    (N={sizes.fft_size})",
        f"SOR             Mflops: {results.sor:8.4f}    "
        f"({sizes.sor_size} x {sizes.sor_size})",
        f"MonteCarlo:     Mflops: {results.monte_carlo:8.4f}",
        f"Sparse matmult  Mflops: {results.sparse_mat_mult:8.4f}    "
        f"(N={sizes.sparse_size_m}, nz={sizes.sparse_size_nz})",
        f"LU              Mflops: {results.lu:8.4f}    "
        f"(M={sizes.lu_size}, N={sizes.lu_size})",
    ]
    return "\n".join(lines) + "\n"


def _atof(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _parse_args(args: list[str]) -> tuple[ProblemSizes, float] | None:
    """Return sizes and minimum time, or None when help was asked for."""
    sizes = ProblemSizes.small()
    min_time = RESOLUTION_DEFAULT
    if not args:
        return sizes, min_time
    if args[0] in ("-help", "-h"):
        return None
    current = 0
    if args[0] == "-large":
        sizes = ProblemSizes.large()
        current += 1
    if current < len(args):
        min_time = _atof(args[current])
    return sizes, min_time


def _banner() -> str:
    texts = ["", "SciMark2 Numeric Benchmark", f"version {VERSION}", ""]
    return "".join(f"** {text:<60} **\n" for text in texts)


def main(argv: list[str] | None = None) -> int:
    """Command-line entry: ``[-large] [minimum_time]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    parsed = _parse_args(args)
    if parsed is None:
        print("Usage: [-large] [minimum_time]", file=sys.stderr)
        return 0
    sizes, min_time = parsed

    sys.stdout.write(_banner())
    print(f"Using {min_time:10.2f} seconds min time per kenel.")
    results = _run(sizes, min_time, RANDOM_SEED, print)
    sys.stdout.write(format_report(results, sizes))
    return 0