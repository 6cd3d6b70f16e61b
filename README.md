# rvbench

A small collection of classic benchmark programs, written in plain Python
with no third-party dependencies:

* **SciMark 2** – the numeric benchmark suite: FFT, successive
  over-relaxation (SOR), Monte Carlo estimation of π, sparse matrix-vector
  multiply in compressed-row form, and dense LU factorisation with partial
  pivoting.
* **pi** – computes the first 800 decimal digits of π with a spigot
  algorithm.
* **qsort** – sorts a fixed set of floating-point values and prints them
  before and after.

The numbers these programs report describe the Python interpreter that runs
them. They are useful for comparing interpreters or machines against each
other, not against results from compiled builds.

## Installation

```
pip install .
```

Python 3.10 or newer is required.

## Command-line use

### SciMark 2

```
rvbench-scimark
rvbench-scimark 0.5
rvbench-scimark -large 2.0
rvbench-scimark -h
```

By default every kernel runs on the small problem sizes, doubling its
repetition count until one timed run lasts at least 0.01 seconds. The
optional number sets that minimum time per kernel in seconds; `-large`
switches to the large problem sizes. `-h` or `-help` prints the usage line.
The report lists the composite score (the mean of the five kernels) and the
Mflops of each kernel together with its problem size.

### pi and qsort

```
rvbench-pi
rvbench-qsort
```

`rvbench-pi` prints 800 digits of π, without a decimal point, followed by a
blank line. `rvbench-qsort` prints seven built-in values in exponent
notation before and after sorting them.

## Library use

Every kernel can be used on its own:

| Module                    | What it holds                                              |
|---------------------------|------------------------------------------------------------|
| `rvbench.rng`             | `Random(seed, left=0.0, right=1.0)` with `next_double`, `vector`, `matrix` |
| `rvbench.fft`             | in-place `transform`, `inverse`, `bitreverse`; `num_flops`  |
| `rvbench.lu`              | `factor` (returns the pivot rows), `num_flops`, `SingularMatrixError` |
| `rvbench.sor`             | in-place `execute`, `num_flops`                             |
| `rvbench.sparse`          | `matmult` (returns the product vector), `num_flops`         |
| `rvbench.montecarlo`      | `integrate`, `num_flops`                                    |
| `rvbench.matrix`          | `zeros`, `copy`                                             |
| `rvbench.stopwatch`       | `Stopwatch`, `seconds`                                      |
| `rvbench.kernel`          | `measure_fft`, `measure_sor`, `measure_monte_carlo`, `measure_sparse_mat_mult`, `measure_lu` |
| `rvbench.scimark`         | `run`, `format_report`, `ProblemSizes`, `Results`, `main`   |
| `rvbench.pi`              | `pi_digits`, `main`                                         |
| `rvbench.sortdemo`        | `sorted_values`, `format_values`, `main`                    |
| `rvbench.dhrystone_types` | `Enumeration`, `Record`                                     |

FFT data is a flat list of interleaved real and imaginary parts whose number
of complex points is a power of two; other lengths raise `ValueError`.
Matrices are lists of rows.

`ProblemSizes` offers `small()`, `large()` and `tiny()`. For example:

```python
from rvbench.scimark import ProblemSizes, format_report, run

sizes = ProblemSizes.tiny()
results = run(sizes, min_time=0.05)
print(format_report(results, sizes))
```

The random number generator is deterministic: the same seed always yields
the same sequence, so kernel inputs can be reproduced exactly.

`Stopwatch` takes the clock it reads from, which makes timing code easy to
drive from a fake clock in tests.

## What is not included

The package holds only the data types of the Dhrystone benchmark
(`rvbench.dhrystone_types`: the `Enumeration` values and the `Record` type
with `assign_from`). It has neither the Dhrystone procedures nor a command
that runs the Dhrystone loop and reports its timing.

## Running the tests

```
pip install .[test]
pytest
```