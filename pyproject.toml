[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvbench"
version = "0.1.0"
description = "SciMark 2 numeric kernels and small classic benchmark programs in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "scimark",
    "fft",
    "lu-decomposition",
    "monte-carlo",
    "sparse-matrix",
    "sor",
    "pi",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rvbench-scimark = "rvbench.scimark:main"
rvbench-pi = "rvbench.pi:main"
rvbench-qsort = "rvbench.sortdemo:main"

[tool.hatch.build.targets.wheel]
packages = ["rvbench"]

[tool.hatch.build.targets.sdist]
include = ["rvbench", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
