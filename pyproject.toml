[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "thermobench"
version = "1.0.0"
description = "A digital thermometer simulator with a seven-segment display, plus matrix A^T*A and search-algorithm benchmarks."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "thermometer",
    "seven-segment",
    "bit-manipulation",
    "benchmark",
    "matrix",
    "binary-search",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
thermo-main = "thermobench.thermo_main:main"
matata-print = "thermobench.matata_print:main"
matata-benchmark = "thermobench.matata_benchmark:main"
search-benchmark = "thermobench.search_benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["thermobench"]

[tool.hatch.build.targets.sdist]
include = ["thermobench", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
