[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "benchkernels"
version = "0.1.0"
description = "Small, self-checking compute kernels for benchmarking: Montgomery multiplication, cubic solving, fixed-point DSP filters, MD5, SHA-256, matrix inversion and n-body energy."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "kernels",
    "md5",
    "sha256",
    "montgomery",
    "nbody",
    "dsp",
    "matrix-inversion",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["benchkernels"]

[tool.hatch.build.targets.sdist]
include = ["benchkernels", "tests", "pyproject.toml", "README.md"]

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
