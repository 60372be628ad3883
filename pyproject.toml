[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drampower"
version = "0.1.0"
description = "Building blocks for DRAM power estimation: bit-level bus statistics, clocks, interval counters and a command dispatch core"
requires-python = ">=3.10"
dependencies = []
keywords = ["dram", "power", "energy", "memory", "simulation", "eda", "bus", "bitset"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drampower"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
