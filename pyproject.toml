[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpugol"
version = "0.1.0"
description = "A simple CPU-only Conway's Game of Life with frame-time metrics, drawn in a pygame window."
requires-python = ">=3.10"
keywords = ["game-of-life", "cellular-automaton", "pygame", "benchmark", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cpugol = "cpugol.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cpugol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
