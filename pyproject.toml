[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifegrid"
version = "0.1.0"
description = "Conway's Game of Life on a bounded square grid, played with the mouse in a window"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game of life", "cellular automaton", "conway", "simulation", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lifegrid = "lifegrid.game:main"

[tool.hatch.build.targets.wheel]
packages = ["lifegrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
