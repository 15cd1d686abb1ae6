[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifesim"
version = "0.1.0"
description = "Cellular automata: Conway's Game of Life in the terminal or a pygame window, and a forest-fire model"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "cellular-automata",
    "game-of-life",
    "conway",
    "forest-fire",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lifesim = "lifesim.terminal:main"
lifesim-gui = "lifesim.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["lifesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
