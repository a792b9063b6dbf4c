[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphalgos"
version = "0.1.0"
description = "Classic graph algorithms: shortest paths, minimum spanning trees and disjoint sets"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "shortest-path",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "johnson",
    "kruskal",
    "prim",
    "union-find",
    "minimum-spanning-tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphalgos = "graphalgos.cli:main"
graphalgos-bars = "graphalgos.bar_chart:main"

[tool.hatch.build.targets.wheel]
packages = ["graphalgos"]

[tool.hatch.build.targets.sdist]
include = ["graphalgos", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
