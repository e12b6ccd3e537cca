[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qos_degradation"
version = "0.1.0"
description = "Budgeted degradation of edge weights until shortest-path queries on a graph are blocked"
requires-python = ">=3.10"
keywords = [
    "graph",
    "shortest path",
    "interdiction",
    "greedy",
    "ellipsoid method",
    "randomized rounding",
    "optimization",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
qos-degradation = "qos_degradation.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qos_degradation"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
