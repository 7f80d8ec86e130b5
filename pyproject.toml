[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fwgraph"
version = "1.0.0"
description = "Shortest path lengths between all vertex pairs of a directed graph, with a drawing of the graph"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["graph", "floyd-warshall", "shortest-path", "adjacency-matrix", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fwgraph = "fwgraph.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fwgraph"]

[tool.pytest.ini_options]
addopts = "-ra"
