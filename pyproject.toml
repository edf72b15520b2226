[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cses-tasks"
version = "0.1.0"
description = "Solutions to classic competitive-programming tasks: dynamic programming, graphs, trees and grids."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "graphs",
    "shortest-paths",
    "trees",
    "disjoint-set",
    "segment-tree",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
cses-tasks = "cses_tasks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cses_tasks"]

[tool.hatch.build.targets.sdist]
include = ["cses_tasks", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
