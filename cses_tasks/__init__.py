"""Solved algorithmic tasks: dynamic programming, disjoint sets, grids, graphs and trees."""

__version__ = "0.1.0"