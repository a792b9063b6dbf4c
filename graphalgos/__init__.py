"""Shortest paths, minimum spanning trees, disjoint sets and a text bar chart."""

__version__ = "0.1.0"
__all__ = ["__version__"]