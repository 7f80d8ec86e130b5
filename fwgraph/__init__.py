"""Shortest path lengths between all vertex pairs of a directed graph, with a matplotlib drawing and a Tk window."""

__version__ = "1.0.0"