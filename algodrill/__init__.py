"""Sliding-window, stack, graph, linked-list and tree algorithms, and an in-memory file system."""

__version__ = "0.1.0"