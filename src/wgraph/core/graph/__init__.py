"""
Graph module for the weighted graph library.

This module provides the abstract graph contract and its two backings:
- ``EdgeListGraph``: a vertex set plus a list of edge records
- ``AdjacencyGraph``: per-vertex records owning their outgoing edges

Both satisfy the same contract and are interchangeable; ``empty()`` builds
either one from configuration.
"""

from .adjacency import AdjacencyGraph
from .base import Graph
from .edge_list import EdgeListGraph
from .factory import BACKINGS, empty

__all__ = [
    "Graph",
    "AdjacencyGraph",
    "EdgeListGraph",
    "BACKINGS",
    "empty",
]
