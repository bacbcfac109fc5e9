"""
wgraph - Mutable Directed Weighted Graphs

This package provides a directed, weighted graph abstraction over generic
vertex labels with two interchangeable representations:

- An edge-list backing storing a vertex set and a list of edge records
- An adjacency backing storing per-vertex maps of outgoing edges

Both backings honor the same contract and return independent copies from
every accessor.
"""

__version__ = "0.1.0"

# Version compatibility check
import sys

if sys.version_info < (3, 8):
    raise RuntimeError("wgraph requires Python 3.8 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig
from .core.exceptions import (
    ConfigurationError,
    GraphOperationError,
    InvalidArgumentError,
    RepresentationInvariantError,
    ValidationError,
)
from .core.graph import AdjacencyGraph, EdgeListGraph, Graph, empty

__all__ = [
    "Graph",
    "AdjacencyGraph",
    "EdgeListGraph",
    "GraphConfig",
    "empty",
    "ConfigurationError",
    "GraphOperationError",
    "InvalidArgumentError",
    "RepresentationInvariantError",
    "ValidationError",
]
