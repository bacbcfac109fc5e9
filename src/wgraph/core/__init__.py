"""Core graph functionality."""

from .config import GraphConfig
from .exceptions import (
    ConfigurationError,
    GraphOperationError,
    InvalidArgumentError,
    RepresentationInvariantError,
    ValidationError,
)
from .graph import AdjacencyGraph, EdgeListGraph, Graph, empty
from .models import Edge, Vertex

__all__ = [
    "AdjacencyGraph",
    "ConfigurationError",
    "Edge",
    "EdgeListGraph",
    "Graph",
    "GraphConfig",
    "GraphOperationError",
    "InvalidArgumentError",
    "RepresentationInvariantError",
    "ValidationError",
    "Vertex",
    "empty",
]
