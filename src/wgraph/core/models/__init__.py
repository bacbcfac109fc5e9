"""
Record types backing the graph representations.

``Edge`` is the immutable record stored by the edge-list backing; ``Vertex``
is the per-vertex record owned by the adjacency backing.
"""

from .base import NO_EDGE, validate_label, validate_weight
from .edge import Edge
from .vertex import Vertex

__all__ = [
    "NO_EDGE",
    "validate_label",
    "validate_weight",
    "Edge",
    "Vertex",
]
