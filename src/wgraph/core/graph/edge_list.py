"""
Edge-list graph backing.

The graph is stored as a set of vertex labels plus a list of immutable edge
records. Vertex insertion is O(1); any lookup by edge endpoint scans the edge
list, so ``set``, ``sources``, ``targets`` and ``remove`` are O(E).

Abstraction function:
    The graph whose vertices are the labels in ``_vertices`` and whose edges
    are the records in ``_edges``.
Representation invariant:
    Every edge endpoint is in ``_vertices``; no two records share an ordered
    endpoint pair; every record has a positive weight.
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from ..config import GraphConfig
from ..models.base import NO_EDGE, validate_label, validate_weight
from ..models.edge import Edge
from . import formatting
from .base import EdgeTriple, Graph, L

logger = logging.getLogger(__name__)


class EdgeListGraph(Graph[L]):
    """
    Graph backed by a vertex set and a list of edge records.

    Attributes:
        _vertices (Set[L]): The vertex labels
        _edges (List[Edge[L]]): Stored edges in insertion order; an edge whose
            weight changes moves to the end
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        super().__init__(config)
        self._vertices: Set[L] = set()
        self._edges: List[Edge[L]] = []
        self._check_rep()

    def _dump(self) -> Tuple[List[L], List[EdgeTriple]]:
        return (
            list(self._vertices),
            [(edge.source, edge.target, edge.weight) for edge in self._edges],
        )

    def _find_edge(self, source: L, target: L) -> Optional[int]:
        """Return the index of the edge source -> target, or None."""
        for index, edge in enumerate(self._edges):
            if edge.connects(source, target):
                return index
        return None

    def add(self, vertex: L) -> bool:
        try:
            validate_label(vertex)
        except ValueError:
            logger.warning("Rejected vertex label %r", vertex)
            raise
        with self._state_lock:
            if vertex in self._vertices:
                return False
            self._vertices.add(vertex)
            logger.debug("Added vertex %r", vertex)
            self._check_rep()
            return True

    def set(self, source: L, target: L, weight: int) -> int:
        try:
            validate_label(source)
            validate_label(target)
            validate_weight(weight)
        except ValueError:
            logger.warning(
                "Rejected edge %r -> %r with weight %r", source, target, weight
            )
            raise

        with self._state_lock:
            self.add(source)
            self.add(target)

            previous = NO_EDGE
            index = self._find_edge(source, target)
            if index is not None:
                previous = self._edges.pop(index).weight
            if weight > NO_EDGE:
                self._edges.append(Edge(source, target, weight))

            if previous and weight:
                logger.debug("Updated edge %r -> %r: %d -> %d", source, target, previous, weight)
            elif weight:
                logger.debug("Created edge %r -> %r with weight %d", source, target, weight)
            elif previous:
                logger.debug("Deleted edge %r -> %r (weight %d)", source, target, previous)

            self._check_rep()
            return previous

    def remove(self, vertex: L) -> bool:
        with self._state_lock:
            if vertex not in self._vertices:
                return False
            self._vertices.remove(vertex)
            kept = [edge for edge in self._edges if not edge.touches(vertex)]
            dropped = len(self._edges) - len(kept)
            self._edges = kept
            logger.debug("Removed vertex %r and %d incident edges", vertex, dropped)
            self._check_rep()
            return True

    def vertices(self) -> Set[L]:
        with self._state_lock:
            return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        with self._state_lock:
            return {edge.source: edge.weight for edge in self._edges if edge.target == target}

    def targets(self, source: L) -> Dict[L, int]:
        with self._state_lock:
            return {edge.target: edge.weight for edge in self._edges if edge.source == source}

    def __str__(self) -> str:
        with self._state_lock:
            return formatting.format_edge_list(
                self._vertices, (str(edge) for edge in self._edges)
            )
