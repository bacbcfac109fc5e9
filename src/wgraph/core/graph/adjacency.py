"""
Adjacency graph backing.

The graph is stored as a list of vertex records, each owning the mapping of
its outgoing edges. Outgoing edges are found directly from the source record;
incoming edges are not indexed, so ``sources`` visits every record.

Abstraction function:
    The graph whose vertices are the labels of the records in ``_vertices``
    and which has an edge source -> target of weight w exactly when the
    record labeled source maps target to w.
Representation invariant:
    Record labels are defined and pairwise distinct; every mapped target is
    the label of some record; every mapped weight is positive.
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from ..config import GraphConfig
from ..models.base import validate_label, validate_weight
from ..models.vertex import Vertex
from . import formatting
from .base import EdgeTriple, Graph, L

logger = logging.getLogger(__name__)


class AdjacencyGraph(Graph[L]):
    """
    Graph backed by per-vertex records of outgoing edges.

    Attributes:
        _vertices (List[Vertex[L]]): Vertex records in creation order
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        super().__init__(config)
        self._vertices: List[Vertex[L]] = []
        self._check_rep()

    def _dump(self) -> Tuple[List[L], List[EdgeTriple]]:
        labels = [vertex.label for vertex in self._vertices]
        edges = [
            (vertex.label, target, weight)
            for vertex in self._vertices
            for target, weight in vertex.targets().items()
        ]
        return labels, edges

    def _find_vertex(self, label: L) -> Optional[Vertex[L]]:
        for vertex in self._vertices:
            if vertex.label == label:
                return vertex
        return None

    def _ensure_vertex(self, label: L) -> Vertex[L]:
        """Return the record for label, creating it if absent."""
        vertex = self._find_vertex(label)
        if vertex is None:
            vertex = Vertex(label)
            self._vertices.append(vertex)
            logger.debug("Added vertex %r", label)
        return vertex

    def add(self, vertex: L) -> bool:
        try:
            validate_label(vertex)
        except ValueError:
            logger.warning("Rejected vertex label %r", vertex)
            raise
        with self._state_lock:
            if self._find_vertex(vertex) is not None:
                return False
            self._ensure_vertex(vertex)
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
            source_vertex = self._ensure_vertex(source)
            # The target record must exist even though only the source's map changes.
            self._ensure_vertex(target)

            previous = source_vertex.set_target(target, weight)

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
            record = self._find_vertex(vertex)
            if record is None:
                return False
            self._vertices.remove(record)
            dropped = len(record.targets())
            for other in self._vertices:
                if other.remove_target(vertex):
                    dropped += 1
            logger.debug("Removed vertex %r and %d incident edges", vertex, dropped)
            self._check_rep()
            return True

    def vertices(self) -> Set[L]:
        with self._state_lock:
            return {vertex.label for vertex in self._vertices}

    def sources(self, target: L) -> Dict[L, int]:
        with self._state_lock:
            found: Dict[L, int] = {}
            for vertex in self._vertices:
                weight = vertex.weight_to(target)
                if weight:
                    found[vertex.label] = weight
            return found

    def targets(self, source: L) -> Dict[L, int]:
        with self._state_lock:
            vertex = self._find_vertex(source)
            if vertex is None:
                return {}
            return vertex.targets()

    def __str__(self) -> str:
        with self._state_lock:
            return formatting.format_adjacency(str(vertex) for vertex in self._vertices)
