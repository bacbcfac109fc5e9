"""
Abstract contract for mutable, directed, weighted graphs.

This module defines the Graph base class shared by every backing. A graph is a
set of vertex labels plus at most one directed edge per ordered pair of
labels, each edge carrying a positive integer weight. Weight zero is never
stored: passing it to ``set`` deletes an edge and receiving it from ``set``
means no edge existed.

Backings implement the six contract operations and a raw dump of their
storage. The base class derives the Python conveniences from those, holds the
lock that serializes access, and runs the representation-invariant check.
"""

from abc import ABC, abstractmethod
from threading import RLock
from typing import Dict, Generic, Hashable, Iterable, List, Optional, Set, Tuple, Type, TypeVar

from ..config import GraphConfig
from ..exceptions import RepresentationInvariantError
from ...utils.validation import GraphIntegrityValidator

L = TypeVar("L", bound=Hashable)
G = TypeVar("G", bound="Graph")

EdgeTriple = Tuple[L, L, int]


class Graph(ABC, Generic[L]):
    """
    A mutable weighted directed graph with labeled vertices.

    Vertices have distinct labels of an immutable, comparable type. Edges are
    directed and have positive integer weights; there is at most one edge for
    each ordered pair of vertices, and every edge endpoint is a vertex.

    Every accessor returns an independent copy; mutating a returned set or
    dict never changes the graph.

    Attributes:
        _config (GraphConfig): Backing configuration
        _state_lock (RLock): Lock held for the duration of every operation
    """

    def __init__(self, config: Optional[GraphConfig] = None):
        self._config = config if config is not None else GraphConfig()
        self._state_lock = RLock()

    @property
    def config(self) -> GraphConfig:
        return self._config

    @abstractmethod
    def add(self, vertex: L) -> bool:
        """
        Add a vertex to this graph.

        Args:
            vertex (L): Label for the new vertex

        Returns:
            bool: True if this graph did not already include the vertex,
            False if it did (in which case the graph is unchanged)

        Raises:
            InvalidArgumentError: If vertex is None
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """
        Add, change, or remove a weighted directed edge.

        If weight is nonzero, add an edge or update the weight of that edge;
        vertices with the given labels are added to the graph if they do not
        already exist. If weight is zero, remove the edge if it exists. The
        vertices are created even when weight is zero.

        Args:
            source (L): Label of the source vertex
            target (L): Label of the target vertex
            weight (int): Nonnegative weight of the edge

        Returns:
            int: The previous weight of the edge, or zero if there was no such edge

        Raises:
            InvalidArgumentError: If weight is negative or not an integer, or
                either label is None. The graph is left unchanged.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: L) -> bool:
        """
        Remove a vertex from this graph; any edges to or from it are also removed.

        Args:
            vertex (L): Label of the vertex to remove

        Returns:
            bool: True if this graph included the vertex, False otherwise
            (in which case the graph is unchanged)
        """
        raise NotImplementedError

    @abstractmethod
    def vertices(self) -> Set[L]:
        """Get all the vertices in this graph as a new set."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: L) -> Dict[L, int]:
        """
        Get the source vertices with directed edges to a target vertex.

        Args:
            target (L): A label

        Returns:
            Dict[L, int]: A new map whose keys are the labels of vertices with
            an edge into target and whose values are the weights of those
            edges. Empty when target has no incoming edges or is not a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: L) -> Dict[L, int]:
        """
        Get the target vertices with directed edges from a source vertex.

        Args:
            source (L): A label

        Returns:
            Dict[L, int]: A new map whose keys are the labels of vertices
            reached by an edge from source and whose values are the weights
            of those edges. Empty when source has no outgoing edges or is not
            a vertex.
        """
        raise NotImplementedError

    @abstractmethod
    def _dump(self) -> Tuple[List[L], List[EdgeTriple]]:
        """Return every stored vertex label and edge triple, in storage order."""
        raise NotImplementedError

    def _check_rep(self) -> None:
        """Validate the representation invariant when checking is enabled."""
        if not self._config.check_invariants:
            return
        vertices, edges = self._dump()
        result = GraphIntegrityValidator.validate(vertices, edges)
        if not result.is_valid:
            raise RepresentationInvariantError(
                f"{type(self).__name__} representation invariant violated: "
                + "; ".join(result.errors)
            )

    def edges(self) -> List[EdgeTriple]:
        """Get every edge as a (source, target, weight) triple, sorted by endpoints."""
        with self._state_lock:
            _, edges = self._dump()
        return sorted(edges, key=lambda edge: (edge[0], edge[1]))

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices()

    def __len__(self) -> int:
        return len(self.vertices())

    def __repr__(self) -> str:
        with self._state_lock:
            vertices, edges = self._dump()
        return f"<{type(self).__name__} vertices={len(vertices)} edges={len(edges)}>"

    @classmethod
    def from_edges(
        cls: Type[G], edges: Iterable[EdgeTriple], config: Optional[GraphConfig] = None
    ) -> G:
        """Create a graph of this backing from (source, target, weight) triples."""
        graph = cls(config=config)
        for source, target, weight in edges:
            graph.set(source, target, weight)
        return graph
