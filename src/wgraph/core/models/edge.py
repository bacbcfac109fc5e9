"""
Edge record for the edge-list backing.

An edge is identified by its ordered pair of endpoints and carries a strictly
positive integer weight. Records are immutable: the edge-list backing replaces
a record rather than updating it in place.
"""

from dataclasses import dataclass
from typing import Generic, Hashable, Tuple, TypeVar

from .base import validate_weight

L = TypeVar("L", bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[L]):
    """
    Directed, weighted edge between two vertex labels.

    Attributes:
        source (L): Label of the vertex the edge leaves
        target (L): Label of the vertex the edge enters
        weight (int): Edge weight, always greater than zero
    """

    source: L
    target: L
    weight: int

    def __post_init__(self):
        """Validate edge after initialization."""
        validate_weight(self.weight, minimum=1)

    @property
    def key(self) -> Tuple[L, L]:
        """The ordered endpoint pair identifying this edge."""
        return (self.source, self.target)

    def connects(self, source: L, target: L) -> bool:
        return self.source == source and self.target == target

    def touches(self, vertex: L) -> bool:
        """Return True if vertex is either endpoint of this edge."""
        return self.source == vertex or self.target == vertex

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} (weight: {self.weight})"
