"""
Vertex record for the adjacency backing.

Each vertex owns the mapping of its outgoing edges, from target label to
weight. Incoming edges are not indexed; they live in the records of their
source vertices.
"""

from typing import Dict, Generic, Hashable, TypeVar

from .base import NO_EDGE, validate_label, validate_weight

L = TypeVar("L", bound=Hashable)


class Vertex(Generic[L]):
    """
    Mutable vertex with a label and its weighted outgoing edges.

    Attributes:
        label (L): The vertex label
        _targets (Dict[L, int]): Outgoing edges, target label to weight
    """

    def __init__(self, label: L):
        validate_label(label)
        self._label = label
        self._targets: Dict[L, int] = {}

    @property
    def label(self) -> L:
        return self._label

    def targets(self) -> Dict[L, int]:
        """Return a copy of the outgoing edges."""
        return dict(self._targets)

    def weight_to(self, target: L) -> int:
        """Return the weight of the edge to target, or 0 if there is none."""
        return self._targets.get(target, NO_EDGE)

    def set_target(self, target: L, weight: int) -> int:
        """
        Set the weight of the edge to target.

        A weight of zero removes the edge.

        Args:
            target (L): Label of the target vertex
            weight (int): New weight, zero to delete

        Returns:
            int: The previous weight, or 0 if no edge existed

        Raises:
            InvalidArgumentError: If weight is negative or not an integer
        """
        validate_weight(weight)
        previous = self._targets.get(target, NO_EDGE)
        if weight == NO_EDGE:
            self._targets.pop(target, None)
        else:
            self._targets[target] = weight
        return previous

    def remove_target(self, target: L) -> int:
        """Drop the edge to target if present and return its weight, or 0."""
        return self._targets.pop(target, NO_EDGE)

    def __str__(self) -> str:
        # Targets render in sorted order so output is stable across runs.
        return "\n".join(
            f"({self._label} -> {target}, {self._targets[target]})"
            for target in sorted(self._targets)
        )

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, targets={self._targets!r})"
