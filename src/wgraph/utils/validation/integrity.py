"""
Representation Integrity Validation for Graph Backings

This module checks the structural invariants every graph backing must hold
before and after each public operation:

- Vertex labels are defined and pairwise distinct
- No two stored edges share the same (source, target) pair
- Every stored edge has a strictly positive integer weight
- Every edge endpoint is a member of the vertex set

The validator works on a raw dump of a backing's storage rather than on its
public accessors, so it sees duplicates and zero weights that the accessors
would hide.
"""

from typing import Any, Hashable, Iterable, List, Set, Tuple

from .base import CustomRule, RangeRule, ValidationResult, is_integer

EdgeTriple = Tuple[Hashable, Hashable, Any]


class GraphIntegrityValidator:
    """
    Validator for the representation invariant shared by all graph backings.

    This class provides static methods that inspect the vertices and edges a
    backing actually stores and report every violated invariant.
    """

    _weight_type_rule = CustomRule(is_integer, "Edge weight {value!r} must be an integer")
    _weight_range_rule = RangeRule(min_value=1, error_message="Edge weight {value} must be positive")

    @staticmethod
    def _validate_vertices(vertices: List[Hashable]) -> List[str]:
        """
        Validate vertex labels.

        Args:
            vertices: Every vertex label held by the backing, in storage order

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        seen: Set[Hashable] = set()
        for label in vertices:
            if label is None:
                errors.append("Vertex label must not be None")
                continue
            if label in seen:
                errors.append(f"Duplicate vertex label: {label!r}")
            seen.add(label)
        return errors

    @staticmethod
    def _validate_edges(vertex_set: Set[Hashable], edges: List[EdgeTriple]) -> List[str]:
        """
        Validate stored edges against the vertex set.

        Args:
            vertex_set: The set of vertex labels
            edges: Every stored edge as a (source, target, weight) triple

        Returns:
            List[str]: List of validation error messages
        """
        errors = []
        seen_pairs: Set[Tuple[Hashable, Hashable]] = set()
        for source, target, weight in edges:
            pair = (source, target)
            if pair in seen_pairs:
                errors.append(f"Duplicate edge: {source!r} -> {target!r}")
            seen_pairs.add(pair)

            weight_error = GraphIntegrityValidator._weight_type_rule.check(
                weight
            ) or GraphIntegrityValidator._weight_range_rule.check(weight)
            if weight_error:
                errors.append(f"{weight_error} on edge {source!r} -> {target!r}")

            if source not in vertex_set:
                errors.append(f"Edge source {source!r} is not a vertex")
            if target not in vertex_set:
                errors.append(f"Edge target {target!r} is not a vertex")
        return errors

    @staticmethod
    def validate(vertices: Iterable[Hashable], edges: Iterable[EdgeTriple]) -> ValidationResult:
        """
        Validate a backing's representation.

        Args:
            vertices: Every vertex label held by the backing
            edges: Every stored edge as a (source, target, weight) triple

        Returns:
            ValidationResult containing validation details and any errors
        """
        vertex_list = list(vertices)
        edge_list = list(edges)

        errors = GraphIntegrityValidator._validate_vertices(vertex_list)
        vertex_set = {label for label in vertex_list if label is not None}
        errors.extend(GraphIntegrityValidator._validate_edges(vertex_set, edge_list))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            context={"vertex_count": len(vertex_list), "edge_count": len(edge_list)},
        )
