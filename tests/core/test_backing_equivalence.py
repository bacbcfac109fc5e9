"""
Cross-backing equivalence tests.

The same sequence of operations is applied to an edge-list graph and an
adjacency graph; their return values and every observable query must agree.
"""

import random

import pytest

from wgraph.core.config import GraphConfig
from wgraph.core.exceptions import InvalidArgumentError
from wgraph.core.graph import AdjacencyGraph, EdgeListGraph

LABELS = ["A", "B", "C", "D", "E", "F"]


def apply(graph, operation):
    """Apply one operation tuple and return its result, or the exception type raised."""
    name, *args = operation
    try:
        return getattr(graph, name)(*args)
    except InvalidArgumentError as e:
        return type(e)


def random_operations(rng, count):
    """Generate a random mix of add, set and remove operations."""
    operations = []
    for _ in range(count):
        kind = rng.random()
        if kind < 0.2:
            operations.append(("add", rng.choice(LABELS)))
        elif kind < 0.85:
            weight = rng.choice([0, 0, 1, 2, 5, 10, -1])
            operations.append(("set", rng.choice(LABELS), rng.choice(LABELS), weight))
        else:
            operations.append(("remove", rng.choice(LABELS)))
    return operations


def assert_same_state(first, second):
    """Assert two graphs agree on every observable query."""
    assert first.vertices() == second.vertices()
    assert first.edges() == second.edges()
    for label in LABELS:
        assert first.sources(label) == second.sources(label)
        assert first.targets(label) == second.targets(label)


def assert_invariants(graph):
    """Assert the abstract invariants through the public interface only."""
    vertices = graph.vertices()
    pairs = set()
    for source, target, weight in graph.edges():
        assert source in vertices
        assert target in vertices
        assert weight > 0
        assert (source, target) not in pairs
        pairs.add((source, target))
        assert graph.targets(source)[target] == weight
        assert graph.sources(target)[source] == weight


@pytest.mark.parametrize("seed", range(20))
def test_random_operation_sequences_agree(seed):
    """Test that both backings behave identically on random operation sequences."""
    rng = random.Random(seed)
    config = GraphConfig(check_invariants=True)
    edge_list = EdgeListGraph(config=config)
    adjacency = AdjacencyGraph(config=config)

    for operation in random_operations(rng, 60):
        assert apply(edge_list, operation) == apply(adjacency, operation)
        assert_same_state(edge_list, adjacency)
        assert_invariants(edge_list)
        assert_invariants(adjacency)


def test_scripted_sequence_agrees():
    """Test a hand-written sequence covering updates, deletes and cascades."""
    operations = [
        ("set", "A", "B", 3),
        ("set", "C", "B", 4),
        ("set", "B", "A", 1),
        ("add", "D"),
        ("set", "A", "B", 0),
        ("set", "D", "D", 2),
        ("remove", "B"),
        ("set", "A", "C", -5),
        ("remove", "Z"),
        ("set", "C", "A", 9),
    ]
    edge_list = EdgeListGraph()
    adjacency = AdjacencyGraph()

    results = [apply(edge_list, operation) for operation in operations]
    assert results == [apply(adjacency, operation) for operation in operations]
    assert results == [0, 0, 0, True, 3, 0, True, InvalidArgumentError, False, 0]
    assert_same_state(edge_list, adjacency)
    assert edge_list.edges() == [("C", "A", 9), ("D", "D", 2)]
