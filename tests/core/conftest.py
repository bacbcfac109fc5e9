"""Shared test fixtures."""

import pytest

from wgraph.core.config import GraphConfig
from wgraph.core.graph import AdjacencyGraph, EdgeListGraph

BACKING_CLASSES = [EdgeListGraph, AdjacencyGraph]


@pytest.fixture(params=BACKING_CLASSES, ids=lambda cls: cls.__name__)
def graph_cls(request):
    """Fixture providing each backing class in turn."""
    return request.param


@pytest.fixture
def empty_graph(graph_cls):
    """Fixture providing a new empty graph of each backing, with invariant checks on."""
    return graph_cls(config=GraphConfig(check_invariants=True))


@pytest.fixture
def sample_graph(empty_graph):
    """Fixture providing a small graph: A->B (5), A->C (3), C->B (4), D isolated."""
    empty_graph.set("A", "B", 5)
    empty_graph.set("A", "C", 3)
    empty_graph.set("C", "B", 4)
    empty_graph.add("D")
    return empty_graph
