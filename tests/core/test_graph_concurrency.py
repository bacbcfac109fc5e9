"""
Tests for thread-safe access to graph backings.
"""

import threading

from wgraph.core.config import GraphConfig

THREADS = 8
EDGES_PER_THREAD = 50


def test_concurrent_set_calls_keep_every_edge(graph_cls):
    """Test that concurrent writers on disjoint edges lose no updates."""
    graph = graph_cls(config=GraphConfig(check_invariants=False))
    barrier = threading.Barrier(THREADS)

    def writer(worker: int) -> None:
        barrier.wait()
        for i in range(EDGES_PER_THREAD):
            graph.set(f"w{worker}", f"v{i}", i + 1)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(THREADS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(graph.edges()) == THREADS * EDGES_PER_THREAD
    assert len(graph) == THREADS + EDGES_PER_THREAD
    for worker in range(THREADS):
        assert graph.targets(f"w{worker}") == {f"v{i}": i + 1 for i in range(EDGES_PER_THREAD)}


def test_snapshot_iteration_during_mutation(graph_cls):
    """Test that iterating a snapshot is unaffected by a concurrent writer."""
    graph = graph_cls(config=GraphConfig(check_invariants=False))
    for i in range(100):
        graph.set("hub", i, 1)

    snapshot = graph.targets("hub")
    done = threading.Event()

    def mutator() -> None:
        for i in range(100):
            graph.remove(i)
        done.set()

    thread = threading.Thread(target=mutator)
    thread.start()
    total = sum(weight for weight in snapshot.values())
    thread.join()

    assert done.is_set()
    assert total == 100
    assert graph.targets("hub") == {}
