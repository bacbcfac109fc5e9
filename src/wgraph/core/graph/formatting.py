"""
Text rendering of graph state for diagnostics.

Both backings render deterministically. Vertex labels and per-vertex targets
are listed in sorted order; edge sequences and vertex sequences keep the
backing's internal order.
"""

from typing import Hashable, Iterable, List


def format_labels(labels: Iterable[Hashable]) -> str:
    """Render labels as ``[a, b, c]`` in sorted order."""
    return "[" + ", ".join(str(label) for label in sorted(labels)) + "]"


def format_edge_list(labels: Iterable[Hashable], edge_lines: Iterable[str]) -> str:
    """
    Render the edge-list layout.

    Args:
        labels: The vertex labels
        edge_lines: One rendered line per stored edge, in storage order

    Returns:
        str: ``Vertices: [...]`` and ``Edges:`` headers followed by one
        newline-terminated line per edge
    """
    parts: List[str] = [f"Vertices: {format_labels(labels)}\n", "Edges:\n"]
    parts.extend(f"{line}\n" for line in edge_lines)
    return "".join(parts)


def format_adjacency(vertex_blocks: Iterable[str]) -> str:
    """Join per-vertex blocks with line breaks, skipping vertices without edges."""
    return "\n".join(block for block in vertex_blocks if block)
