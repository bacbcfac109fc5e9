"""
Construction of empty graphs by backing name.
"""

from typing import Dict, Hashable, Optional, Type

from ..config import ADJACENCY, EDGE_LIST, GraphConfig
from ..exceptions import ConfigurationError
from .adjacency import AdjacencyGraph
from .base import Graph
from .edge_list import EdgeListGraph

BACKINGS: Dict[str, Type[Graph]] = {
    ADJACENCY: AdjacencyGraph,
    EDGE_LIST: EdgeListGraph,
}


def empty(config: Optional[GraphConfig] = None, backing: Optional[str] = None) -> Graph[Hashable]:
    """
    Create an empty graph.

    Args:
        config (Optional[GraphConfig]): Configuration passed to the backing.
            Defaults to ``GraphConfig()``.
        backing (Optional[str]): Backing name overriding ``config.backing``

    Returns:
        Graph: A new graph with no vertices and no edges

    Raises:
        ConfigurationError: If the backing name is unknown
    """
    config = config if config is not None else GraphConfig()
    name = backing if backing is not None else config.backing
    try:
        graph_cls = BACKINGS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown graph backing {name!r}; expected one of {', '.join(BACKINGS)}"
        ) from None
    return graph_cls(config=config)
