"""
Tests for graph configuration.
"""

import pytest

from wgraph.core.config import GraphConfig
from wgraph.core.exceptions import ConfigurationError


def test_default_config():
    """Test default configuration values."""
    config = GraphConfig()

    assert config.backing == "adjacency"
    assert config.check_invariants is __debug__


def test_edge_list_backing():
    """Test selecting the edge-list backing."""
    assert GraphConfig(backing="edge_list").backing == "edge_list"


def test_unknown_backing():
    """Test that unknown backing names are rejected."""
    with pytest.raises(ConfigurationError, match="Unknown graph backing 'matrix'"):
        GraphConfig(backing="matrix")


def test_repr():
    """Test the configuration representation."""
    config = GraphConfig(backing="edge_list", check_invariants=False)

    assert repr(config) == "GraphConfig(backing='edge_list', check_invariants=False)"
