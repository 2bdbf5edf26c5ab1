"""
Unit tests for the MovieGraph container.
"""

import pytest

from moviegraph.graph.movie_graph import MovieGraph


class TestConstruction:
    """Test adding nodes and edges."""

    def test_add_node_returns_position(self):
        """Positions are assigned in insertion order."""
        graph = MovieGraph()
        assert graph.add_node("A") == 0
        assert graph.add_node("B") == 1
        assert graph.node_count() == 2

    def test_add_edge_out_of_range_raises(self):
        """Edges must connect existing nodes."""
        graph = MovieGraph()
        graph.add_node("A")
        with pytest.raises(IndexError):
            graph.add_edge(0, 1, 1.0)

    def test_add_duplicate_edge_raises(self):
        """A pair can only be linked once."""
        graph = MovieGraph()
        graph.add_node("A")
        graph.add_node("B")
        graph.add_edge(0, 1, 1.0)
        with pytest.raises(ValueError):
            graph.add_edge(0, 1, 2.0)


class TestAccessors:
    """Test read accessors."""

    def test_label_valid(self, chain_graph):
        """Should return title for valid position."""
        assert chain_graph.label(0) == "A"

    def test_label_invalid_raises(self, chain_graph):
        """Should raise IndexError for invalid position."""
        with pytest.raises(IndexError):
            chain_graph.label(-1)
        with pytest.raises(IndexError):
            chain_graph.label(6)

    def test_neighbors_in_insertion_order(self, chain_graph):
        """Outgoing neighbours keep insertion order."""
        assert chain_graph.neighbors(0) == [1, 2]

    def test_neighbors_unknown_position(self, chain_graph):
        """Unknown position has no neighbours."""
        assert chain_graph.neighbors(42) == []

    def test_edge_weight(self, chain_graph):
        """Scores are stored on edges."""
        assert chain_graph.edge_weight(1, 2) == 3.5
        assert chain_graph.edge_weight(2, 1) is None

    def test_contains_edge_directed(self, chain_graph):
        """Edges are directed."""
        assert chain_graph.contains_edge(0, 1)
        assert not chain_graph.contains_edge(1, 0)


class TestValidation:
    """Test validation and stats methods."""

    def test_validate_all_pass(self, chain_graph):
        """All validation checks should pass."""
        validation = chain_graph.validate()
        assert all(validation.values()), f"Failed checks: {validation}"

    def test_stats(self, chain_graph):
        """Stats reflect the fixture graph."""
        stats = chain_graph.stats()
        assert stats["nodes"] == 6
        assert stats["edges"] == 5
        assert stats["isolated_nodes"] == 1
        assert stats["max_out_degree"] == 2
        assert stats["self_loops"] == 0

    def test_stats_empty_graph(self):
        """Empty graph stats are all zero."""
        assert MovieGraph().stats() == {
            "nodes": 0,
            "edges": 0,
            "isolated_nodes": 0,
            "max_out_degree": 0,
            "self_loops": 0,
        }
