"""
Directed, labelled graph of movies.

Nodes are identified only by their position in insertion order and carry a
movie title. Edges carry a rating score. At most one edge exists per
ordered (source, target) pair.
"""

from __future__ import annotations


class MovieGraph:
    """
    Append-only adjacency-list graph.

    Attributes:
        _labels: Node labels indexed by node position
        _adjacency: Outgoing target positions per node, in insertion order
        _weights: Edge label keyed by (source, target)
    """

    def __init__(self) -> None:
        self._labels: list[str] = []
        self._adjacency: list[list[int]] = []
        self._weights: dict[tuple[int, int], float] = {}

    # =========================================================================
    # Construction
    # =========================================================================

    def add_node(self, label: str) -> int:
        """Append a node and return its position."""
        self._labels.append(label)
        self._adjacency.append([])
        return len(self._labels) - 1

    def add_edge(self, source: int, target: int, weight: float) -> None:
        """
        Add a directed edge.

        Raises:
            IndexError: If either endpoint is not a node position
            ValueError: If the edge already exists
        """
        if not self.has_node(source) or not self.has_node(target):
            raise IndexError(f"Edge ({source}, {target}) out of range [0, {self.node_count()})")
        if (source, target) in self._weights:
            raise ValueError(f"Edge ({source}, {target}) already exists")
        self._adjacency[source].append(target)
        self._weights[(source, target)] = weight

    # =========================================================================
    # Core Accessors
    # =========================================================================

    def node_count(self) -> int:
        return len(self._labels)

    def edge_count(self) -> int:
        return len(self._weights)

    def has_node(self, position: int) -> bool:
        return 0 <= position < len(self._labels)

    def contains_edge(self, source: int, target: int) -> bool:
        return (source, target) in self._weights

    def label(self, position: int) -> str:
        """Get movie title by node position."""
        if self.has_node(position):
            return self._labels[position]
        raise IndexError(f"Position {position} out of range [0, {len(self._labels)})")

    def labels(self) -> list[str]:
        """All node labels in position order."""
        return list(self._labels)

    def neighbors(self, position: int) -> list[int]:
        """Outgoing neighbours of a node, or [] for unknown positions."""
        if not self.has_node(position):
            return []
        return self._adjacency[position]

    def edge_weight(self, source: int, target: int) -> float | None:
        """Get the score carried by an edge, or None if there is no such edge."""
        return self._weights.get((source, target))

    def edges(self) -> list[tuple[int, int, float]]:
        """All edges as (source, target, weight) in insertion order."""
        return [(s, t, w) for (s, t), w in self._weights.items()]

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run structural checks on the graph."""
        adjacency_pairs = [
            (source, target)
            for source, targets in enumerate(self._adjacency)
            for target in targets
        ]
        return {
            "labels_match_adjacency": len(self._labels) == len(self._adjacency),
            "no_duplicate_edges": len(adjacency_pairs) == len(set(adjacency_pairs)),
            "edge_counts_match": len(adjacency_pairs) == len(self._weights),
            "endpoints_in_range": all(
                self.has_node(s) and self.has_node(t) for s, t in self._weights
            ),
        }

    def stats(self) -> dict:
        """Get statistics about the graph."""
        out_degrees = [len(targets) for targets in self._adjacency]
        with_inbound = {target for _, target in self._weights}
        return {
            "nodes": self.node_count(),
            "edges": self.edge_count(),
            "isolated_nodes": sum(
                1 for pos, deg in enumerate(out_degrees)
                if deg == 0 and pos not in with_inbound
            ),
            "max_out_degree": max(out_degrees, default=0),
            "self_loops": sum(1 for s, t in self._weights if s == t),
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self.node_count()}, edges={self.edge_count()})"
