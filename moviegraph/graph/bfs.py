"""
Breadth-first shortest paths over a MovieGraph.

Edges are followed in their stored direction only and every edge costs one
hop; the scores they carry are ignored. Each call allocates its own
traversal state, so one graph can serve concurrent queries.
"""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from moviegraph.graph.movie_graph import MovieGraph

logger = logging.getLogger(__name__)

NO_PARENT = -1


def _reconstruct(parents: np.ndarray, start: int, end: int) -> list[int]:
    """Walk predecessor links from end back to start and reverse."""
    path = [end]
    current = end
    while current != start:
        current = int(parents[current])
        path.append(current)
    path.reverse()
    return path


def shortest_path(graph: MovieGraph, start: int, end: int) -> list[int] | None:
    """
    Find the fewest-hops directed path from start to end.

    A node's predecessor is recorded the first time it is discovered, which
    in BFS order is always along a shortest path.

    Args:
        graph: Graph to search
        start: Start node position
        end: End node position

    Returns:
        Node positions from start to end inclusive, ``[start]`` when
        start == end, or None if end is unreachable (or either position is
        not in the graph)
    """
    node_count = graph.node_count()
    if not (0 <= start < node_count and 0 <= end < node_count):
        logger.debug(f"Positions ({start}, {end}) outside graph of {node_count} nodes")
        return None

    visited = np.zeros(node_count, dtype=bool)
    parents = np.full(node_count, NO_PARENT, dtype=np.int64)

    visited[start] = True
    queue = deque([start])

    while queue:
        node = queue.popleft()

        if node == end:
            return _reconstruct(parents, start, end)

        for neighbor in graph.neighbors(node):
            if visited[neighbor]:
                continue
            visited[neighbor] = True
            parents[neighbor] = node
            queue.append(neighbor)

    return None


def degrees_of_separation(graph: MovieGraph, start: int, end: int) -> int | None:
    """Hop count of the shortest path, or None if there is none."""
    path = shortest_path(graph, start, end)
    if path is None:
        return None
    return len(path) - 1


def path_labels(graph: MovieGraph, path: list[int]) -> list[str]:
    """Movie titles along a path."""
    return [graph.label(position) for position in path]
