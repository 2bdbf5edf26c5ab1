"""
Pairwise degrees-of-separation queries over a built movie graph.

Samples movie ids, turns each into a candidate node position and runs BFS
for every unordered pair of valid candidates.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Literal

import numpy as np

from moviegraph.config import DEFAULT_SAMPLE_SIZE, DEFAULT_WORKERS
from moviegraph.data.records import MovieRecord
from moviegraph.graph.bfs import path_labels, shortest_path
from moviegraph.graph.movie_graph import MovieGraph
from moviegraph.query.state import PairResult

logger = logging.getLogger(__name__)

ResolveMode = Literal["arithmetic", "lookup"]


def sample_movie_ids(
    movies: Sequence[MovieRecord],
    k: int = DEFAULT_SAMPLE_SIZE,
    seed: int | None = None,
) -> list[int]:
    """
    Pick up to k movie ids without replacement.

    If fewer than k movies are loaded, every id is returned in random order.
    """
    count = min(k, len(movies))
    if count <= 0:
        return []
    rng = np.random.default_rng(seed)
    chosen = rng.choice(len(movies), size=count, replace=False)
    return [movies[int(i)][0] for i in chosen]


def candidate_position(movie_id: int | str, node_count: int) -> int | None:
    """
    Convert a movie id to a node position via ``id - 1``.

    Returns None for non-numeric ids and for ids outside ``[1, node_count]``.
    """
    try:
        idx = int(movie_id)
    except (TypeError, ValueError):
        return None
    if 1 <= idx <= node_count:
        return idx - 1
    return None


class QueryDriver:
    """
    Runs shortest-path queries for every pair of sampled movies.

    Two ways of resolving a movie id to a node are supported:
    - arithmetic: ``id - 1``, matching how the builder reads rating ids
    - lookup: the explicit id -> position table from ``movie_position_index``
    """

    def __init__(
        self,
        graph: MovieGraph,
        resolve: ResolveMode = "arithmetic",
        position_index: dict[int, int] | None = None,
        workers: int = DEFAULT_WORKERS,
    ) -> None:
        """
        Initialize the driver.

        Args:
            graph: Built graph, treated as read-only
            resolve: Id resolution mode
            position_index: Required when resolve == "lookup"
            workers: Thread count for pairwise queries (1 = sequential)

        Raises:
            ValueError: On an unknown mode, a missing index or workers < 1
        """
        if resolve not in ("arithmetic", "lookup"):
            raise ValueError(f"Unknown resolve mode '{resolve}'. Available: arithmetic, lookup")
        if resolve == "lookup" and position_index is None:
            raise ValueError("resolve='lookup' requires a position_index")
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")

        self._graph = graph
        self._resolve = resolve
        self._position_index = position_index or {}
        self._workers = workers

    def resolve(self, movie_id: int | str) -> int | None:
        """Node position for a movie id, or None if it cannot be queried."""
        if self._resolve == "arithmetic":
            return candidate_position(movie_id, self._graph.node_count())

        try:
            position = self._position_index.get(int(movie_id))
        except (TypeError, ValueError):
            return None
        if position is None or not self._graph.has_node(position):
            return None
        return position

    def candidates(self, movie_ids: Sequence[int | str]) -> list[int]:
        """Valid node positions for the given ids, in input order."""
        positions = []
        for movie_id in movie_ids:
            position = self.resolve(movie_id)
            if position is None:
                logger.debug(f"Skipping movie id {movie_id!r}: no node in graph")
                continue
            positions.append(position)
        return positions

    def query(self, start: int, end: int) -> PairResult:
        """Run one shortest-path query."""
        path = shortest_path(self._graph, start, end)
        return PairResult(
            start=start,
            end=end,
            start_title=self._graph.label(start),
            end_title=self._graph.label(end),
            path=path,
            path_titles=path_labels(self._graph, path) if path is not None else [],
        )

    def run(self, movie_ids: Sequence[int | str]) -> list[PairResult]:
        """
        Query every unordered pair of valid candidates.

        Results are ordered by (i, j) over candidate order regardless of the
        worker count.
        """
        positions = self.candidates(movie_ids)
        pairs = [
            (positions[i], positions[j])
            for i in range(len(positions))
            for j in range(i + 1, len(positions))
        ]
        logger.info(f"Running {len(pairs)} queries over {len(positions)} candidate movies")

        if self._workers == 1:
            return [self.query(start, end) for start, end in pairs]

        with ThreadPoolExecutor(max_workers=self._workers) as executor:
            futures = [executor.submit(self.query, start, end) for start, end in pairs]
            return [future.result() for future in futures]


def run_queries(
    graph: MovieGraph,
    movie_ids: Sequence[int | str],
    workers: int = DEFAULT_WORKERS,
    resolve: ResolveMode = "arithmetic",
    position_index: dict[int, int] | None = None,
) -> list[PairResult]:
    """Query every unordered pair of the given movie ids. See QueryDriver."""
    driver = QueryDriver(graph, resolve=resolve, position_index=position_index, workers=workers)
    return driver.run(movie_ids)


def format_result(result: PairResult) -> list[str]:
    """Render a query result as output lines."""
    if not result.found:
        return [f"[-] No path found between {result.start_title} and {result.end_title}"]
    return [
        f"[+] Shortest path between {result.start_title} and {result.end_title}:",
        *result.path_titles,
    ]
