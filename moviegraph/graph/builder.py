"""
Graph construction from movie and rating records.

Nodes come from a window of the movie list (the first and last
``WINDOW_MARGIN`` records are skipped). Edges come from the same window of
the rating list: each rating links node ``movie_id - 1`` to node
``user_id - 1``. Both positions live in the single movie node space.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from itertools import islice
from typing import TypeVar

from moviegraph.config import WINDOW_MARGIN
from moviegraph.data.records import MovieRecord, RatingRecord
from moviegraph.graph.movie_graph import MovieGraph

logger = logging.getLogger(__name__)

T = TypeVar("T")


def windowed(records: Sequence[T], margin: int = WINDOW_MARGIN) -> list[T]:
    """
    Skip ``margin`` records, then take ``len(records) - 2 * margin`` more.

    Sequences with fewer than ``2 * margin`` records give an empty window.
    """
    take = max(0, len(records) - 2 * margin)
    return list(islice(records, margin, margin + take))


def movie_position_index(
    movies: Sequence[MovieRecord], margin: int = WINDOW_MARGIN
) -> dict[int, int]:
    """
    Map movie id to the node position its record receives in the graph.

    The graph keeps no such table; this rebuilds it from the same window.
    On duplicate ids the first occurrence wins.
    """
    index: dict[int, int] = {}
    for position, (movie_id, _title) in enumerate(windowed(movies, margin)):
        index.setdefault(movie_id, position)
    return index


def _id_to_position(identifier: int) -> int | None:
    """Convert a 1-based identifier to a node position, or None below 1."""
    if identifier < 1:
        return None
    return identifier - 1


def build_movie_graph(
    movies: Sequence[MovieRecord],
    ratings: Sequence[RatingRecord],
    margin: int = WINDOW_MARGIN,
) -> MovieGraph:
    """
    Build the movie graph.

    Args:
        movies: Movie records in load order
        ratings: Rating records in load order
        margin: Records skipped at each end of both sequences

    Returns:
        A new MovieGraph. Ratings that point outside the node range, use an
        identifier below 1, or repeat an existing (source, target) pair are
        dropped.
    """
    graph = MovieGraph()

    for _movie_id, title in windowed(movies, margin):
        graph.add_node(title)

    dropped: Counter[str] = Counter()
    for user_id, movie_id, score in windowed(ratings, margin):
        source = _id_to_position(movie_id)
        target = _id_to_position(user_id)

        if source is None or target is None:
            dropped["invalid_id"] += 1
            continue
        if not graph.has_node(source) or not graph.has_node(target):
            dropped["out_of_range"] += 1
            continue
        if graph.contains_edge(source, target):
            dropped["duplicate"] += 1
            continue

        graph.add_edge(source, target, score)

    if dropped:
        logger.debug(f"Dropped ratings: {dict(dropped)}")
    logger.info(f"Built graph with {graph.node_count():,} nodes and {graph.edge_count():,} edges")
    return graph
