"""
Record types handed from ingestion to the graph builder.

Both are plain immutable tuples, so ``(1, "Toy Story")`` and
``MovieRecord(1, "Toy Story")`` are interchangeable.
"""

from __future__ import annotations

from typing import NamedTuple


class MovieRecord(NamedTuple):
    """
    A single movie row.

    Attributes:
        id: Externally assigned movie identifier (not guaranteed contiguous)
        title: Movie title, used as the node label
    """

    id: int
    title: str


class RatingRecord(NamedTuple):
    """
    A single user rating row.

    Attributes:
        user_id: Identifier of the rating user
        movie_id: Identifier of the rated movie
        score: Rating value, carried as the edge label
    """

    user_id: int
    movie_id: int
    score: float
