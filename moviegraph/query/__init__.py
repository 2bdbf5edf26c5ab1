"""
Query module.

Provides pairwise degrees-of-separation queries:
- QueryDriver: Resolves movie ids and runs BFS for every pair
- PairResult: Outcome of one query
"""

from moviegraph.query.driver import (
    QueryDriver,
    candidate_position,
    format_result,
    run_queries,
    sample_movie_ids,
)
from moviegraph.query.state import PairResult

__all__ = [
    "PairResult",
    "QueryDriver",
    "candidate_position",
    "format_result",
    "run_queries",
    "sample_movie_ids",
]
