"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from moviegraph.data.records import MovieRecord, RatingRecord
from moviegraph.graph.movie_graph import MovieGraph


def make_movies(count: int) -> list[MovieRecord]:
    """Movies with ids 1..count and titles M1..Mcount."""
    return [MovieRecord(i, f"M{i}") for i in range(1, count + 1)]


def pad_ratings(inner: list[RatingRecord], margin: int = 10) -> list[RatingRecord]:
    """
    Surround ratings with filler so they land inside the builder's window.

    Filler rows use user id 0, which never produces an edge.
    """
    filler = [RatingRecord(0, 0, 0.0)] * margin
    return filler + list(inner) + filler


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def chain_graph() -> MovieGraph:
    """
    Small hand-built graph.

    0 -> 1 -> 2 -> 3, plus a shortcut 0 -> 2 and an isolated node 4.
    Node 5 points back at 0 but is unreachable from it.
    """
    graph = MovieGraph()
    for title in ["A", "B", "C", "D", "E", "F"]:
        graph.add_node(title)
    graph.add_edge(0, 1, 4.0)
    graph.add_edge(1, 2, 3.5)
    graph.add_edge(2, 3, 5.0)
    graph.add_edge(0, 2, 1.0)
    graph.add_edge(5, 0, 2.0)
    return graph


@pytest.fixture
def movies_csv(tmp_path: Path) -> Path:
    """Movie file with a header line and one malformed row."""
    path = tmp_path / "movie.csv"
    path.write_text(
        "movieId,title,genres\n"
        "1,Toy Story (1995),Adventure|Animation\n"
        "2,Jumanji (1995),Adventure\n"
        "abc,Broken Row,Drama\n"
        '3,"Grumpier Old Men, The (1995)",Comedy\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def ratings_csv(tmp_path: Path) -> Path:
    """Rating file with a header line, a bad score and a high movie id."""
    path = tmp_path / "rating.csv"
    path.write_text(
        "userId,movieId,rating,timestamp\n"
        "1,2,3.5,2005-04-02 23:53:47\n"
        "1,29,3.5,2005-04-02 23:31:16\n"
        "2,101,4.0,2005-04-02 23:33:39\n"
        "3,5,oops,2005-04-02 23:33:39\n"
        "4,100,5.0,2005-04-02 23:33:39\n",
        encoding="utf-8",
    )
    return path
