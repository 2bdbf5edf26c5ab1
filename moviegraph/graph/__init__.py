"""
Graph module.

Provides the movie graph, its builder and BFS pathfinding:
- MovieGraph: Directed graph with title-labelled nodes and score-labelled edges
- build_movie_graph: Windowed construction from movie and rating records
- shortest_path: Fewest-hops path via BFS
"""

from moviegraph.graph.bfs import degrees_of_separation, path_labels, shortest_path
from moviegraph.graph.builder import build_movie_graph, movie_position_index, windowed
from moviegraph.graph.movie_graph import MovieGraph

__all__ = [
    "MovieGraph",
    "build_movie_graph",
    "degrees_of_separation",
    "movie_position_index",
    "path_labels",
    "shortest_path",
    "windowed",
]
