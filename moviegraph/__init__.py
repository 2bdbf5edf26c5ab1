"""
Movie Degrees of Separation.

Builds a directed graph from movie and rating records and answers
shortest-path queries between movies with breadth-first search.
"""

__version__ = "0.1.0"
