"""
Data module.

Provides the record tuples and CSV loaders feeding the graph builder.

Usage:
    from moviegraph.data import load_dataset

    dataset = load_dataset("data/movie.csv", "data/rating.csv")
"""

from moviegraph.data.loader import Dataset, load_dataset, load_movies, load_ratings
from moviegraph.data.records import MovieRecord, RatingRecord

__all__ = [
    "Dataset",
    "MovieRecord",
    "RatingRecord",
    "load_dataset",
    "load_movies",
    "load_ratings",
]
