"""
CSV ingestion for movie and rating records.

Usage:
    from moviegraph.data.loader import load_dataset

    dataset = load_dataset()
    dataset.movies[0]   # MovieRecord(id=1, title='Toy Story (1995)')

Files are read without a header: a header line simply fails to parse and
is skipped like any other malformed row. Blank lines are ignored and do not
count as rows.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from moviegraph.config import (
    MAX_RATING_MOVIE_ID,
    MOVIE_ROW_LIMIT,
    MOVIES_PATH,
    RATINGS_PATH,
)
from moviegraph.data.records import MovieRecord, RatingRecord

logger = logging.getLogger(__name__)


@dataclass
class Dataset:
    """
    Fully loaded input for one run.

    Attributes:
        movies: Movie records in file order
        ratings: Rating records in file order (already filtered by movie id)
    """

    movies: list[MovieRecord]
    ratings: list[RatingRecord]


def _read_rows(path: Path | str) -> Iterator[list[str]]:
    """
    Yield non-blank CSV rows.

    Undecodable bytes are kept as surrogates so a bad row can be rejected
    on its own instead of aborting the whole file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
        for row in csv.reader(f):
            if row:
                yield row


def _check_utf8(row: list[str]) -> None:
    """Raise ValueError if any field held invalid UTF-8."""
    for field in row:
        try:
            field.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError(f"invalid UTF-8 in field {field!r}") from None


def _parse_id(field: str) -> int:
    """Parse an unsigned integer: ASCII digits only, no sign, spaces or underscores."""
    if not (field.isascii() and field.isdigit()):
        raise ValueError(f"invalid id {field!r}")
    return int(field)


def _parse_score(field: str) -> float:
    """Parse a float without surrounding whitespace or digit separators."""
    if field != field.strip() or "_" in field:
        raise ValueError(f"invalid score {field!r}")
    try:
        return float(field)
    except ValueError:
        raise ValueError(f"invalid score {field!r}") from None


def load_movies(path: Path | str = MOVIES_PATH, limit: int = MOVIE_ROW_LIMIT) -> list[MovieRecord]:
    """
    Load movie records from a delimited file.

    Only the first ``limit`` rows are considered; malformed rows inside that
    range count toward the limit and are logged and skipped.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    logger.info(f"Loading movies from {path}...")
    movies: list[MovieRecord] = []

    for row_no, row in enumerate(_read_rows(path)):
        if row_no == limit:
            break
        try:
            _check_utf8(row)
            if len(row) < 2:
                raise ValueError(f"expected 2 fields, got {len(row)}")
            movie_id = _parse_id(row[0])
        except ValueError as e:
            logger.warning(f"Skipping movie row {row_no + 1}: {e}")
            continue
        movies.append(MovieRecord(movie_id, row[1]))

    logger.info(f"Loaded {len(movies):,} movies")
    return movies


def _parse_rating(row: list[str]) -> RatingRecord:
    """Parse ``user_id,movie_id,score`` or raise ValueError."""
    _check_utf8(row)
    if len(row) < 3:
        raise ValueError(f"expected 3 fields, got {len(row)}")
    return RatingRecord(_parse_id(row[0]), _parse_id(row[1]), _parse_score(row[2]))


def load_ratings(
    path: Path | str = RATINGS_PATH,
    max_movie_id: int = MAX_RATING_MOVIE_ID,
) -> list[RatingRecord]:
    """
    Load rating records from a delimited file.

    Ratings whose movie id exceeds ``max_movie_id`` are dropped.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    logger.info(f"Loading ratings from {path}...")
    ratings: list[RatingRecord] = []
    skipped = 0

    for row_no, row in enumerate(_read_rows(path), start=1):
        try:
            rating = _parse_rating(row)
        except ValueError as e:
            logger.warning(f"Skipping rating row {row_no}: {e}")
            skipped += 1
            continue
        if rating.movie_id <= max_movie_id:
            ratings.append(rating)

    logger.info(f"Loaded {len(ratings):,} ratings ({skipped:,} malformed rows skipped)")
    return ratings


def load_dataset(
    movies_path: Path | str = MOVIES_PATH,
    ratings_path: Path | str = RATINGS_PATH,
) -> Dataset:
    """Load both record files. Movies are read first, then ratings."""
    movies = load_movies(movies_path)
    ratings = load_ratings(ratings_path)
    return Dataset(movies=movies, ratings=ratings)
