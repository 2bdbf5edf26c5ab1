#!/usr/bin/env python3
"""
Six Degrees of Separation CLI - shortest paths between random movies.

Usage:
    python scripts/six_degrees.py
    python scripts/six_degrees.py --movies data/movie.csv --ratings data/rating.csv
    python scripts/six_degrees.py --sample-size 10 --seed 42 --workers 4
    python scripts/six_degrees.py --resolve lookup -v

Resolve modes:
    arithmetic - movie id N is node N-1 (same rule the builder uses for ratings)
    lookup     - movie id is looked up in the window it was loaded from
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from moviegraph.config import (  # noqa: E402 - must be after sys.path modification
    DEFAULT_SAMPLE_SIZE,
    DEFAULT_WORKERS,
    LOG_FORMAT,
    LOG_LEVEL,
    MOVIES_PATH,
    RATINGS_PATH,
    get_missing_data_files,
)
from moviegraph.data import load_dataset  # noqa: E402
from moviegraph.graph import build_movie_graph, movie_position_index  # noqa: E402
from moviegraph.query import format_result, run_queries, sample_movie_ids  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find degrees of separation between randomly chosen movies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--movies",
        type=Path,
        default=MOVIES_PATH,
        help=f"Movie CSV file (default: {MOVIES_PATH})",
    )
    parser.add_argument(
        "--ratings",
        type=Path,
        default=RATINGS_PATH,
        help=f"Rating CSV file (default: {RATINGS_PATH})",
    )
    parser.add_argument(
        "--sample-size",
        type=int,
        default=DEFAULT_SAMPLE_SIZE,
        help=f"Number of movies to sample (default: {DEFAULT_SAMPLE_SIZE})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible sampling",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help=f"Threads for pairwise queries (default: {DEFAULT_WORKERS})",
    )
    parser.add_argument(
        "--resolve",
        type=str,
        default="arithmetic",
        choices=["arithmetic", "lookup"],
        help="How movie ids map to graph nodes (default: arithmetic)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    missing = get_missing_data_files(args.movies, args.ratings)
    if missing:
        print(f"Error: missing data files: {', '.join(missing)}", file=sys.stderr)
        return 1

    try:
        dataset = load_dataset(args.movies, args.ratings)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Number of movies: {len(dataset.movies)}")
    print(f"Number of ratings: {len(dataset.ratings)}")

    graph = build_movie_graph(dataset.movies, dataset.ratings)

    print(f"Total number of nodes: {graph.node_count()}")
    print(f"Total number of edges: {graph.edge_count()}")

    print("\n-> Six Degrees of Separation: \n")

    chosen_ids = sample_movie_ids(dataset.movies, k=args.sample_size, seed=args.seed)
    try:
        results = run_queries(
            graph,
            chosen_ids,
            workers=args.workers,
            resolve=args.resolve,
            position_index=movie_position_index(dataset.movies),
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for result in results:
        for line in format_result(result):
            print(line)

    print("\n\t\t\t**************\tFinished!\t**************\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
