#!/usr/bin/env python3
"""
Validate movie/rating data files and the graph built from them.

Usage:
    python scripts/validate_data.py
"""

import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding for Unicode output
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from moviegraph.config import data_file_paths, validate_data_files  # noqa: E402 - must be after sys.path modification
from moviegraph.data import load_dataset  # noqa: E402
from moviegraph.graph import build_movie_graph  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)


def check_data_files_exist() -> bool:
    """Check that all data files exist."""
    print("\n=== Checking Data Files ===\n")

    paths = data_file_paths()
    status = validate_data_files()

    for name, exists in status.items():
        path = paths[name]
        size_mb = path.stat().st_size / (1024 * 1024) if exists else 0
        print(f"✓ {name} ({path}): {size_mb:,.1f} MB" if exists else f"✗ {name} ({path}): NOT FOUND")

    return all(status.values())


def load_and_validate() -> bool:
    """Load the records, build the graph and run validation checks."""
    print("\n=== Loading Records ===\n")

    start_time = time.time()
    dataset = load_dataset()
    graph = build_movie_graph(dataset.movies, dataset.ratings)
    print(f"\nLoad + build time: {time.time() - start_time:.1f} seconds")

    print("\n=== Graph Statistics ===\n")
    print(f"  movies: {len(dataset.movies):,}")
    print(f"  ratings: {len(dataset.ratings):,}")
    for key, value in graph.stats().items():
        print(f"  {key}: {value:,}")

    print("\n=== Validation Checks ===\n")
    all_valid = True
    for check, passed in graph.validate().items():
        status = "✓" if passed else "✗"
        print(f"  {status} {check}")
        if not passed:
            all_valid = False

    return all_valid


def main() -> int:
    """Main validation routine."""
    print("=" * 60)
    print("Movie Graph Data Validation")
    print("=" * 60)

    if not check_data_files_exist():
        print("\n✗ Some data files are missing. Cannot continue.")
        return 1

    try:
        if not load_and_validate():
            print("\n✗ Validation checks failed.")
            return 1
    except Exception as e:
        print(f"\n✗ Error loading data: {e}")
        import traceback
        traceback.print_exc()
        return 1

    print("\n" + "=" * 60)
    print("✓ All validation checks passed!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
