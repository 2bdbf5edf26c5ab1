"""
Configuration constants for the movie degrees-of-separation project.

All paths, ingestion caps and tunable parameters are defined here.
Input locations can be overridden from the environment (or a .env file).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of moviegraph/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# Data directory (contains movie.csv and rating.csv)
DATA_DIR = PROJECT_ROOT / "data"

# Individual data file paths
MOVIES_PATH = Path(os.environ.get("MOVIES_PATH", DATA_DIR / "movie.csv"))
RATINGS_PATH = Path(os.environ.get("RATINGS_PATH", DATA_DIR / "rating.csv"))

# =============================================================================
# Ingestion Configuration
# =============================================================================

# Only the first N movie rows are read to keep memory bounded
MOVIE_ROW_LIMIT = 2000

# Ratings for movies with a larger id are dropped at load time
MAX_RATING_MOVIE_ID = 100

# =============================================================================
# Graph Configuration
# =============================================================================

# Records skipped at each end of the movie and rating lists
# (nodes = len(movies) - 2 * WINDOW_MARGIN)
WINDOW_MARGIN = 10

# =============================================================================
# Query Configuration
# =============================================================================

# Number of movies sampled for pairwise shortest-path queries
DEFAULT_SAMPLE_SIZE = 20

# Worker threads for pairwise queries (1 = sequential)
DEFAULT_WORKERS = 1

# =============================================================================
# Logging Configuration
# =============================================================================
# Log level (DEBUG, INFO, WARNING, ERROR), case-insensitive
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# =============================================================================
# Validation Helpers
# =============================================================================

def data_file_paths(
    movies_path: Path | str = MOVIES_PATH,
    ratings_path: Path | str = RATINGS_PATH,
) -> dict[str, Path]:
    """Name -> path for each input file."""
    return {
        "movies": Path(movies_path),
        "ratings": Path(ratings_path),
    }


def validate_data_files(
    movies_path: Path | str = MOVIES_PATH,
    ratings_path: Path | str = RATINGS_PATH,
) -> dict[str, bool]:
    """Check which data files exist."""
    return {
        name: path.exists()
        for name, path in data_file_paths(movies_path, ratings_path).items()
    }


def get_missing_data_files(
    movies_path: Path | str = MOVIES_PATH,
    ratings_path: Path | str = RATINGS_PATH,
) -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files(movies_path, ratings_path)
    return [name for name, exists in status.items() if not exists]
