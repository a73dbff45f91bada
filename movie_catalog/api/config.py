"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def get_catalog_path() -> str:
    """Get movie dataset path from env or the bundled default."""
    return os.getenv("MOVIES_DATA_PATH", "") or str(DATA_DIR / "movies.json")


def get_reviews_path() -> str:
    """Get reviews dataset path from env or the bundled default."""
    return os.getenv("REVIEWS_DATA_PATH", "") or str(DATA_DIR / "reviews.json")


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
