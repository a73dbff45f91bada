"""
Dataset loading for the movie catalog.

Reads the bundled JSON array of movie objects and converts every entry into a
``Movie``. Loading is all-or-nothing: a single malformed entry discards the
whole file and the catalog starts empty.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from movie_catalog.core.catalog.models import CatalogLoadResult, Movie

logger = logging.getLogger(__name__)


class CatalogFormatError(ValueError):
    """Raised while parsing when the dataset does not match the expected shape."""


def _require_int(entry: Dict[str, Any], key: str) -> int:
    value = entry.get(key)
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise CatalogFormatError(f"'{key}' must be an integer, got {value!r}")
    return value


def _require_float(entry: Dict[str, Any], key: str) -> float:
    value = entry.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogFormatError(f"'{key}' must be a number, got {value!r}")
    return float(value)


def _require_str(entry: Dict[str, Any], key: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str):
        raise CatalogFormatError(f"'{key}' must be a string, got {value!r}")
    return value


def parse_movie(entry: Any) -> Movie:
    """
    Convert one dataset object into a Movie.

    Args:
        entry: Decoded JSON object with the dataset field names

    Returns:
        Parsed Movie

    Raises:
        CatalogFormatError: If a field is missing or has the wrong type
    """
    if not isinstance(entry, dict):
        raise CatalogFormatError(f"Movie entry must be an object, got {type(entry).__name__}")

    movie = Movie(
        id=_require_int(entry, "id"),
        name=_require_str(entry, "movieName"),
        director=_require_str(entry, "director"),
        year=_require_int(entry, "year"),
        genre=_require_str(entry, "genre"),
        description=_require_str(entry, "description"),
        duration=_require_int(entry, "duration"),
        rating=_require_float(entry, "imdbRating"),
    )
    if movie.id <= 0:
        raise CatalogFormatError(f"Movie id must be positive, got {movie.id}")
    if not movie.name.strip():
        raise CatalogFormatError(f"Movie {movie.id} has an empty name")
    return movie


def parse_catalog(raw: Any) -> List[Movie]:
    """
    Parse a decoded dataset into an ordered list of movies.

    Args:
        raw: Decoded JSON document (expected to be an array)

    Returns:
        Movies in file order

    Raises:
        CatalogFormatError: If the document or any entry is malformed, or ids repeat
    """
    if not isinstance(raw, list):
        raise CatalogFormatError(f"Dataset must be a JSON array, got {type(raw).__name__}")

    movies: List[Movie] = []
    seen_ids = set()
    for index, entry in enumerate(raw):
        try:
            movie = parse_movie(entry)
        except CatalogFormatError as e:
            raise CatalogFormatError(f"Entry {index}: {e}") from e
        if movie.id in seen_ids:
            raise CatalogFormatError(f"Entry {index}: duplicate movie id {movie.id}")
        seen_ids.add(movie.id)
        movies.append(movie)
    return movies


def load_catalog(path: Union[str, Path]) -> CatalogLoadResult:
    """
    Load the movie dataset from disk.

    Never raises: a missing file, invalid JSON or a malformed entry produces an
    empty result carrying the error message, and a warning is logged.

    Args:
        path: Path to the JSON dataset

    Returns:
        CatalogLoadResult with the parsed movies or a diagnostic
    """
    path = Path(path)
    logger.info(f"Loading movie catalog from {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        movies = parse_catalog(raw)
    except FileNotFoundError:
        error = f"Catalog file not found: {path}"
    except (OSError, ValueError, RecursionError) as e:
        error = f"Failed to load movies from {path}: {e}"
    else:
        logger.info(f"Loaded {len(movies)} movies")
        return CatalogLoadResult(movies=tuple(movies))

    logger.warning(f"{error}; starting with an empty catalog")
    return CatalogLoadResult(error=error)
