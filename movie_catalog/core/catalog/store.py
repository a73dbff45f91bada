"""
In-memory catalog store.

Holds the movies loaded at startup and answers read queries against them.
The collection is fixed after construction; every operation is a pure read.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple, Union

from movie_catalog.core.catalog.loader import load_catalog
from movie_catalog.core.catalog.models import CatalogLoadResult, Movie

logger = logging.getLogger(__name__)


def normalize_text_filter(value: Optional[str]) -> Optional[str]:
    """Return the trimmed, lowercased filter, or None when it is absent or blank."""
    if value is None:
        return None
    value = value.strip().lower()
    return value or None


def normalize_id_filter(value: Optional[int]) -> Optional[int]:
    """Return the id filter, or None when it is absent or not positive."""
    if value is None or value <= 0:
        return None
    return value


class CatalogReader(Protocol):
    """Read contract shared by the catalog store and its test doubles."""

    def list_all(self) -> Sequence[Movie]:
        ...

    def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
        ...

    def search(
        self,
        name: Optional[str] = None,
        movie_id: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> List[Movie]:
        ...


class CatalogStore:
    """
    Immutable, id-indexed movie collection.

    Usage:
        store = CatalogStore.from_file("movie_catalog/data/movies.json")
        store.get_by_id(1)
        store.search(name="prison")
    """

    def __init__(self, movies: Iterable[Movie], load_result: Optional[CatalogLoadResult] = None):
        """
        Build the store from already-parsed movies.

        Args:
            movies: Movies in display order (ids must be unique)
            load_result: Outcome of the load that produced ``movies``, if any
        """
        self._movies: Tuple[Movie, ...] = tuple(movies)
        self._by_id: Dict[int, Movie] = {movie.id: movie for movie in self._movies}
        self.load_result = load_result or CatalogLoadResult(movies=self._movies)

        if len(self._by_id) != len(self._movies):
            raise ValueError("Movie ids must be unique within the catalog")

        logger.debug(f"CatalogStore initialized with {len(self._movies)} movies")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CatalogStore":
        """
        Load the dataset at ``path`` and build a store from it.

        A failed load yields an empty store; the diagnostic is kept on
        ``load_result``.
        """
        result = load_catalog(path)
        return cls(result.movies, load_result=result)

    def __len__(self) -> int:
        return len(self._movies)

    def list_all(self) -> Sequence[Movie]:
        """Return every movie in dataset order."""
        return self._movies

    def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
        """
        Look up a movie by id.

        Args:
            movie_id: Movie ID

        Returns:
            Movie or None if the id is absent, not positive or unknown
        """
        if movie_id is None or movie_id <= 0:
            return None
        return self._by_id.get(movie_id)

    def search(
        self,
        name: Optional[str] = None,
        movie_id: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> List[Movie]:
        """
        Filter the catalog by name, id and genre.

        Filters apply in that order, each narrowing the previous result. Name
        and genre are case-insensitive substring matches on the trimmed filter;
        id is an exact match. Absent or blank filters (and ids <= 0) are
        skipped, so calling with no filters returns the whole catalog.

        Args:
            name: Substring of the movie name
            movie_id: Exact movie ID
            genre: Substring of the genre label

        Returns:
            Matching movies in dataset order (a new list)
        """
        logger.info(f"Searching movies with name={name!r}, id={movie_id!r}, genre={genre!r}")

        results = list(self._movies)

        name_filter = normalize_text_filter(name)
        if name_filter is not None:
            results = [m for m in results if name_filter in m.name.lower()]
            logger.debug(f"  Filtered by name '{name_filter}': {len(results)} movies")

        id_filter = normalize_id_filter(movie_id)
        if id_filter is not None:
            results = [m for m in results if m.id == id_filter]
            logger.debug(f"  Filtered by id {id_filter}: {len(results)} movies")

        genre_filter = normalize_text_filter(genre)
        if genre_filter is not None:
            results = [m for m in results if genre_filter in m.genre.lower()]
            logger.debug(f"  Filtered by genre '{genre_filter}': {len(results)} movies")

        logger.info(f"Search complete: {len(results)} movies found")
        return results
