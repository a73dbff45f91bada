"""
Query façade between the request handlers and the catalog store.

Validates search parameters, delegates reads to a ``CatalogReader`` and owns
the user-facing messages shared by the page and JSON surfaces.
"""

import logging
from typing import List, Optional, Sequence

from movie_catalog.core.catalog.models import Movie
from movie_catalog.core.catalog.store import (
    CatalogReader,
    normalize_id_filter,
    normalize_text_filter,
)

logger = logging.getLogger(__name__)


INVALID_SEARCH_MESSAGE = "Please provide at least one search parameter to find movies."
API_INVALID_SEARCH_MESSAGE = "Please provide at least one valid search parameter (name, id or genre)."
NO_RESULTS_MESSAGE = "No movies were found matching your search criteria. Try adjusting your search parameters."
SEARCH_FAILED_MESSAGE = "Something went wrong while searching for movies. Please try again."
API_SEARCH_FAILED_MESSAGE = "Search failed due to an internal error. Please try again later."


def _pluralize(count: int) -> str:
    return f"{count} movie" if count == 1 else f"{count} movies"


class MovieQueryService:
    """Validation and lookup façade over a catalog reader."""

    def __init__(self, catalog: CatalogReader):
        self.catalog = catalog

    def is_valid_search(
        self,
        name: Optional[str] = None,
        movie_id: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> bool:
        """
        Check that at least one search filter is meaningful.

        Name and genre count when non-blank after trimming; the id counts
        when it is a positive integer.
        """
        has_name = normalize_text_filter(name) is not None
        has_id = normalize_id_filter(movie_id) is not None
        has_genre = normalize_text_filter(genre) is not None

        is_valid = has_name or has_id or has_genre
        logger.debug(
            f"Search parameters validation - name: {has_name}, id: {has_id}, "
            f"genre: {has_genre}, valid: {is_valid}"
        )
        return is_valid

    def search(
        self,
        name: Optional[str] = None,
        movie_id: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> List[Movie]:
        """Run the search against the catalog. Call ``is_valid_search`` first."""
        return self.catalog.search(name=name, movie_id=movie_id, genre=genre)

    def get_movie_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
        """Return the movie with ``movie_id``, or None for missing or non-positive ids."""
        if movie_id is None or movie_id <= 0:
            return None
        return self.catalog.get_by_id(movie_id)

    def list_all(self) -> Sequence[Movie]:
        return self.catalog.list_all()

    @staticmethod
    def match_message(count: int) -> str:
        """Page message for a successful search with ``count`` results."""
        return f"Found {_pluralize(count)} matching your search."

    @staticmethod
    def api_match_message(count: int) -> str:
        """API message for a successful search with ``count`` results (zero allowed)."""
        return f"Found {_pluralize(count)}"
