"""
Unit tests for the query façade.
"""

import pytest

from movie_catalog.core.catalog import MovieQueryService
from tests.conftest import FixedCatalog


class TestIsValidSearch:
    """Tests for search parameter validation."""

    @pytest.mark.parametrize(
        "name, movie_id, genre",
        [
            ("test", 1, "drama"),
            ("test", None, None),
            (None, 1, None),
            (None, None, "drama"),
            ("  x  ", 0, ""),
        ],
    )
    def test_valid(self, service, name, movie_id, genre):
        """Any single meaningful filter makes the search valid."""
        assert service.is_valid_search(name, movie_id, genre)

    @pytest.mark.parametrize(
        "name, movie_id, genre",
        [
            (None, None, None),
            ("", None, None),
            ("   ", None, None),
            (None, 0, None),
            (None, -1, None),
            (None, None, ""),
            (None, None, "   "),
        ],
    )
    def test_invalid(self, service, name, movie_id, genre):
        """Missing, blank and non-positive filters are not meaningful."""
        assert not service.is_valid_search(name, movie_id, genre)


class TestLookups:
    """Tests for the pass-through accessors."""

    def test_list_all(self, service, bundled_store):
        """list_all passes through to the catalog."""
        assert service.list_all() == bundled_store.list_all()

    def test_get_movie_by_id(self, service):
        """A known id returns its movie."""
        movie = service.get_movie_by_id(1)
        assert movie is not None
        assert movie.name == "The Prison Escape"

    @pytest.mark.parametrize("movie_id", [None, 0, -3])
    def test_non_positive_id_short_circuits(self, sample_movies, movie_id):
        """None and non-positive ids return None without touching the catalog."""
        catalog = FixedCatalog(sample_movies)
        catalog.get_by_id = lambda _: pytest.fail("store should not be queried")
        assert MovieQueryService(catalog).get_movie_by_id(movie_id) is None

    def test_unknown_id(self, service):
        """An unknown id returns None."""
        assert service.get_movie_by_id(999) is None

    def test_search_delegates(self, sample_movies):
        """search forwards all three filters to the catalog."""
        catalog = FixedCatalog(sample_movies, search_results=sample_movies[:1])
        results = MovieQueryService(catalog).search("test", 5, "action")
        assert results == sample_movies[:1]
        assert catalog.search_calls == [("test", 5, "action")]


class TestMessages:
    """Tests for pluralized result messages."""

    def test_match_message_singular(self):
        """One result uses the singular form."""
        assert MovieQueryService.match_message(1) == "Found 1 movie matching your search."

    def test_match_message_plural(self):
        """Several results use the plural form."""
        assert MovieQueryService.match_message(3) == "Found 3 movies matching your search."

    def test_api_match_message(self):
        """The API message pluralizes zero and one correctly."""
        assert MovieQueryService.api_match_message(0) == "Found 0 movies"
        assert MovieQueryService.api_match_message(1) == "Found 1 movie"
