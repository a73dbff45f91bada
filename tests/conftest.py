"""
Shared pytest fixtures for catalog, façade and API tests.
"""

from pathlib import Path
from typing import List, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from movie_catalog.api.main import create_app
from movie_catalog.core.catalog import CatalogStore, Movie, MovieQueryService
from movie_catalog.core.reviews import JsonReviewProvider, Review

DATA_DIR = Path(__file__).resolve().parents[1] / "movie_catalog" / "data"


class FixedCatalog:
    """CatalogReader double returning canned data and recording search calls."""

    def __init__(self, movies: Sequence[Movie], search_results: Optional[List[Movie]] = None):
        self.movies = list(movies)
        self.search_results = search_results
        self.search_calls = []

    def list_all(self) -> Sequence[Movie]:
        return self.movies

    def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
        return next((m for m in self.movies if m.id == movie_id), None)

    def search(self, name=None, movie_id=None, genre=None) -> List[Movie]:
        self.search_calls.append((name, movie_id, genre))
        if self.search_results is not None:
            return list(self.search_results)
        return list(self.movies)


class FailingCatalog(FixedCatalog):
    """CatalogReader double whose search always blows up."""

    def search(self, name=None, movie_id=None, genre=None) -> List[Movie]:
        raise RuntimeError("search backend exploded")


@pytest.fixture
def sample_movies() -> List[Movie]:
    """Three small movies with distinct genres."""
    return [
        Movie(1, "Test Movie", "Test Director", 2023, "Drama", "Test description", 120, 4.5),
        Movie(2, "Action Movie", "Action Director", 2022, "Action", "Action description", 110, 4.0),
        Movie(3, "Comedy Movie", "Comedy Director", 2021, "Comedy", "Comedy description", 95, 3.5),
    ]


@pytest.fixture
def sample_store(sample_movies) -> CatalogStore:
    return CatalogStore(sample_movies)


@pytest.fixture
def bundled_store() -> CatalogStore:
    """Store loaded from the dataset shipped with the package."""
    return CatalogStore.from_file(DATA_DIR / "movies.json")


@pytest.fixture
def service(bundled_store) -> MovieQueryService:
    return MovieQueryService(bundled_store)


@pytest.fixture
def review_provider() -> JsonReviewProvider:
    return JsonReviewProvider([
        Review(movie_id=1, reviewer="Alice", rating=5.0, comment="Great"),
        Review(movie_id=1, reviewer="Bob", rating=4.0, comment="Good"),
    ])


@pytest.fixture
def client(sample_store, review_provider) -> TestClient:
    """TestClient over an app serving the three sample movies."""
    return TestClient(create_app(catalog_store=sample_store, review_provider=review_provider))


@pytest.fixture
def bundled_client(bundled_store) -> TestClient:
    """TestClient over an app serving the bundled dataset and reviews."""
    return TestClient(create_app(
        catalog_store=bundled_store,
        review_provider=JsonReviewProvider.from_file(DATA_DIR / "reviews.json"),
    ))
