"""
FastAPI client wrapper for Streamlit UI.
"""

import os
import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def _search_params(name: str | None, movie_id: int | None, genre: str | None) -> dict:
    params = {"name": name, "id": movie_id, "genre": genre}
    return {k: v for k, v in params.items() if v not in (None, "")}


def get_movies_page() -> dict:
    """Get the page model listing every movie."""
    r = requests.get(f"{get_api_base_url()}/movies", timeout=10)
    r.raise_for_status()
    return r.json()


def search_movies_page(
    name: str | None = None,
    movie_id: int | None = None,
    genre: str | None = None,
) -> dict:
    """Get the search page model. Invalid input still returns a page (status 200)."""
    r = requests.get(
        f"{get_api_base_url()}/movies/search",
        params=_search_params(name, movie_id, genre),
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def get_movie_details_page(movie_id: int) -> dict:
    """Get the detail page model; a missing movie returns the 'error' view."""
    r = requests.get(f"{get_api_base_url()}/movies/{movie_id}/details", timeout=10)
    if r.status_code == 404:
        return r.json()
    r.raise_for_status()
    return r.json()


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()
