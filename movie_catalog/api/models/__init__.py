"""
Pydantic schemas for API request/response validation.
"""

from movie_catalog.api.models.movie import MovieResponse, MovieList
from movie_catalog.api.models.review import ReviewResponse, MovieDetailResponse
from movie_catalog.api.models.search import SearchResponse, SearchErrorResponse, PageResponse

__all__ = [
    "MovieResponse",
    "MovieList",
    "ReviewResponse",
    "MovieDetailResponse",
    "SearchResponse",
    "SearchErrorResponse",
    "PageResponse",
]
