"""
Pydantic schemas for search and page responses.
"""

from pydantic import BaseModel, Field

from movie_catalog.api.models.movie import MovieResponse
from movie_catalog.api.models.review import ReviewResponse


class SearchResponse(BaseModel):
    """Successful search result for API consumers."""

    movies: list[MovieResponse]
    total_results: int = Field(..., alias="totalResults")
    message: str
    search_name: str | None = Field(None, alias="searchName")
    search_id: int | None = Field(None, alias="searchId")
    search_genre: str | None = Field(None, alias="searchGenre")

    class Config:
        populate_by_name = True


class SearchErrorResponse(BaseModel):
    """Error body for rejected or failed searches."""

    error: str


class PageResponse(BaseModel):
    """
    Page model handed to a renderer.

    ``view`` names the page to render: ``movies``, ``movie-details`` or ``error``.
    """

    view: str
    title: str | None = None
    message: str | None = None
    search_performed: bool = Field(False, alias="searchPerformed")
    movies: list[MovieResponse] = []
    search_name: str | None = Field(None, alias="searchName")
    search_id: int | None = Field(None, alias="searchId")
    search_genre: str | None = Field(None, alias="searchGenre")
    movie: MovieResponse | None = None
    reviews: list[ReviewResponse] = []

    class Config:
        populate_by_name = True
