"""
Movie API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, Query, HTTPException
from fastapi.responses import JSONResponse

from movie_catalog.api.dependencies import get_query_service, get_review_provider
from movie_catalog.api.models.movie import MovieResponse, MovieList
from movie_catalog.api.models.review import ReviewResponse, MovieDetailResponse
from movie_catalog.api.models.search import SearchResponse, SearchErrorResponse
from movie_catalog.core.catalog import MovieQueryService
from movie_catalog.core.catalog.query import API_INVALID_SEARCH_MESSAGE, API_SEARCH_FAILED_MESSAGE
from movie_catalog.core.reviews import ReviewProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("", response_model=MovieList)
def list_movies(service: MovieQueryService = Depends(get_query_service)):
    """List every movie in the catalog."""
    movies = service.list_all()
    return MovieList(
        movies=[MovieResponse.from_movie(m) for m in movies],
        total=len(movies),
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": SearchErrorResponse}, 500: {"model": SearchErrorResponse}},
)
def search_movies(
    name: str | None = Query(None),
    movie_id: int | None = Query(None, alias="id"),
    genre: str | None = Query(None),
    service: MovieQueryService = Depends(get_query_service),
):
    """Search movies by name, id, or genre. At least one filter is required."""
    logger.info(f"API search requested with name={name!r}, id={movie_id!r}, genre={genre!r}")

    if not service.is_valid_search(name, movie_id, genre):
        logger.warning("Invalid API search parameters provided")
        return JSONResponse(
            status_code=400,
            content=SearchErrorResponse(error=API_INVALID_SEARCH_MESSAGE).model_dump(),
        )

    try:
        movies = service.search(name, movie_id, genre)
    except Exception:
        logger.exception("API search failed")
        return JSONResponse(
            status_code=500,
            content=SearchErrorResponse(error=API_SEARCH_FAILED_MESSAGE).model_dump(),
        )

    logger.info(f"API search successful, found {len(movies)} movies")
    return SearchResponse(
        movies=[MovieResponse.from_movie(m) for m in movies],
        totalResults=len(movies),
        message=service.api_match_message(len(movies)),
        searchName=name,
        searchId=movie_id,
        searchGenre=genre,
    )


@router.get("/{movie_id}", response_model=MovieDetailResponse)
def get_movie(
    movie_id: int,
    service: MovieQueryService = Depends(get_query_service),
    reviews: ReviewProvider = Depends(get_review_provider),
):
    """Get movie details by ID, with its reviews."""
    movie = service.get_movie_by_id(movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieDetailResponse(
        movie=MovieResponse.from_movie(movie),
        reviews=[ReviewResponse.from_review(r) for r in reviews.get_reviews_for_movie(movie.id)],
    )
