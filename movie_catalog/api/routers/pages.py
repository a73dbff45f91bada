"""
Page endpoints.

Each endpoint returns a page model (view name, title, message, movies and the
submitted search parameters) for a renderer such as the Streamlit UI.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from movie_catalog.api.dependencies import get_query_service, get_review_provider
from movie_catalog.api.models.movie import MovieResponse
from movie_catalog.api.models.review import ReviewResponse
from movie_catalog.api.models.search import PageResponse
from movie_catalog.core.catalog import MovieQueryService
from movie_catalog.core.catalog.query import (
    INVALID_SEARCH_MESSAGE,
    NO_RESULTS_MESSAGE,
    SEARCH_FAILED_MESSAGE,
)
from movie_catalog.core.reviews import ReviewProvider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["pages"])


def _movie_list(movies) -> list[MovieResponse]:
    return [MovieResponse.from_movie(m) for m in movies]


@router.get("", response_model=PageResponse)
def movies_page(service: MovieQueryService = Depends(get_query_service)):
    """Page listing every movie."""
    logger.info("Fetching movies")
    return PageResponse(view="movies", movies=_movie_list(service.list_all()))


@router.get("/search", response_model=PageResponse)
def search_page(
    name: str | None = Query(None),
    movie_id: int | None = Query(None, alias="id"),
    genre: str | None = Query(None),
    service: MovieQueryService = Depends(get_query_service),
):
    """
    Search page.

    Invalid input and unexpected failures fall back to listing every movie
    with an explanatory message instead of an error status.
    """
    logger.info(f"Page search requested with name={name!r}, id={movie_id!r}, genre={genre!r}")

    if not service.is_valid_search(name, movie_id, genre):
        logger.warning("No valid search parameters provided")
        return PageResponse(
            view="movies",
            title="Invalid Search Parameters",
            message=INVALID_SEARCH_MESSAGE,
            searchPerformed=True,
            movies=_movie_list(service.list_all()),
        )

    try:
        movies = service.search(name, movie_id, genre)
    except Exception:
        logger.exception("Error during movie search")
        return PageResponse(
            view="movies",
            title="Search Failed",
            message=SEARCH_FAILED_MESSAGE,
            searchPerformed=True,
            movies=_movie_list(service.list_all()),
        )

    if movies:
        logger.info(f"Found {len(movies)} movies")
        title, message = "Movies Found", service.match_message(len(movies))
    else:
        logger.info("No movies found matching the search criteria")
        title, message = "No Movies Found", NO_RESULTS_MESSAGE

    return PageResponse(
        view="movies",
        title=title,
        message=message,
        searchPerformed=True,
        movies=_movie_list(movies),
        searchName=name,
        searchId=movie_id,
        searchGenre=genre,
    )


@router.get("/{movie_id}/details", response_model=PageResponse)
def movie_details_page(
    movie_id: int,
    service: MovieQueryService = Depends(get_query_service),
    reviews: ReviewProvider = Depends(get_review_provider),
):
    """Detail page for one movie, with its reviews. Unknown ids render the error view."""
    logger.info(f"Fetching details for movie ID: {movie_id}")

    movie = service.get_movie_by_id(movie_id)
    if not movie:
        logger.warning(f"Movie with ID {movie_id} not found")
        page = PageResponse(
            view="error",
            title="Movie Not Found",
            message=f"Movie with ID {movie_id} was not found.",
        )
        return JSONResponse(status_code=404, content=page.model_dump(by_alias=True))

    return PageResponse(
        view="movie-details",
        title=movie.name,
        movie=MovieResponse.from_movie(movie),
        reviews=[ReviewResponse.from_review(r) for r in reviews.get_reviews_for_movie(movie.id)],
    )
