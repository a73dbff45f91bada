"""
FastAPI application entry point for the Movie Catalog API.

Run: uvicorn movie_catalog.api.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_catalog.api.config import (
    get_api_host,
    get_api_port,
    get_catalog_path,
    get_log_file,
    get_log_level,
    get_reviews_path,
)
from movie_catalog.api.routers import movies, pages, system
from movie_catalog.core.catalog import CatalogStore, MovieQueryService
from movie_catalog.core.reviews import JsonReviewProvider, ReviewProvider

logger = logging.getLogger(__name__)


def create_app(
    catalog_store: CatalogStore | None = None,
    review_provider: ReviewProvider | None = None,
) -> FastAPI:
    """
    Build the application and load its data once.

    Args:
        catalog_store: Preloaded store (default: load from MOVIES_DATA_PATH)
        review_provider: Review source (default: load from REVIEWS_DATA_PATH)

    Returns:
        Configured FastAPI instance
    """
    if catalog_store is None:
        catalog_store = CatalogStore.from_file(get_catalog_path())
    if review_provider is None:
        review_provider = JsonReviewProvider.from_file(get_reviews_path())

    if not catalog_store.load_result.ok:
        logger.warning(f"Serving an empty catalog: {catalog_store.load_result.error}")

    app = FastAPI(
        title="Movie Catalog API",
        description="Browse, look up and search a fixed catalog of movies",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.catalog_store = catalog_store
    app.state.query_service = MovieQueryService(catalog_store)
    app.state.review_provider = review_provider

    app.include_router(movies.router)
    app.include_router(pages.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Movie Catalog API",
            "docs": "/docs",
            "movies": "/movies",
            "health": "/api/health",
        }

    return app


app = create_app()


def run() -> None:
    """Configure logging and serve the app with uvicorn."""
    import uvicorn

    from movie_catalog.utils.logging_config import configure_api_logging

    configure_api_logging(level=get_log_level(), log_file=get_log_file())
    uvicorn.run(app, host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    run()
