"""
FastAPI dependency injection for the query façade and review provider.

Both are built once by ``create_app`` and kept on ``app.state``.
"""

from fastapi import Request

from movie_catalog.core.catalog import MovieQueryService
from movie_catalog.core.reviews import ReviewProvider


def get_query_service(request: Request) -> MovieQueryService:
    """Return the application's MovieQueryService for FastAPI Depends()."""
    return request.app.state.query_service


def get_review_provider(request: Request) -> ReviewProvider:
    """Return the application's ReviewProvider for FastAPI Depends()."""
    return request.app.state.review_provider
