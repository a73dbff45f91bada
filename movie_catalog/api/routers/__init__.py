"""
API route handlers.
"""

from movie_catalog.api.routers import movies, pages, system

__all__ = ["movies", "pages", "system"]
