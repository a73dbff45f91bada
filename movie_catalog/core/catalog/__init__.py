"""
Movie catalog package.

This package contains:
- Immutable movie records and the load result
- Dataset loading with all-or-nothing parsing
- The id-indexed in-memory store
- The query façade used by the request handlers
"""

from movie_catalog.core.catalog.models import Movie, CatalogLoadResult
from movie_catalog.core.catalog.loader import load_catalog, parse_catalog, CatalogFormatError
from movie_catalog.core.catalog.store import CatalogReader, CatalogStore
from movie_catalog.core.catalog.query import MovieQueryService

__all__ = [
    'Movie',
    'CatalogLoadResult',
    'load_catalog',
    'parse_catalog',
    'CatalogFormatError',
    'CatalogReader',
    'CatalogStore',
    'MovieQueryService',
]
