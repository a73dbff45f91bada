"""
Movie reviews package.

Reviews are bundled with the catalog and joined into movie detail views.
"""

from movie_catalog.core.reviews.provider import Review, ReviewProvider, JsonReviewProvider

__all__ = ['Review', 'ReviewProvider', 'JsonReviewProvider']
