"""
Pydantic schemas for Review API.
"""

from pydantic import BaseModel, Field

from movie_catalog.api.models.movie import MovieResponse
from movie_catalog.core.reviews import Review


class ReviewResponse(BaseModel):
    """Response model for a single review."""

    movie_id: int = Field(..., alias="movieId")
    reviewer: str
    rating: float
    comment: str

    class Config:
        populate_by_name = True

    @classmethod
    def from_review(cls, review: Review) -> "ReviewResponse":
        return cls(
            movieId=review.movie_id,
            reviewer=review.reviewer,
            rating=review.rating,
            comment=review.comment,
        )


class MovieDetailResponse(BaseModel):
    """Response model for a movie joined with its reviews."""

    movie: MovieResponse
    reviews: list[ReviewResponse]
