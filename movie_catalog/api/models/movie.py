"""
Pydantic schemas for Movie API.

Field aliases follow the dataset's JSON names (``movieName``, ``imdbRating``).
"""

from pydantic import BaseModel, Field

from movie_catalog.core.catalog import Movie


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: int
    name: str = Field(..., alias="movieName")
    director: str
    year: int
    genre: str
    description: str
    duration: int
    rating: float = Field(..., alias="imdbRating")

    class Config:
        populate_by_name = True

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            movieName=movie.name,
            director=movie.director,
            year=movie.year,
            genre=movie.genre,
            description=movie.description,
            duration=movie.duration,
            imdbRating=movie.rating,
        )


class MovieList(BaseModel):
    """Response model for list of movies with total count."""

    movies: list[MovieResponse]
    total: int
