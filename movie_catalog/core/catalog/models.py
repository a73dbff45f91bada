"""
Immutable catalog records.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Movie:
    """A single catalog entry, fixed for the process lifetime."""

    id: int
    name: str
    director: str
    year: int
    genre: str
    description: str
    duration: int
    rating: float


@dataclass(frozen=True)
class CatalogLoadResult:
    """
    Outcome of the one-time dataset load.

    A failed load carries no movies and a diagnostic in ``error``. A well-formed
    but empty dataset is still ``ok``.
    """

    movies: Tuple[Movie, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
