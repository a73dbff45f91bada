"""
Read-only movie reviews keyed by movie id.
"""

import json
import logging
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Protocol, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Review:
    """A single review attached to a movie."""

    movie_id: int
    reviewer: str
    rating: float
    comment: str


class ReviewProvider(Protocol):
    def get_reviews_for_movie(self, movie_id: int) -> List[Review]:
        ...


def parse_review(entry: Any) -> Review:
    """
    Convert one dataset object into a Review.

    Raises:
        ValueError: If a field is missing or has the wrong type
    """
    if not isinstance(entry, dict):
        raise ValueError(f"Review entry must be an object, got {type(entry).__name__}")

    movie_id = entry.get("movieId")
    rating = entry.get("rating")
    reviewer = entry.get("reviewer")
    comment = entry.get("comment")

    if isinstance(movie_id, bool) or not isinstance(movie_id, int):
        raise ValueError(f"'movieId' must be an integer, got {movie_id!r}")
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        raise ValueError(f"'rating' must be a number, got {rating!r}")
    if not isinstance(reviewer, str) or not isinstance(comment, str):
        raise ValueError("'reviewer' and 'comment' must be strings")

    return Review(movie_id=movie_id, reviewer=reviewer, rating=float(rating), comment=comment)


class JsonReviewProvider:
    """Reviews grouped by movie id, loaded once from a bundled JSON file."""

    def __init__(self, reviews: Iterable[Review] = (), load_error: Optional[str] = None):
        grouped: Dict[int, List[Review]] = defaultdict(list)
        for review in reviews:
            grouped[review.movie_id].append(review)
        self._by_movie: Dict[int, Tuple[Review, ...]] = {k: tuple(v) for k, v in grouped.items()}
        self.load_error = load_error

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "JsonReviewProvider":
        """
        Load reviews from ``path``.

        Any failure leaves the provider empty and records the diagnostic on
        ``load_error``; nothing is raised.

        Args:
            path: Path to the reviews JSON array

        Returns:
            JsonReviewProvider instance
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise ValueError("Reviews file must contain a JSON array")
            reviews = [parse_review(entry) for entry in raw]
        except (OSError, ValueError, RecursionError) as e:
            error = f"Failed to load reviews from {path}: {e}"
            logger.warning(f"{error}; continuing without reviews")
            return cls(load_error=error)

        logger.info(f"Loaded {len(reviews)} reviews")
        return cls(reviews)

    def __len__(self) -> int:
        return sum(len(v) for v in self._by_movie.values())

    def iter_reviews(self) -> Iterator[Review]:
        for reviews in self._by_movie.values():
            yield from reviews

    def get_reviews_for_movie(self, movie_id: int) -> List[Review]:
        return list(self._by_movie.get(movie_id, ()))
