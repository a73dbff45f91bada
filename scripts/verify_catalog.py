#!/usr/bin/env python
"""
Dataset verification script for the bundled movie catalog.

Checks:
1. The movie dataset loads (strict, all-or-nothing parsing)
2. Genre and rating distribution
3. Every review points at a known movie

Usage:
    # Verify the bundled datasets
    python scripts/verify_catalog.py

    # Verify other files
    python scripts/verify_catalog.py --movies path/to/movies.json --reviews path/to/reviews.json
"""

import sys
import argparse
from collections import Counter
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_catalog.api.config import get_catalog_path, get_reviews_path
from movie_catalog.core.catalog import CatalogStore
from movie_catalog.core.reviews import JsonReviewProvider


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def check_load(store):
    """Check the catalog loaded without errors."""
    print_section("1. Catalog Load")

    if not store.load_result.ok:
        print(f"\n[ERROR] {store.load_result.error}")
        return False

    print(f"\nMovies loaded: {len(store)}")
    print("\n[SUCCESS] Catalog loaded")
    return len(store) > 0


def check_distribution(store):
    """Print genre and rating distribution."""
    print_section("2. Genre and Rating Distribution")

    genres = Counter(
        label.strip()
        for movie in store.list_all()
        for label in movie.genre.split(",")
        if label.strip()
    )
    total = len(store)

    print("\nGenres:")
    for genre, count in genres.most_common():
        pct = (count / total * 100) if total > 0 else 0
        print(f"  {genre:<12} {count:>3} ({pct:>5.1f}%) {'#' * count}")

    ratings = Counter(movie.rating for movie in store.list_all())
    print("\nRatings:")
    for rating, count in sorted(ratings.items()):
        print(f"  {rating:.1f}: {count}")

    return True


def check_reviews(store, reviews_path):
    """Check every review belongs to a movie in the catalog."""
    print_section("3. Review Integrity")

    provider = JsonReviewProvider.from_file(reviews_path)
    if provider.load_error:
        print(f"\n[ERROR] {provider.load_error}")
        return False

    known = {movie.id for movie in store.list_all()}
    reviewed = {review.movie_id for review in provider.iter_reviews()}
    orphaned = sorted(reviewed - known)

    print(f"\nReviews: {len(provider)}")
    print(f"Movies with reviews: {len(reviewed & known)}")
    print(f"Reviews with unknown movie id: {orphaned or 'none'}")

    if orphaned:
        print("\n[ERROR] Found reviews for unknown movies!")
        return False
    print("\n[SUCCESS] All reviews reference known movies")
    return True


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Verify the movie catalog and reviews datasets"
    )
    parser.add_argument('--movies', default=get_catalog_path(), help='Movie dataset path')
    parser.add_argument('--reviews', default=get_reviews_path(), help='Reviews dataset path')
    args = parser.parse_args()

    store = CatalogStore.from_file(args.movies)
    passed = check_load(store)
    if passed:
        passed = check_distribution(store) and check_reviews(store, args.reviews)

    print_section("Result")
    print("\n[SUCCESS] All checks passed" if passed else "\n[ERROR] Some verification checks FAILED!")
    sys.exit(0 if passed else 1)


if __name__ == "__main__":
    main()
