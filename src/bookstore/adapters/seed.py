"""Catalog seed loading."""

import json
import logging
from pathlib import Path

from bookstore.domain.models import Book

logger = logging.getLogger(__name__)


def load_books(path: Path) -> list[Book]:
    """Load the seed catalog from a JSON array of book objects."""
    with path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, list):
        raise ValueError(f"Catalog seed {path} must be a JSON array")
    books = [book_from_payload(entry) for entry in raw]
    logger.info("Loaded %d books from %s", len(books), path)
    return books


def book_from_payload(payload: dict[str, object]) -> Book:
    """Build a book from one seed entry."""
    reviews = payload.get("reviews") or {}
    if not isinstance(reviews, dict):
        raise ValueError(f"Reviews for {payload.get('isbn')} must be an object")
    return Book(
        isbn=str(payload["isbn"]),
        author=str(payload["author"]),
        title=str(payload["title"]),
        reviews={str(k): str(v) for k, v in reviews.items()},
    )
