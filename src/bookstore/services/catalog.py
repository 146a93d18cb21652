"""Catalog queries and review management."""

import logging
from dataclasses import dataclass
from typing import Protocol

from bookstore.domain.models import Book
from bookstore.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Storage interface for the book catalog."""

    def list_books(self) -> list[Book]:
        """Return all books in seed order."""

    def get_book(self, isbn: str) -> Book | None:
        """Return the book for an ISBN, if present."""

    def put_review(
        self, isbn: str, username: str, text: str
    ) -> tuple[Book, bool] | None:
        """Set a user's review; return the updated book and whether it was new."""

    def delete_review(self, isbn: str, username: str) -> bool | None:
        """Remove a user's review.

        Returns None for an unknown ISBN and False when the user had no review.
        """


@dataclass
class CatalogService:
    """Read-mostly access to the book catalog."""

    repository: CatalogRepository

    def list_books(self) -> list[Book]:
        """Return every book."""
        return self.repository.list_books()

    def get_by_isbn(self, isbn: str) -> Book:
        """Return the book for an exact ISBN."""
        book = self.repository.get_book(isbn)
        if book is None:
            raise NotFoundError("No book found for the given ISBN")
        return book

    def get_by_author(self, author: str) -> list[Book]:
        """Return books whose author matches, ignoring case."""
        wanted = author.lower()
        matches = [
            b for b in self.repository.list_books() if b.author.lower() == wanted
        ]
        if not matches:
            raise NotFoundError("No books found for the given author")
        return matches

    def get_by_title(self, title: str) -> list[Book]:
        """Return books whose title matches exactly, ignoring case."""
        wanted = title.lower()
        matches = [b for b in self.repository.list_books() if b.title.lower() == wanted]
        if not matches:
            raise NotFoundError("No books found for the given title")
        return matches

    def search_by_title(self, fragment: str) -> list[Book]:
        """Return books whose title contains the fragment, ignoring case."""
        wanted = fragment.lower()
        matches = [b for b in self.repository.list_books() if wanted in b.title.lower()]
        if not matches:
            raise NotFoundError("No books found for the given title")
        return matches

    def get_reviews(self, isbn: str) -> dict[str, str]:
        """Return the reviews of a book keyed by reviewer."""
        return dict(self.get_by_isbn(isbn).reviews)

    def put_review(
        self, isbn: str, username: str, text: str | None
    ) -> tuple[Book, bool]:
        """Add or replace a user's review."""
        if not text:
            raise ValidationError("Review text is required.")
        result = self.repository.put_review(isbn, username, text)
        if result is None:
            raise NotFoundError("No book found for the given ISBN")
        book, created = result
        logger.info(
            "%s review by %s on %s", "Added" if created else "Updated", username, isbn
        )
        return book, created

    def delete_review(self, isbn: str, username: str) -> None:
        """Remove a user's review."""
        removed = self.repository.delete_review(isbn, username)
        if removed is None:
            raise NotFoundError("No book found for the given ISBN")
        if not removed:
            raise NotFoundError("No review found for this user on the given ISBN")
        logger.info("Deleted review by %s on %s", username, isbn)
