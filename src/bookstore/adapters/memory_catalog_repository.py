"""In-memory catalog repository."""

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

from bookstore.domain.models import Book
from bookstore.services.catalog import CatalogRepository


@dataclass
class InMemoryCatalogRepository(CatalogRepository):
    """Catalog held in a dict keyed by ISBN, in seed order."""

    books: dict[str, Book] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @classmethod
    def from_books(cls, books: Iterable[Book]) -> "InMemoryCatalogRepository":
        """Create a repository, rejecting duplicate ISBNs."""
        indexed: dict[str, Book] = {}
        for book in books:
            if book.isbn in indexed:
                raise ValueError(f"Duplicate ISBN in catalog: {book.isbn}")
            indexed[book.isbn] = book
        return cls(books=indexed)

    def list_books(self) -> list[Book]:
        return list(self.books.values())

    def get_book(self, isbn: str) -> Book | None:
        return self.books.get(isbn)

    def put_review(
        self, isbn: str, username: str, text: str
    ) -> tuple[Book, bool] | None:
        with self._lock:
            current = self.books.get(isbn)
            if current is None:
                return None
            created = username not in current.reviews
            updated = Book(
                isbn=current.isbn,
                author=current.author,
                title=current.title,
                reviews={**current.reviews, username: text},
            )
            self.books[isbn] = updated
            return updated, created

    def delete_review(self, isbn: str, username: str) -> bool | None:
        with self._lock:
            current = self.books.get(isbn)
            if current is None:
                return None
            if username not in current.reviews:
                return False
            reviews = dict(current.reviews)
            del reviews[username]
            self.books[isbn] = Book(
                isbn=current.isbn,
                author=current.author,
                title=current.title,
                reviews=reviews,
            )
            return True
