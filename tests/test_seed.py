"""Tests for catalog seed loading."""

import json

import pytest

from bookstore.adapters.memory_catalog_repository import InMemoryCatalogRepository
from bookstore.adapters.seed import load_books
from bookstore.config import DEFAULT_CATALOG_PATH


def test_load_books_reads_json_array(tmp_path) -> None:
    path = tmp_path / "books.json"
    path.write_text(
        json.dumps(
            [
                {"isbn": "1", "author": "A", "title": "First"},
                {"isbn": "2", "author": "B", "title": "Second", "reviews": {"x": "ok"}},
            ]
        ),
        encoding="utf-8",
    )

    books = load_books(path)

    assert [book.isbn for book in books] == ["1", "2"]
    assert books[0].reviews == {}
    assert books[1].reviews == {"x": "ok"}


def test_load_books_rejects_non_array(tmp_path) -> None:
    path = tmp_path / "books.json"
    path.write_text(json.dumps({"1": {"author": "A"}}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_books(path)


def test_bundled_catalog_has_unique_isbns() -> None:
    books = load_books(DEFAULT_CATALOG_PATH)

    repository = InMemoryCatalogRepository.from_books(books)

    assert len(repository.list_books()) == len(books)
    assert any(book.title == "The Great Gatsby" for book in books)


def test_repository_rejects_duplicate_isbn(tmp_path) -> None:
    path = tmp_path / "books.json"
    path.write_text(
        json.dumps(
            [
                {"isbn": "1", "author": "A", "title": "First"},
                {"isbn": "1", "author": "B", "title": "Again"},
            ]
        ),
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="Duplicate ISBN"):
        InMemoryCatalogRepository.from_books(load_books(path))
