"""Tests for container wiring."""

import json

from bookstore.config import Settings
from bookstore.containers import build_container


def test_build_container_loads_bundled_catalog(settings) -> None:
    container = build_container(settings)

    assert container.catalog_service.list_books()
    assert container.user_service is not None


def test_build_container_uses_configured_catalog(tmp_path) -> None:
    path = tmp_path / "books.json"
    path.write_text(
        json.dumps(
            [{"isbn": "42", "author": "Douglas Adams", "title": "Mostly Harmless"}]
        ),
        encoding="utf-8",
    )

    container = build_container(Settings(session_secret="s", catalog_path=path))

    assert [book.isbn for book in container.catalog_service.list_books()] == ["42"]
