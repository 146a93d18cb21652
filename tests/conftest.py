"""Shared test fixtures."""

import pytest

from bookstore.adapters.memory_catalog_repository import InMemoryCatalogRepository
from bookstore.adapters.memory_user_repository import InMemoryUserRepository
from bookstore.config import Settings
from bookstore.containers import AppContainer
from bookstore.domain.models import Book
from bookstore.services.catalog import CatalogService
from bookstore.services.users import UserService

GATSBY_ISBN = "9780743273565"
STONE_ISBN = "9780747532699"
CHAMBER_ISBN = "9780747538493"
PRIDE_ISBN = "9780141439518"


def seed_books() -> list[Book]:
    return [
        Book(isbn=GATSBY_ISBN, author="F. Scott Fitzgerald", title="The Great Gatsby"),
        Book(
            isbn=STONE_ISBN,
            author="J.K. Rowling",
            title="Harry Potter and the Philosopher's Stone",
        ),
        Book(
            isbn=CHAMBER_ISBN,
            author="J.K. Rowling",
            title="Harry Potter and the Chamber of Secrets",
        ),
        Book(
            isbn=PRIDE_ISBN,
            author="Jane Austen",
            title="Pride and Prejudice",
            reviews={"elizabeth": "Better on the second read."},
        ),
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(session_secret="test-secret")


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository.from_books(seed_books())


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def container(
    settings: Settings,
    catalog_repository: InMemoryCatalogRepository,
    user_repository: InMemoryUserRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        catalog_service=CatalogService(catalog_repository),
        user_service=UserService(user_repository),
    )
