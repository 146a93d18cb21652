"""Public catalog and registration endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from bookstore.api.models import Credentials
from bookstore.domain.models import Book

if TYPE_CHECKING:
    from bookstore.containers import AppContainer

router = APIRouter(tags=["catalog"])


@router.get("/")
async def list_books(request: Request) -> list[Book]:
    """Return the full catalog."""
    container: AppContainer = request.app.state.container
    return container.catalog_service.list_books()


@router.get("/isbn/{isbn}")
async def get_by_isbn(isbn: str, request: Request) -> Book:
    """Return the book with this ISBN."""
    container: AppContainer = request.app.state.container
    return container.catalog_service.get_by_isbn(isbn)


@router.get("/author/{author}")
async def get_by_author(author: str, request: Request) -> list[Book]:
    """Return the books written by an author."""
    container: AppContainer = request.app.state.container
    return container.catalog_service.get_by_author(author)


@router.get("/title/exact/{title}")
async def get_by_exact_title(title: str, request: Request) -> list[Book]:
    """Return the books whose whole title matches."""
    container: AppContainer = request.app.state.container
    return container.catalog_service.get_by_title(title)


@router.get("/title/{title}")
async def search_by_title(title: str, request: Request) -> list[Book]:
    """Return the books whose title contains the given text."""
    container: AppContainer = request.app.state.container
    return container.catalog_service.search_by_title(title)


@router.get("/review/{isbn}")
async def get_reviews(isbn: str, request: Request) -> dict[str, str]:
    """Return the reviews of a book."""
    container: AppContainer = request.app.state.container
    return container.catalog_service.get_reviews(isbn)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(credentials: Credentials, request: Request) -> dict[str, str]:
    """Register a customer account."""
    container: AppContainer = request.app.state.container
    container.user_service.register(credentials.username, credentials.password)
    return {"message": "User registered successfully."}
