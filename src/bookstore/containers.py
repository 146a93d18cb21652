"""Dependency container wiring for the application."""

from dataclasses import dataclass

from bookstore.adapters.memory_catalog_repository import InMemoryCatalogRepository
from bookstore.adapters.memory_user_repository import InMemoryUserRepository
from bookstore.adapters.seed import load_books
from bookstore.config import Settings
from bookstore.services.catalog import CatalogService
from bookstore.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    user_service: UserService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_repository = InMemoryCatalogRepository.from_books(
        load_books(resolved_settings.resolved_catalog_path())
    )
    user_repository = InMemoryUserRepository()
    return AppContainer(
        settings=resolved_settings,
        catalog_service=CatalogService(catalog_repository),
        user_service=UserService(user_repository),
    )
