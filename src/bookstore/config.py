"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "books.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    session_secret: str
    session_cookie: str = "session"
    session_https_only: bool = False
    host: str = "0.0.0.0"
    port: int = 5000
    catalog_path: Path | None = None
    expose_internal_errors: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def resolved_catalog_path(self) -> Path:
        """Return the seed file to load, falling back to the bundled catalog."""
        return self.catalog_path or DEFAULT_CATALOG_PATH
