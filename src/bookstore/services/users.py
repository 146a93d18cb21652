"""User registration and sign-in."""

import logging
from dataclasses import dataclass
from typing import Protocol

from bookstore.domain.models import UserRecord
from bookstore.errors import ConflictError, UnauthorizedError, ValidationError
from bookstore.services.passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Storage interface for registered users."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with this exact username, if present."""

    def add_if_absent(self, user: UserRecord) -> bool:
        """Store the user unless the username is taken; return True if stored."""


@dataclass
class UserService:
    """Application service for the customer lifecycle."""

    repository: UserRepository

    def register(self, username: str | None, password: str | None) -> UserRecord:
        """Register a new customer."""
        if not username or not password:
            raise ValidationError("Username and password are required.")
        user = UserRecord(username=username, password_hash=hash_password(password))
        if not self.repository.add_if_absent(user):
            raise ConflictError("Username already exists.")
        logger.info("Registered user %s", username)
        return user

    def authenticate(self, username: str | None, password: str | None) -> UserRecord:
        """Return the user when the credentials are valid."""
        if not username or not password:
            raise ValidationError("Username and password are required.")
        user = self.repository.get_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            raise UnauthorizedError("Invalid username or password.")
        return user
