"""Domain models for the bookstore."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Book:
    """A catalog entry keyed by ISBN."""

    isbn: str
    author: str
    title: str
    reviews: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class UserRecord:
    """A registered customer."""

    username: str
    password_hash: str
