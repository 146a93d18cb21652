"""Error kinds raised by services and mapped to HTTP responses."""

from fastapi import status


class BookstoreError(Exception):
    """Base error carrying a client-facing message and an HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookstoreError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(BookstoreError):
    """The caller is not signed in or presented bad credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(BookstoreError):
    """No catalog entry matched the lookup."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(BookstoreError):
    """The resource already exists."""

    status_code = status.HTTP_409_CONFLICT
