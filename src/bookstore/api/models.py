"""Request bodies accepted by the HTTP API."""

from pydantic import BaseModel


class Credentials(BaseModel):
    """Username and password as posted by registration and sign-in."""

    username: str | None = None
    password: str | None = None


class ReviewRequest(BaseModel):
    """Review text posted by a signed-in customer."""

    review: str | None = None
