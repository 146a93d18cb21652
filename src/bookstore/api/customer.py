"""Customer sign-in and session-gated review endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, Response, status

from bookstore.api.models import Credentials, ReviewRequest
from bookstore.domain.sessions import (
    AUTHORIZATION_KEY,
    AuthenticatedSession,
    SessionContext,
    authorization_marker,
    session_context_from,
)
from bookstore.errors import NotFoundError, UnauthorizedError

if TYPE_CHECKING:
    from bookstore.containers import AppContainer

ACCESS_RESTRICTED = "Access restricted! Please sign in to continue."


def get_session_context(request: Request) -> SessionContext:
    """Resolve the caller's session context from the session cookie."""
    return session_context_from(request.session)


async def require_customer(
    context: SessionContext = Depends(get_session_context),
) -> AuthenticatedSession:
    """Reject requests that do not carry a signed-in session."""
    if not isinstance(context, AuthenticatedSession):
        raise UnauthorizedError(ACCESS_RESTRICTED)
    return context


router = APIRouter(prefix="/customer", tags=["customer"])
auth_router = APIRouter(prefix="/auth", dependencies=[Depends(require_customer)])


@router.post("/login")
def login(credentials: Credentials, request: Request) -> dict[str, str]:
    """Sign a customer in and mark the session as authorized."""
    container: AppContainer = request.app.state.container
    user = container.user_service.authenticate(
        credentials.username, credentials.password
    )
    request.session[AUTHORIZATION_KEY] = authorization_marker(user.username)
    return {"message": "User successfully logged in."}


@auth_router.post("/logout")
async def logout(request: Request) -> dict[str, str]:
    """Drop the session."""
    request.session.clear()
    return {"message": "User successfully logged out."}


@auth_router.put("/review/{isbn}")
async def put_review(
    isbn: str,
    body: ReviewRequest,
    request: Request,
    response: Response,
    customer: AuthenticatedSession = Depends(require_customer),
) -> dict[str, object]:
    """Add or update the signed-in customer's review of a book."""
    container: AppContainer = request.app.state.container
    book, created = container.catalog_service.put_review(
        isbn, customer.username, body.review
    )
    if created:
        response.status_code = status.HTTP_201_CREATED
        return {"message": "Review added successfully.", "book": asdict(book)}
    return {"message": "Review updated successfully.", "book": asdict(book)}


@auth_router.delete("/review/{isbn}")
async def delete_review(
    isbn: str,
    request: Request,
    customer: AuthenticatedSession = Depends(require_customer),
) -> dict[str, str]:
    """Delete the signed-in customer's review of a book."""
    container: AppContainer = request.app.state.container
    container.catalog_service.delete_review(isbn, customer.username)
    return {"message": "Review deleted successfully."}


@auth_router.api_route(
    "/{rest:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def unmatched(rest: str) -> None:
    """Answer unknown paths and methods under the gated prefix after the gate."""
    raise NotFoundError("Not Found")


router.include_router(auth_router)
