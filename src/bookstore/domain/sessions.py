"""Per-request session contexts."""

from collections.abc import Mapping
from dataclasses import dataclass

AUTHORIZATION_KEY = "authorization"


@dataclass(frozen=True)
class AnonymousSession:
    """A visitor who has not signed in."""

    is_authenticated = False


@dataclass(frozen=True)
class AuthenticatedSession:
    """A customer who signed in during this browser session."""

    username: str
    is_authenticated = True


SessionContext = AnonymousSession | AuthenticatedSession


def session_context_from(session: Mapping[str, object]) -> SessionContext:
    """Build a session context from the raw cookie-backed session mapping."""
    marker = session.get(AUTHORIZATION_KEY)
    if not marker:
        return AnonymousSession()
    username = marker.get("username") if isinstance(marker, Mapping) else None
    if not isinstance(username, str) or not username:
        return AnonymousSession()
    return AuthenticatedSession(username=username)


def authorization_marker(username: str) -> dict[str, str]:
    """Return the session value recorded on sign-in."""
    return {"username": username}
