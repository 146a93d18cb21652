"""Tests for session contexts."""

from bookstore.domain.sessions import (
    AnonymousSession,
    AuthenticatedSession,
    authorization_marker,
    session_context_from,
)


def test_empty_session_is_anonymous() -> None:
    assert session_context_from({}) == AnonymousSession()


def test_marker_yields_authenticated_session() -> None:
    context = session_context_from({"authorization": authorization_marker("alice")})

    assert context == AuthenticatedSession(username="alice")
    assert context.is_authenticated


def test_malformed_marker_is_anonymous() -> None:
    assert session_context_from({"authorization": True}) == AnonymousSession()
    empty_name = {"authorization": {"username": ""}}
    assert session_context_from(empty_name) == AnonymousSession()
