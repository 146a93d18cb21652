"""ASGI entrypoint for the bookstore API."""

from bookstore.api.app import create_app
from bookstore.containers import build_container

app = create_app(build_container())
