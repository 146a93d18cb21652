"""Run the bookstore API server."""

import uvicorn

from bookstore.config import Settings


def main() -> None:
    """Serve the ASGI app on the configured host and port."""
    settings = Settings()
    uvicorn.run("bookstore.api.asgi:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
