"""
Domain exceptions raised by the store and service layers.

The API layer converts these into HTTP status codes; nothing below
the endpoints knows about HTTP.
"""


class MovieError(Exception):
    """Base class for movie related failures."""


class MovieNotFoundError(MovieError):
    """No movie matches the requested id or title."""

    def __init__(self, key) -> None:
        super().__init__(f"Movie {key!r} not found")
        self.key = key


class PersistError(MovieError):
    """A write was rejected or did not commit."""


class AmbiguousResultError(MovieError):
    """A lookup expected to match at most one movie matched several."""
