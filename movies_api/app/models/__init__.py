"""
Domain entities.

Entities are plain dataclasses.  They are kept apart from the
Pydantic schemas so the API representation can evolve independently
of storage.
"""

from .movie import Movie  # noqa: F401
