"""
Business logic for movies.

``MovieService`` wraps a ``MovieStore`` passed in at construction and
turns absent results into ``MovieNotFoundError`` so the API layer can
map them to status codes.  It keeps no state besides the store
reference.
"""

import logging
from typing import List

from movies_api.app.core.errors import MovieNotFoundError, PersistError
from movies_api.app.models.movie import Movie
from movies_api.app.schemas.movie import MovieCreate, MovieUpdate
from movies_api.app.services.movie_store import MovieStore


logger = logging.getLogger(__name__)


class MovieService:
    """Service for listing, reading, creating, updating and deleting movies."""

    def __init__(self, store: MovieStore) -> None:
        self.store = store

    async def list_movies(self) -> List[Movie]:
        return self.store.list_all()

    async def get_movie(self, movie_id: int) -> Movie:
        movie = self.store.find_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    async def get_movie_by_title(self, title: str) -> Movie:
        """Look a movie up by exact title.

        ``AmbiguousResultError`` from the store is not caught here: a
        duplicated title is a data fault, not a missing movie.
        """
        movie = self.store.find_by_title(title)
        if movie is None:
            raise MovieNotFoundError(title)
        return movie

    async def list_movies_by_country(self, country: str) -> List[Movie]:
        return self.store.find_by_country(country)

    async def create_movie(self, data: MovieCreate) -> Movie:
        """Persist a new movie and confirm it can be read back.

        Raises ``PersistError`` when the store rejects the write or the
        returned record is not found in the store afterwards.
        """
        movie = self.store.create(
            Movie(
                title=data.title,
                description=data.description,
                director=data.director,
                country=data.country,
            )
        )
        if not self.store.is_persistent(movie):
            logger.warning("Movie %r was not persisted", data.title)
            raise PersistError("Movie was not persisted")
        return movie

    async def update_movie_title(self, movie_id: int, data: MovieUpdate) -> Movie:
        """Apply the title from ``data`` to an existing movie.

        Every other field in ``data`` is ignored.
        """
        movie = self.store.update_title(movie_id, data.title)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    async def delete_movie(self, movie_id: int) -> None:
        if not self.store.delete_by_id(movie_id):
            raise MovieNotFoundError(movie_id)
