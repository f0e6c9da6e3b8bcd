"""
Persistence layer for movies.

``MovieStore`` declares the capabilities the service relies on
(list, find, create, update, delete).  ``SQLiteMovieStore`` implements
them over the ``movies`` table.  Each operation opens its own
connection, commits its own write and closes the connection before
returning, so no state is shared between requests.

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import List, Optional

from movies_api.app.core.db import get_connection
from movies_api.app.core.errors import AmbiguousResultError, PersistError
from movies_api.app.models.movie import Movie


logger = logging.getLogger(__name__)

_COLUMNS = "id, title, description, director, country"

# Range of a SQLite INTEGER; ids outside it cannot name a stored row.
_MIN_ID = -2 ** 63
_MAX_ID = 2 ** 63 - 1


def _storable_id(movie_id: int) -> bool:
    return _MIN_ID <= movie_id <= _MAX_ID


class MovieStore(ABC):
    """Repository interface for movie records."""

    @abstractmethod
    def list_all(self) -> List[Movie]:
        """Return every movie in the store's natural order."""

    @abstractmethod
    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        """Return the movie with ``movie_id`` or ``None``."""

    @abstractmethod
    def find_by_title(self, title: str) -> Optional[Movie]:
        """Return the single movie titled ``title`` or ``None``.

        Raises ``AmbiguousResultError`` if several movies share the
        title.
        """

    @abstractmethod
    def find_by_country(self, country: str) -> List[Movie]:
        """Return movies from ``country``, newest id first."""

    @abstractmethod
    def create(self, movie: Movie) -> Movie:
        """Persist ``movie`` under a new id and return the stored record.

        Raises ``PersistError`` if the write does not commit.
        """

    @abstractmethod
    def update_title(self, movie_id: int, title: Optional[str]) -> Optional[Movie]:
        """Replace the title of an existing movie; ``None`` if absent."""

    @abstractmethod
    def delete_by_id(self, movie_id: int) -> bool:
        """Delete a movie and report whether a record was removed."""

    def is_persistent(self, movie: Movie) -> bool:
        """Check that ``movie`` carries an id that exists in the store."""
        return movie.id is not None and self.find_by_id(movie.id) is not None


class SQLiteMovieStore(MovieStore):
    """``MovieStore`` backed by a SQLite database file."""

    def __init__(self, database_path: Optional[str] = None) -> None:
        self.database_path = database_path

    def list_all(self) -> List[Movie]:
        conn = get_connection(self.database_path)
        try:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM movies ORDER BY id").fetchall()
            return [self._row_to_movie(row) for row in rows]
        finally:
            conn.close()

    def find_by_id(self, movie_id: int) -> Optional[Movie]:
        if not _storable_id(movie_id):
            return None
        conn = get_connection(self.database_path)
        try:
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM movies WHERE id = ?",
                (movie_id,),
            ).fetchone()
            return self._row_to_movie(row) if row else None
        finally:
            conn.close()

    def find_by_title(self, title: str) -> Optional[Movie]:
        conn = get_connection(self.database_path)
        try:
            # Two rows are enough to tell a unique match from an ambiguous one.
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM movies WHERE title = ? LIMIT 2",
                (title,),
            ).fetchall()
        finally:
            conn.close()
        if len(rows) > 1:
            raise AmbiguousResultError(f"More than one movie is titled {title!r}")
        return self._row_to_movie(rows[0]) if rows else None

    def find_by_country(self, country: str) -> List[Movie]:
        conn = get_connection(self.database_path)
        try:
            rows = conn.execute(
                f"SELECT {_COLUMNS} FROM movies WHERE country = ? ORDER BY id DESC",
                (country,),
            ).fetchall()
            return [self._row_to_movie(row) for row in rows]
        finally:
            conn.close()

    def create(self, movie: Movie) -> Movie:
        conn = get_connection(self.database_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO movies (title, description, director, country)
                VALUES (?, ?, ?, ?)
                """,
                (movie.title, movie.description, movie.director, movie.country),
            )
            movie_id = cursor.lastrowid
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.warning("Could not persist movie %r: %s", movie.title, e)
            raise PersistError(str(e)) from e
        finally:
            conn.close()
        logger.info("Created movie %s", movie_id)
        return Movie(
            id=movie_id,
            title=movie.title,
            description=movie.description,
            director=movie.director,
            country=movie.country,
        )

    def update_title(self, movie_id: int, title: Optional[str]) -> Optional[Movie]:
        if not _storable_id(movie_id):
            return None
        conn = get_connection(self.database_path)
        try:
            cursor = conn.cursor()
            cursor.execute("UPDATE movies SET title = ? WHERE id = ?", (title, movie_id))
            if cursor.rowcount == 0:
                return None
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM movies WHERE id = ?",
                (movie_id,),
            ).fetchone()
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.warning("Could not update title of movie %s: %s", movie_id, e)
            raise PersistError(str(e)) from e
        finally:
            conn.close()
        logger.info("Updated title of movie %s", movie_id)
        return self._row_to_movie(row)

    def delete_by_id(self, movie_id: int) -> bool:
        if not _storable_id(movie_id):
            return False
        conn = get_connection(self.database_path)
        try:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM movies WHERE id = ?", (movie_id,))
            affected = cursor.rowcount
            conn.commit()
        finally:
            conn.close()
        if affected:
            logger.info("Deleted movie %s", movie_id)
        return affected > 0

    @staticmethod
    def _row_to_movie(row: sqlite3.Row) -> Movie:
        """Convert a database row to a ``Movie``."""
        return Movie(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            director=row["director"],
            country=row["country"],
        )
