"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and
the schema bootstrap run on application start (``init_db``).  All
helpers accept an explicit database path; when omitted they fall back
to ``settings.database_url``.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings


SCHEMA = """
CREATE TABLE IF NOT EXISTS movies (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT CHECK (title IS NULL OR length(title) <= 100),
    description TEXT CHECK (description IS NULL OR length(description) <= 200),
    director TEXT,
    country TEXT
);

CREATE INDEX IF NOT EXISTS idx_movies_country ON movies(country);
CREATE INDEX IF NOT EXISTS idx_movies_title ON movies(title);
"""


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths are returned unchanged, relative ones are resolved
    against the project root.
    """
    db_url = db_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


def get_connection(db_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by
    name.
    """
    conn = sqlite3.connect(get_database_path(db_url))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_url: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(db_url)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_url: Optional[str] = None) -> None:
    """Create the ``movies`` table and its indices if they are missing."""
    with get_cursor(db_url) as cursor:
        cursor.executescript(SCHEMA)
