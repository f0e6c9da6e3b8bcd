from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from movies_api.app.core.db import init_db
from movies_api.app.main import create_app
from movies_api.app.models.movie import Movie
from movies_api.app.services.movie_store import MovieStore, SQLiteMovieStore


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "movies.db")
    init_db(path)
    return path


@pytest.fixture
def store(db_path):
    return SQLiteMovieStore(db_path)


@pytest.fixture
def seeded_store(store):
    store.create(Movie(title="The Shawshank Redemption", director="Frank Darabont", country="USA"))
    store.create(Movie(title="Amélie", director="Jean-Pierre Jeunet", country="France"))
    store.create(Movie(title="The Godfather", director="Francis Ford Coppola", country="USA"))
    store.create(Movie(title="Pulp Fiction", director="Quentin Tarantino", country="USA"))
    return store


@pytest.fixture
def mock_store():
    return create_autospec(MovieStore, instance=True)


@pytest.fixture
def client(mock_store):
    return TestClient(create_app(mock_store))


@pytest.fixture
def sqlite_client(tmp_path):
    app = create_app(SQLiteMovieStore(str(tmp_path / "api.db")))
    # Entering the context runs the lifespan that creates the table.
    with TestClient(app) as test_client:
        yield test_client
