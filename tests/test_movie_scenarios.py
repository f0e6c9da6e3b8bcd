"""End-to-end flows over a real SQLite store."""

import logging


def test_create_update_delete_flow(sqlite_client):
    response = sqlite_client.post("/movies", json={"title": "Inception", "country": "USA"})
    assert response.status_code == 201
    assert response.headers["Location"] == "/movies/1"

    response = sqlite_client.get("/movies/1")
    assert response.status_code == 200
    assert response.json()["id"] == 1

    response = sqlite_client.put("/movies/1", json={"title": "Inception 2", "country": "France"})
    assert response.status_code == 200
    assert response.json() == {
        "id": 1,
        "title": "Inception 2",
        "description": None,
        "director": None,
        "country": "USA",
    }

    assert sqlite_client.delete("/movies/1").status_code == 204
    assert sqlite_client.get("/movies/1").status_code == 404
    assert sqlite_client.delete("/movies/1").status_code == 404
    assert sqlite_client.put("/movies/1", json={"title": "Gone"}).status_code == 404


def test_country_listing(sqlite_client):
    for title in ("Jaws", "Heat", "Alien"):
        sqlite_client.post("/movies", json={"title": title, "country": "USA"})
    sqlite_client.post("/movies", json={"title": "Amélie", "country": "France"})

    response = sqlite_client.get("/movies/country/USA")
    assert response.status_code == 200
    assert [m["title"] for m in response.json()] == ["Alien", "Heat", "Jaws"]

    response = sqlite_client.get("/movies/country/Spain")
    assert response.status_code == 200
    assert response.json() == []

    assert len(sqlite_client.get("/movies").json()) == 4


def test_title_lookup(sqlite_client):
    sqlite_client.post("/movies", json={"title": "Heat", "director": "Michael Mann"})

    response = sqlite_client.get("/movies/title/Heat")
    assert response.status_code == 200
    assert response.json()["director"] == "Michael Mann"

    assert sqlite_client.get("/movies/title/Ronin").status_code == 404

    sqlite_client.post("/movies", json={"title": "Heat", "director": "Dick Richards"})
    assert sqlite_client.get("/movies/title/Heat").status_code == 500


def test_constraint_violations(sqlite_client):
    response = sqlite_client.post("/movies", json={"title": "x" * 101})
    assert response.status_code == 400
    assert sqlite_client.get("/movies").json() == []

    response = sqlite_client.post("/movies", json={"title": "Short", "description": "y" * 201})
    assert response.status_code == 400

    sqlite_client.post("/movies", json={"title": "Short"})
    movie_id = sqlite_client.get("/movies").json()[0]["id"]
    response = sqlite_client.put(f"/movies/{movie_id}", json={"title": "x" * 101})
    assert response.status_code == 400
    assert sqlite_client.get(f"/movies/{movie_id}").json()["title"] == "Short"


def test_ids_beyond_integer_range_are_not_found(sqlite_client):
    sqlite_client.post("/movies", json={"title": "Heat"})
    huge = 2 ** 70

    assert sqlite_client.get(f"/movies/{huge}").status_code == 404
    assert sqlite_client.put(f"/movies/{huge}", json={"title": "Ronin"}).status_code == 404
    assert sqlite_client.delete(f"/movies/{huge}").status_code == 404
    assert sqlite_client.get(f"/movies/{-huge}").status_code == 404
    assert [m["title"] for m in sqlite_client.get("/movies").json()] == ["Heat"]


def test_ambiguous_title_logged_once(sqlite_client, caplog):
    sqlite_client.post("/movies", json={"title": "Heat", "director": "Michael Mann"})
    sqlite_client.post("/movies", json={"title": "Heat", "director": "Dick Richards"})

    with caplog.at_level(logging.ERROR):
        assert sqlite_client.get("/movies/title/Heat").status_code == 500

    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert "Heat" in errors[0].getMessage()
