"""
API tests for user registration and listing.
"""

import sqlite3


def test_create_user_echoes_username_with_new_id(client):
    response = client.post("/api/users", data={"username": "fcc_test"})

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "fcc_test"
    assert isinstance(body["_id"], str) and body["_id"]
    assert set(body) == {"username", "_id"}


def test_create_user_accepts_json(client):
    response = client.post("/api/users", json={"username": "json_user"})

    assert response.status_code == 200
    assert response.json()["username"] == "json_user"


def test_existing_username_returns_original_record(client, create_user):
    first = create_user("alice")
    second = create_user("alice")

    assert second == first
    assert len(client.get("/api/users").json()) == 1


def test_distinct_usernames_get_distinct_ids(create_user):
    assert create_user("alice")["_id"] != create_user("bob")["_id"]


def test_missing_username_rejected(client):
    response = client.post("/api/users", data={})

    assert response.status_code == 400
    assert response.json() == {"error": "username is required"}
    assert client.get("/api/users").json() == []


def test_blank_username_rejected(client):
    response = client.post("/api/users", data={"username": "   "})

    assert response.status_code == 400
    assert response.json() == {"error": "username is required"}


def test_list_users_returns_all(client, create_user):
    alice = create_user("alice")
    bob = create_user("bob")

    response = client.get("/api/users")

    assert response.status_code == 200
    users = response.json()
    assert len(users) == 2
    assert {(u["username"], u["_id"]) for u in users} == {
        ("alice", alice["_id"]),
        ("bob", bob["_id"]),
    }
    assert all(set(u) == {"username", "_id"} for u in users)


def test_list_users_store_failure_is_generic_500(client, monkeypatch):
    def broken():
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(client.app.state.store, "list_users", broken)

    response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}


def test_create_user_store_failure_is_generic_500(client, monkeypatch):
    def broken(username):
        raise sqlite3.OperationalError("disk I/O error")

    monkeypatch.setattr(client.app.state.store, "find_user_by_username", broken)

    response = client.post("/api/users", data={"username": "alice"})

    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}


def test_static_assets_served_from_site_root(client):
    response = client.get("/style.css")

    assert response.status_code == 200
    assert "text/css" in response.headers["content-type"]


def test_api_routes_not_shadowed_by_static_files(client):
    assert client.get("/api/users").status_code == 200


def test_landing_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Exercise tracker" in response.text
