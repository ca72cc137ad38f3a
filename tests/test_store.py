"""
Tests for the SQLite record store.
"""

import sqlite3

import pytest

from exercise_tracker_api.app.core.db import MIGRATIONS, Store, resolve_database_path


def test_connect_applies_all_migrations(store):
    rows = store.connection.execute("SELECT version FROM migrations ORDER BY version").fetchall()
    assert [row["version"] for row in rows] == [version for version, _ in MIGRATIONS]


def test_reconnect_does_not_reapply_migrations(app_settings, store):
    store.insert_user("alice")
    store.close()

    reopened = Store(app_settings.database_url)
    reopened.connect()
    try:
        assert [row["username"] for row in reopened.list_users()] == ["alice"]
        count = reopened.connection.execute("SELECT COUNT(*) AS n FROM migrations").fetchone()["n"]
        assert count == len(MIGRATIONS)
    finally:
        reopened.close()


def test_connection_requires_connect(app_settings):
    db = Store(app_settings.database_url)
    assert not db.is_connected
    with pytest.raises(RuntimeError):
        db.connection


def test_resolve_database_path_keeps_memory_and_absolute(tmp_path):
    assert resolve_database_path(":memory:") == ":memory:"
    absolute = str(tmp_path / "x.db")
    assert resolve_database_path(absolute) == absolute


def test_insert_user_generates_unique_ids(store):
    first = store.insert_user("alice")
    second = store.insert_user("bob")
    assert first["id"] != second["id"]
    assert len(first["id"]) == 32


def test_duplicate_username_violates_constraint(store):
    store.insert_user("alice")
    with pytest.raises(sqlite3.IntegrityError):
        store.insert_user("alice")


def test_find_user(store):
    user = store.insert_user("alice")
    assert store.find_user_by_id(user["id"])["username"] == "alice"
    assert store.find_user_by_username("alice")["id"] == user["id"]
    assert store.find_user_by_id("missing") is None


class TestFindExercises:
    @pytest.fixture
    def user_id(self, store):
        user_id = store.insert_user("runner")["id"]
        for day in ("2024-01-20", "2024-01-01", "2024-01-10"):
            store.insert_exercise(user_id, f"run {day}", 30, day)
        return user_id

    def test_sorted_ascending_by_date(self, store, user_id):
        rows = store.find_exercises(user_id)
        assert [row["date"] for row in rows] == ["2024-01-01", "2024-01-10", "2024-01-20"]

    def test_bounds_are_inclusive(self, store, user_id):
        rows = store.find_exercises(user_id, date_from="2024-01-10", date_to="2024-01-20")
        assert [row["date"] for row in rows] == ["2024-01-10", "2024-01-20"]

    def test_single_bound(self, store, user_id):
        assert len(store.find_exercises(user_id, date_from="2024-01-05")) == 2
        assert len(store.find_exercises(user_id, date_to="2024-01-05")) == 1

    def test_limit(self, store, user_id):
        rows = store.find_exercises(user_id, limit=2)
        assert [row["date"] for row in rows] == ["2024-01-01", "2024-01-10"]

    def test_other_users_excluded(self, store, user_id):
        other = store.insert_user("walker")["id"]
        store.insert_exercise(other, "walk", 10, "2024-01-01")
        assert len(store.find_exercises(user_id)) == 3
        assert len(store.find_exercises(other)) == 1

    def test_unknown_user_id_rejected_by_foreign_key(self, store):
        with pytest.raises(sqlite3.IntegrityError):
            store.insert_exercise("missing", "run", 30, "2024-01-01")
