"""
Pytest configuration and fixtures

Every test gets its own SQLite file under ``tmp_path`` so nothing
leaks between tests.
"""
import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import Settings
from exercise_tracker_api.app.core.db import Store
from exercise_tracker_api.app.main import create_app


@pytest.fixture
def app_settings(tmp_path):
    return Settings(database_url=str(tmp_path / "exercise_tracker_test.db"))


@pytest.fixture
def store(app_settings):
    """A connected store on an empty database."""
    db = Store(app_settings.database_url)
    db.connect()
    yield db
    db.close()


@pytest.fixture
def client(app_settings):
    """Test client; entering the context runs the startup handlers."""
    app = create_app(app_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_user(client):
    """Register a user through the API and return the response body."""
    def _create(username: str) -> dict:
        response = client.post("/api/users", data={"username": username})
        assert response.status_code == 200
        return response.json()
    return _create


@pytest.fixture
def add_exercise(client):
    """Log an exercise through the API and return the response."""
    def _add(user_id: str, description: str = "run", duration="30", date=None):
        data = {"description": description, "duration": duration}
        if date is not None:
            data["date"] = date
        return client.post(f"/api/users/{user_id}/exercises", data=data)
    return _add
