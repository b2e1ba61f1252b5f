"""
Integration tests for the /api/local-exercises endpoints.

Tests the authenticated view of the imported catalog with a fake store.
"""
import pytest
from fastapi.testclient import TestClient

from api.deps import get_catalog_store, get_current_user
from application.exceptions import CatalogStoreError
from backend.main import app
from tests.fakes import FakeCatalogStore

TEST_USER_ID = "test-user-123"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test user."""
    return TEST_USER_ID


@pytest.fixture
def store():
    store = FakeCatalogStore()
    store.seed([
        {
            "external_id": "0025",
            "name": "Barbell Bench Press",
            "muscle_group": "chest",
            "body_part": "chest",
            "target": "pectorals",
            "equipment": "barbell",
            "secondary_muscles": ["triceps"],
            "gif_url": "https://cdn.example.com/0025.gif",
            "notes": "Lie flat on the bench.\nPress the bar up.",
        },
        {"external_id": "0043", "name": "Barbell Full Squat", "muscle_group": "upper legs"},
        {"external_id": "0652", "name": "Pull-up", "muscle_group": "back"},
    ])
    return store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_catalog_store] = lambda: store

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.mark.integration
class TestListLocalExercises:
    """Tests for GET /api/local-exercises."""

    def test_list_returns_rows_in_id_order(self, client):
        response = client.get("/api/local-exercises")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [e["id"] for e in data["exercises"]] == [1, 2, 3]
        assert data["limit"] == 50
        assert data["offset"] == 0

    def test_list_pagination(self, client):
        response = client.get("/api/local-exercises", params={"limit": 1, "offset": 1})

        data = response.json()
        assert [e["name"] for e in data["exercises"]] == ["Barbell Full Squat"]

    def test_limit_above_max_rejected(self, client):
        response = client.get("/api/local-exercises", params={"limit": 500})
        assert response.status_code == 422

    def test_store_failure_returns_500(self):
        class BrokenStore(FakeCatalogStore):
            def list_all(self, limit=50, offset=0):
                raise CatalogStoreError("connection reset")

        app.dependency_overrides[get_current_user] = mock_get_current_user
        app.dependency_overrides[get_catalog_store] = lambda: BrokenStore()
        try:
            response = TestClient(app).get("/api/local-exercises")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to list exercises"}


@pytest.mark.integration
class TestGetLocalExercise:
    """Tests for GET /api/local-exercises/{id}."""

    def test_detail_splits_notes_into_instructions(self, client):
        response = client.get("/api/local-exercises/1")

        assert response.status_code == 200
        item = response.json()["item"]
        assert item["id"] == 1
        assert item["externalId"] == "0025"
        assert item["gifUrl"] == "https://cdn.example.com/0025.gif"
        assert item["instructions"] == ["Lie flat on the bench.", "Press the bar up."]

    def test_unknown_id_returns_404(self, client):
        response = client.get("/api/local-exercises/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Exercise not found"}

    @pytest.mark.parametrize("raw_id", ["0", "-3", "abc", "1.5"])
    def test_invalid_id_returns_400(self, client, raw_id):
        response = client.get(f"/api/local-exercises/{raw_id}")

        assert response.status_code == 400
        assert response.json() == {"error": "id required"}


@pytest.mark.integration
class TestLocalExercisesAuth:
    """The local catalog requires authentication."""

    def test_missing_credentials_returns_401(self, store):
        app.dependency_overrides[get_catalog_store] = lambda: store
        try:
            response = TestClient(app).get("/api/local-exercises")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 401
