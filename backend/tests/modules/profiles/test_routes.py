"""Tests for profile endpoints."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from api.dependencies import get_profile_service
from modules.profiles.exceptions import ProfileNotFoundError

from tests.modules.profiles.helpers import create_profile


@pytest.fixture
def profile_service():
    service = MagicMock()
    service.require = AsyncMock(return_value=create_profile(user_id="test-user-123"))
    service.upsert = AsyncMock(return_value=create_profile(user_id="test-user-123"))
    return service


@pytest.fixture
def client(app, profile_service):
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    return TestClient(app)


class TestGetProfile:
    def test_requires_auth(self, client):
        assert client.get("/api/profile").status_code == 401

    def test_returns_profile(self, client, auth_headers):
        response = client.get("/api/profile", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["user_id"] == "test-user-123"

    def test_not_found_before_first_save(self, client, profile_service, auth_headers):
        profile_service.require.side_effect = ProfileNotFoundError("test-user-123")
        response = client.get("/api/profile", headers=auth_headers)
        assert response.status_code == 404


class TestUpsertProfile:
    def test_upserts_for_caller(self, client, profile_service, auth_headers):
        response = client.post(
            "/api/profile",
            json={"user_type": "club", "club_name": "IL Tyrving", "is_verified": True},
            headers=auth_headers,
        )

        assert response.status_code == 200
        user, fields = profile_service.upsert.call_args[0]
        assert user.id == "test-user-123"
        assert fields.club_name == "IL Tyrving"
        assert not hasattr(fields, "is_verified")

    def test_user_type_is_required(self, client, auth_headers):
        response = client.post("/api/profile", json={"name": "Kari"}, headers=auth_headers)
        assert response.status_code == 422
