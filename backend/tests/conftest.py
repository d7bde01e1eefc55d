"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import MagicMock
import jwt  # PyJWT

from api.dependencies import reset_container
from shared.config import Settings, get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def make_test_settings(**overrides) -> Settings:
    """Settings with a known JWT secret and no external services configured."""
    values = {
        "jwt_secret": TEST_JWT_SECRET,
        "bcrypt_rounds": 4,
        "oauth_service_api_url": "",
        "oauth_service_api_key": "",
        "resend_api_key": "",
        "supabase_url": "",
        "supabase_service_role_key": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    name: str = "Test User",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a local bearer token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        name: Display name to include in the token
        expired: If True, creates an expired token
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(days=7)

    payload = {
        "userId": user_id,
        "email": email,
        "name": name,
        "authType": "local",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def mock_query(data=None) -> MagicMock:
    """
    Chainable stand-in for a Supabase query builder.

    Every builder method returns the same mock, and ``execute()`` returns
    an object whose ``data`` is the given rows.
    """
    query = MagicMock()
    for method in ("select", "insert", "update", "delete", "eq", "gte", "lte",
                   "in_", "or_", "order", "limit"):
        getattr(query, method).return_value = query
    query.execute.return_value = MagicMock(data=data if data is not None else [])
    return query


def mock_db(data=None) -> tuple[MagicMock, MagicMock]:
    """Supabase client mock whose every table returns the same query mock."""
    db = MagicMock()
    query = mock_query(data)
    db.table.return_value = query
    return db, query


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the settings cache and service container around each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    return make_test_settings()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def app(test_settings):
    """
    Fresh app whose auth service uses the test secret and a mock database.

    Route tests override the service under test on top of this.
    """
    from api.app import create_app
    from api.dependencies import get_auth_service
    from modules.auth.service import build_auth_service

    app = create_app()
    auth_service = build_auth_service(db=MagicMock(), settings=test_settings)
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    return app
