"""Factories shared by the auth tests."""

from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import httpx

from modules.auth.models import LocalUser
from modules.auth.oauth_client import OAuthServiceClient
from modules.auth.providers import LocalTokenProvider, OAuthSessionProvider
from modules.auth.service import AuthService, hash_password
from modules.auth.tokens import TokenIssuer

from tests.conftest import make_test_settings


OAUTH_SETTINGS = {
    "oauth_service_api_url": "https://users.example.com",
    "oauth_service_api_key": "oauth-key",
}


def create_local_user(
    email: str = "kari@example.com",
    password: str = "hemmelig123",
    **overrides,
) -> LocalUser:
    """Create a LocalUser whose hash matches ``password``."""
    data = {
        "id": "local-user-1",
        "email": email,
        "name": "Kari Nordmann",
        "password_hash": hash_password(password, 4),
    }
    data.update(overrides)
    return LocalUser(**data)


def oauth_users_handler(
    users: Optional[dict[str, dict]] = None,
    calls: Optional[list[httpx.Request]] = None,
):
    """
    MockTransport handler standing in for the OAuth users service.

    ``users`` maps session tokens to user payloads.
    """
    users = users or {}

    def handle(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        path = request.url.path
        if path.startswith("/oauth/") and path.endswith("/redirect_url"):
            return httpx.Response(200, json={"redirect_url": "https://accounts.google.com/o/oauth2"})
        if path == "/sessions" and request.method == "POST":
            return httpx.Response(200, json={"session_token": "sess-new"})
        if path == "/sessions" and request.method == "DELETE":
            return httpx.Response(204)
        if path == "/users/me":
            token = request.headers.get("Authorization", "").removeprefix("Bearer ")
            if token in users:
                return httpx.Response(200, json=users[token])
            return httpx.Response(401)
        return httpx.Response(404)

    return handle


def build_service(
    users_repo: Optional[MagicMock] = None,
    oauth_handler=None,
    profiles: Optional[AsyncMock] = None,
    **settings_overrides,
) -> AuthService:
    """
    AuthService with a mock user repository and, when ``oauth_handler`` is
    given, an OAuth client served by that handler.
    """
    overrides = dict(OAUTH_SETTINGS) if oauth_handler else {}
    overrides.update(settings_overrides)
    settings = make_test_settings(**overrides)

    issuer = TokenIssuer(settings)
    transport = httpx.MockTransport(oauth_handler) if oauth_handler else None
    oauth_client = OAuthServiceClient(settings, transport=transport)

    if users_repo is None:
        users_repo = MagicMock()
        users_repo.get_by_email.return_value = None

    return AuthService(
        users=users_repo,
        issuer=issuer,
        oauth_client=oauth_client,
        providers=[LocalTokenProvider(issuer), OAuthSessionProvider(oauth_client)],
        profiles=profiles,
        settings=settings,
    )
