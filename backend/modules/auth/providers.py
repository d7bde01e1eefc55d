"""
Credential providers behind the unified authentication port.
"""

import logging
from typing import Any, Optional

from shared.exceptions import AuthenticationError
from shared.models import AuthType, AuthenticatedUser

from .exceptions import OAuthServiceError
from .models import Credentials
from .oauth_client import OAuthServiceClient
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)


class LocalTokenProvider:
    """Recognises bearer JWTs issued by this backend."""

    auth_type = AuthType.LOCAL

    def __init__(self, issuer: TokenIssuer):
        self._issuer = issuer

    async def authenticate(self, credentials: Credentials) -> Optional[AuthenticatedUser]:
        if not credentials.bearer_token:
            return None
        try:
            claims = self._issuer.decode(credentials.bearer_token)
        except AuthenticationError as e:
            logger.debug("Bearer token rejected: %s", e.message)
            return None
        return claims.to_user()

    async def logout(self, credentials: Credentials) -> None:
        # Bearer tokens are stateless; the client discards its copy.
        return None


class OAuthSessionProvider:
    """Recognises session cookies issued by the OAuth users service."""

    auth_type = AuthType.GOOGLE

    def __init__(self, client: OAuthServiceClient):
        self._client = client

    async def authenticate(self, credentials: Credentials) -> Optional[AuthenticatedUser]:
        if not credentials.session_token or not self._client.is_configured:
            return None
        try:
            payload = await self._client.get_session_user(credentials.session_token)
        except OAuthServiceError as e:
            logger.warning("Session cookie not checked, OAuth service failed: %s", e.message)
            return None
        if not payload or not payload.get("id"):
            return None
        return self._map_to_user(payload)

    async def logout(self, credentials: Credentials) -> None:
        if not credentials.session_token or not self._client.is_configured:
            return None
        await self._client.delete_session(credentials.session_token)

    def _map_to_user(self, payload: dict[str, Any]) -> AuthenticatedUser:
        """Map the users service payload to an AuthenticatedUser."""
        google_data = payload.get("google_user_data") or {}
        return AuthenticatedUser(
            id=str(payload["id"]),
            email=payload.get("email") or google_data.get("email") or "",
            name=google_data.get("name") or payload.get("name") or "",
            auth_type=AuthType.GOOGLE,
        )
