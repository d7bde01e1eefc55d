"""
Client for the hosted OAuth users service.

The service owns the Google OAuth flow and the resulting sessions. This
backend only asks it for a redirect URL, trades authorization codes for
session tokens, looks up the user behind a session and deletes sessions.
"""

import logging
from typing import Any, Optional

import httpx

from shared.config import Settings, get_settings

from .exceptions import AuthNotConfiguredError, OAuthServiceError

logger = logging.getLogger(__name__)


class OAuthServiceClient:
    """Thin async HTTP wrapper around the OAuth users service API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or get_settings()
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.oauth_service_api_url and self._settings.oauth_service_api_key)

    def _client(self) -> httpx.AsyncClient:
        if not self.is_configured:
            raise AuthNotConfiguredError("OAUTH_SERVICE_API_URL/OAUTH_SERVICE_API_KEY")
        return httpx.AsyncClient(
            base_url=self._settings.oauth_service_api_url.rstrip("/"),
            headers={"x-api-key": self._settings.oauth_service_api_key},
            timeout=self._settings.external_request_timeout,
            transport=self._transport,
        )

    async def get_redirect_url(self, provider: str) -> str:
        """Get the URL that starts the OAuth flow for ``provider``."""
        async with self._client() as client:
            response = await self._send(client, "GET", f"/oauth/{provider}/redirect_url")
        data = response.json()
        redirect_url = data.get("redirect_url") or data.get("redirectUrl")
        if not redirect_url:
            raise OAuthServiceError("OAuth service returned no redirect URL")
        return redirect_url

    async def exchange_code(self, code: str) -> str:
        """Trade an authorization code for a session token."""
        async with self._client() as client:
            response = await self._send(client, "POST", "/sessions", json={"code": code})
        session_token = response.json().get("session_token")
        if not session_token:
            raise OAuthServiceError("OAuth service returned no session token")
        return session_token

    async def get_session_user(self, session_token: str) -> Optional[dict[str, Any]]:
        """
        Look up the user behind a session token.

        Returns:
            The user payload, or None if the session is unknown or expired.

        Raises:
            OAuthServiceError: If the service is unreachable or fails
        """
        async with self._client() as client:
            try:
                response = await client.get(
                    "/users/me",
                    headers={"Authorization": f"Bearer {session_token}"},
                )
            except httpx.HTTPError as e:
                logger.error("OAuth service session lookup failed: %s", e)
                raise OAuthServiceError(f"OAuth service unreachable: {e}") from e
        if response.status_code in (401, 403, 404):
            return None
        self._raise_for_status(response)
        return response.json()

    async def delete_session(self, session_token: str) -> None:
        """Invalidate a session at the OAuth service."""
        async with self._client() as client:
            await self._send(
                client,
                "DELETE",
                "/sessions",
                headers={"Authorization": f"Bearer {session_token}"},
            )

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("OAuth service %s %s failed: %s", method, url, e)
            raise OAuthServiceError(f"OAuth service unreachable: {e}") from e
        self._raise_for_status(response)
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_error:
            logger.error(
                "OAuth service returned %s for %s",
                response.status_code,
                response.request.url,
            )
            raise OAuthServiceError(f"OAuth service returned {response.status_code}")
