"""
Authentication dependencies.

Collects the bearer token and session cookie from a request and hands
them to the auth service, which decides who the caller is.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import MissingTokenError
from modules.auth.models import Credentials
from shared.config import get_settings
from shared.models import AuthenticatedUser

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def get_credentials(
    request: Request,
    bearer: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Credentials:
    """Raw credentials presented with the request, either may be missing."""
    settings = get_settings()
    return Credentials(
        bearer_token=bearer.credentials if bearer else None,
        session_token=request.cookies.get(settings.session_cookie_name),
    )


async def get_optional_user(
    credentials: Credentials = Depends(get_credentials),
    auth_service=Depends(get_auth_service),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without authentication.

    Usage:
        @router.get("/public")
        async def public_route(user: Optional[AuthenticatedUser] = Depends(get_optional_user)):
            if user:
                return {"message": f"Hello, {user.name}"}
            return {"message": "Hello, anonymous"}
    """
    if not credentials.bearer_token and not credentials.session_token:
        return None
    return await auth_service.authenticate(credentials)


async def get_current_user(
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Raises MissingTokenError (401) when no credential validates.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if user is None:
        raise MissingTokenError()
    return user

