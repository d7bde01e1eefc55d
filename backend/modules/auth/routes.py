"""
Authentication endpoints.

Covers both sign-in paths: Google via the OAuth users service (session
cookie) and local email/password accounts (bearer token).
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, ConfigDict, Field

from api.dependencies import get_auth_service, get_profile_service
from api.middleware.auth import get_credentials, get_current_user
from modules.profiles.models import UserProfile
from shared.config import get_settings
from shared.models import AuthType, AuthenticatedUser

from .models import (
    AuthResponse,
    Credentials,
    LoginRequest,
    RedirectUrlResponse,
    RegisterRequest,
    SessionExchangeRequest,
)

router = APIRouter()


class SuccessResponse(BaseModel):
    success: bool = True


class CurrentUserResponse(BaseModel):
    """The caller's identity plus their profile, if they have saved one."""

    model_config = ConfigDict(populate_by_name=True)

    user: AuthenticatedUser
    auth_type: AuthType = Field(..., alias="authType")
    profile: Optional[UserProfile] = None


def _set_session_cookie(response: Response, value: str, max_age: int) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=value,
        httponly=True,
        path="/",
        samesite="none",
        secure=True,
        max_age=max_age,
    )


@router.get("/oauth/google/redirect_url", response_model=RedirectUrlResponse)
async def get_oauth_redirect_url(
    auth_service=Depends(get_auth_service),
) -> RedirectUrlResponse:
    """URL that starts the Google sign-in flow."""
    redirect_url = await auth_service.oauth_redirect_url()
    return RedirectUrlResponse(redirect_url=redirect_url)


@router.post("/sessions", response_model=SuccessResponse)
async def create_session(
    body: SessionExchangeRequest,
    response: Response,
    auth_service=Depends(get_auth_service),
) -> SuccessResponse:
    """Trade an OAuth authorization code for a session cookie."""
    session_token = await auth_service.exchange_code(body.code)
    _set_session_cookie(response, session_token, get_settings().session_cookie_max_age)
    return SuccessResponse()


@router.post(
    "/auth/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    auth_service=Depends(get_auth_service),
) -> AuthResponse:
    """Create a local account and return a bearer token for it."""
    return await auth_service.register(body)


@router.post("/auth/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    auth_service=Depends(get_auth_service),
) -> AuthResponse:
    """Sign in with email and password."""
    return await auth_service.login(body)


@router.get("/users/me", response_model=CurrentUserResponse)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    profile_service=Depends(get_profile_service),
) -> CurrentUserResponse:
    """Who the caller is, however they signed in."""
    profile = await profile_service.get(user.id)
    return CurrentUserResponse(user=user, auth_type=user.auth_type, profile=profile)


@router.get("/logout", response_model=SuccessResponse)
async def logout(
    response: Response,
    credentials: Credentials = Depends(get_credentials),
    auth_service=Depends(get_auth_service),
) -> SuccessResponse:
    """Drop the OAuth session and clear the cookie."""
    await auth_service.logout(credentials)
    _set_session_cookie(response, "", 0)
    return SuccessResponse()
