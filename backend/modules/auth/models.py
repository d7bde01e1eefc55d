"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shared.models import AuthType, AuthenticatedUser


class TokenClaims(BaseModel):
    """
    Claims of a locally issued bearer token.

    Claim names are camelCase on the wire to stay compatible with tokens
    already held by clients.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    name: str = Field(..., description="Display name")
    auth_type: AuthType = Field(..., alias="authType", description="Identity system")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    def to_user(self) -> AuthenticatedUser:
        return AuthenticatedUser(
            id=self.user_id,
            email=self.email,
            name=self.name,
            auth_type=self.auth_type,
        )


class Credentials(BaseModel):
    """Raw credentials presented with a request. Either may be absent."""

    bearer_token: Optional[str] = None
    session_token: Optional[str] = None


class LocalUser(BaseModel):
    """Email/password account stored in ``local_users``."""

    id: str
    email: str
    name: str
    password_hash: str
    email_verified: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RegisterRequest(BaseModel):
    """Email/password registration."""

    email: EmailStr
    password: str = Field(..., min_length=8)
    name: str = Field(..., min_length=2)


class LoginRequest(BaseModel):
    """Email/password login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthUserInfo(BaseModel):
    """User summary returned alongside a token."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: str
    name: str
    auth_type: AuthType = Field(..., alias="authType")


class AuthResponse(BaseModel):
    """Successful registration or login."""

    user: AuthUserInfo
    token: str


class SessionExchangeRequest(BaseModel):
    """OAuth authorization code to trade for a session cookie."""

    code: str = Field(..., min_length=1)


class RedirectUrlResponse(BaseModel):
    """Where to send the browser to start the OAuth flow."""

    model_config = ConfigDict(populate_by_name=True)

    redirect_url: str = Field(..., alias="redirectUrl")
