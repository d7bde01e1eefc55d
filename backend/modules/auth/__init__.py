"""
Authentication module.

Public API:
- IAuthService: interface other modules depend on
- ICredentialProvider: one identity system (bearer token or session cookie)
- Credentials: what a request presented
- TokenIssuer: local bearer token signing
"""

from .interfaces import IAuthService, ICredentialProvider
from .models import (
    AuthResponse,
    AuthUserInfo,
    Credentials,
    LocalUser,
    LoginRequest,
    RegisterRequest,
    TokenClaims,
)
from .tokens import TokenIssuer
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    EmailAlreadyRegisteredError,
    AuthNotConfiguredError,
    OAuthServiceError,
)

__all__ = [
    "IAuthService",
    "ICredentialProvider",
    "AuthResponse",
    "AuthUserInfo",
    "Credentials",
    "LocalUser",
    "LoginRequest",
    "RegisterRequest",
    "TokenClaims",
    "TokenIssuer",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "EmailAlreadyRegisteredError",
    "AuthNotConfiguredError",
    "OAuthServiceError",
]
