"""
Local bearer token issuing and verification.

Tokens are HS256 JWTs carrying ``{userId, email, name, authType, iat, exp}``
and expire after ``JWT_EXPIRY_DAYS`` (7 by default).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from .models import TokenClaims


class TokenIssuer:
    """Signs and verifies local bearer tokens with the server-held secret."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def _secret(self) -> str:
        if not self._settings.jwt_secret:
            raise AuthNotConfiguredError("JWT_SECRET")
        return self._settings.jwt_secret

    def issue(self, user: AuthenticatedUser, now: Optional[datetime] = None) -> str:
        """
        Create a signed token for a user.

        Args:
            user: Identity to embed in the claims
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + timedelta(days=self._settings.jwt_expiry_days)
        claims = TokenClaims(
            user_id=user.id,
            email=user.email,
            name=user.name,
            auth_type=user.auth_type,
            iat=int(issued_at.timestamp()),
            exp=int(expires_at.timestamp()),
        )
        return jwt.encode(
            claims.model_dump(by_alias=True, mode="json"),
            self._secret(),
            algorithm=self._settings.jwt_algorithm,
        )

    def decode(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry and return its claims.

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the signature or claims are invalid
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret(),
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["exp", "iat"]},
            )
            return TokenClaims.model_validate(payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))
        except PydanticValidationError:
            raise InvalidTokenError("Token claims are incomplete")
