"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
Each identity system plugs in behind ICredentialProvider so the rest of the
backend only ever sees an AuthenticatedUser.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthType, AuthenticatedUser

from .models import AuthResponse, Credentials, LoginRequest, RegisterRequest


@runtime_checkable
class ICredentialProvider(Protocol):
    """One identity system able to recognise a request's credentials."""

    auth_type: AuthType

    async def authenticate(self, credentials: Credentials) -> Optional[AuthenticatedUser]:
        """
        Resolve credentials to an identity.

        Returns:
            AuthenticatedUser, or None if this provider does not recognise
            the credentials. Providers never raise for bad credentials.
        """
        ...

    async def logout(self, credentials: Credentials) -> None:
        """Drop whatever session this provider holds for the credentials."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def authenticate(self, credentials: Credentials) -> Optional[AuthenticatedUser]:
        """
        Identify the caller from whichever credential validates first.

        Bearer tokens are tried before session cookies.
        """
        ...

    async def logout(self, credentials: Credentials) -> None:
        """
        Ask every provider to drop its session.

        Never raises for a provider failure, so callers can always clear
        client-side credentials afterwards.
        """
        ...

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create a local email/password account and sign it in.

        Raises:
            EmailAlreadyRegisteredError: If the email already has an account
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Sign in with email and password.

        Raises:
            InvalidCredentialsError: On unknown email or wrong password
        """
        ...

    async def oauth_redirect_url(self) -> str:
        """URL that starts the OAuth flow at the users service."""
        ...

    async def exchange_code(self, code: str) -> str:
        """Trade an OAuth authorization code for a session token."""
        ...
