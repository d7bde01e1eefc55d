"""
Authentication service implementation.

Coalesces the local bearer-token provider and the OAuth session provider
into one port, and owns email/password registration and login.
"""

import asyncio
import logging
import uuid
from typing import Optional, Sequence

import bcrypt

from modules.profiles.interfaces import IProfileService
from shared.config import Settings, get_settings
from shared.exceptions import PVMarketError
from shared.models import AuthType, AuthenticatedUser

from .exceptions import EmailAlreadyRegisteredError, InvalidCredentialsError
from .interfaces import IAuthService, ICredentialProvider
from .models import AuthResponse, AuthUserInfo, Credentials, LoginRequest, RegisterRequest
from .oauth_client import OAuthServiceClient
from .providers import LocalTokenProvider, OAuthSessionProvider
from .repository import LocalUserRepository
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash. Malformed hashes never match."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Providers are consulted in order; the first one that recognises the
    credentials wins. The default order checks bearer tokens before cookies.
    """

    def __init__(
        self,
        users: LocalUserRepository,
        issuer: TokenIssuer,
        oauth_client: OAuthServiceClient,
        providers: Sequence[ICredentialProvider],
        profiles: Optional[IProfileService] = None,
        settings: Optional[Settings] = None,
    ):
        self._users = users
        self._issuer = issuer
        self._oauth = oauth_client
        self._providers = list(providers)
        self._profiles = profiles
        self._settings = settings or get_settings()

    async def authenticate(self, credentials: Credentials) -> Optional[AuthenticatedUser]:
        for provider in self._providers:
            user = await provider.authenticate(credentials)
            if user is not None:
                return user
        return None

    async def logout(self, credentials: Credentials) -> None:
        """Ask every provider to drop its session. A failing provider is logged and skipped."""
        for provider in self._providers:
            try:
                await provider.logout(credentials)
            except PVMarketError as e:
                logger.warning("%s logout failed: %s", provider.auth_type.value, e.message)

    async def register(self, request: RegisterRequest) -> AuthResponse:
        email = request.email.lower()
        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        password_hash = await asyncio.to_thread(
            hash_password, request.password, self._settings.bcrypt_rounds
        )
        local_user = self._users.create(
            user_id=str(uuid.uuid4()),
            email=email,
            name=request.name,
            password_hash=password_hash,
        )
        logger.info("Registered local user %s", local_user.id)

        if self._profiles is not None:
            await self._profiles.create_default(local_user.id, local_user.email, local_user.name)

        return self._signed_in(AuthenticatedUser(
            id=local_user.id,
            email=local_user.email,
            name=local_user.name,
            auth_type=AuthType.LOCAL,
        ))

    async def login(self, request: LoginRequest) -> AuthResponse:
        local_user = self._users.get_by_email(request.email)
        if local_user is None:
            raise InvalidCredentialsError()

        matches = await asyncio.to_thread(
            verify_password, request.password, local_user.password_hash
        )
        if not matches:
            raise InvalidCredentialsError()

        return self._signed_in(AuthenticatedUser(
            id=local_user.id,
            email=local_user.email,
            name=local_user.name,
            auth_type=AuthType.LOCAL,
        ))

    async def oauth_redirect_url(self) -> str:
        return await self._oauth.get_redirect_url(self._settings.oauth_provider)

    async def exchange_code(self, code: str) -> str:
        return await self._oauth.exchange_code(code)

    def _signed_in(self, user: AuthenticatedUser) -> AuthResponse:
        return AuthResponse(
            user=AuthUserInfo(
                id=user.id,
                email=user.email,
                name=user.name,
                auth_type=user.auth_type,
            ),
            token=self._issuer.issue(user),
        )


def build_auth_service(db=None, profiles=None, settings: Optional[Settings] = None) -> AuthService:
    """Wire an AuthService with both providers, bearer first."""
    settings = settings or get_settings()
    if db is None:
        from shared.database import get_supabase_client
        db = get_supabase_client()

    issuer = TokenIssuer(settings)
    oauth_client = OAuthServiceClient(settings)

    return AuthService(
        users=LocalUserRepository(db),
        issuer=issuer,
        oauth_client=oauth_client,
        providers=[LocalTokenProvider(issuer), OAuthSessionProvider(oauth_client)],
        profiles=profiles,
        settings=settings,
    )
