"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests swap implementations with ``app.dependency_overrides`` keyed on the
``get_*`` functions below.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.poles.interfaces import IPoleService
    from modules.profiles.interfaces import IProfileService
    from modules.pole_requests.interfaces import IPoleRequestService
    from modules.notifications.service import InquiryService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._db: "Client | None" = None
        self._auth_service: "IAuthService | None" = None
        self._pole_service: "IPoleService | None" = None
        self._profile_service: "IProfileService | None" = None
        self._pole_request_service: "IPoleRequestService | None" = None
        self._inquiry_service: "InquiryService | None" = None

    @property
    def db(self) -> "Client":
        """Get the service-role database client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.repository import ProfileRepository
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(ProfileRepository(self.db))
        return self._profile_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import build_auth_service
            self._auth_service = build_auth_service(db=self.db, profiles=self.profiles)
        return self._auth_service

    @property
    def poles(self) -> "IPoleService":
        """Get the pole service instance."""
        if self._pole_service is None:
            from modules.poles.repository import PoleRepository
            from modules.poles.service import PoleService
            self._pole_service = PoleService(repository=PoleRepository(self.db))
        return self._pole_service

    @property
    def pole_requests(self) -> "IPoleRequestService":
        """Get the pole request service instance."""
        if self._pole_request_service is None:
            from modules.poles.repository import PoleRepository
            from modules.pole_requests.repository import PoleRequestRepository
            from modules.pole_requests.service import PoleRequestService
            self._pole_request_service = PoleRequestService(
                repository=PoleRequestRepository(self.db),
                poles=PoleRepository(self.db),
            )
        return self._pole_request_service

    @property
    def inquiries(self) -> "InquiryService":
        """Get the inquiry notification service instance."""
        if self._inquiry_service is None:
            from modules.notifications.service import InquiryService
            self._inquiry_service = InquiryService(self.db, poles=self.poles)
        return self._inquiry_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._auth_service = None
        self._pole_service = None
        self._profile_service = None
        self._pole_request_service = None
        self._inquiry_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_pole_service() -> "IPoleService":
    """FastAPI dependency for pole service."""
    return get_container().poles


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_pole_request_service() -> "IPoleRequestService":
    """FastAPI dependency for pole request service."""
    return get_container().pole_requests


def get_inquiry_service() -> "InquiryService":
    """FastAPI dependency for inquiry notification service."""
    return get_container().inquiries
