"""
Profiles module interface.

Auth registration and the API layer depend on IProfileService, not the
concrete implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import ProfileFields, UserProfile


@runtime_checkable
class IProfileService(Protocol):
    """Profile reads and writes for an authenticated identity."""

    async def get(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's profile, or None if they have not created one."""
        ...

    async def require(self, user_id: str) -> UserProfile:
        """
        Get a user's profile.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def upsert(self, user: AuthenticatedUser, fields: ProfileFields) -> UserProfile:
        """
        Create or update the caller's profile.

        The email always comes from the identity, never from ``fields``.
        """
        ...

    async def create_default(self, user_id: str, email: str, name: str) -> UserProfile:
        """Create the initial individual profile for a newly registered user."""
        ...
