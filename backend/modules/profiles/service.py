"""
Profile service.

Upsert semantics against ``user_profiles``: the first save creates the
row, later saves overwrite the writable fields.
"""

import logging
from typing import Optional

from modules.locations import municipality_for_postal_code
from shared.models import AuthenticatedUser

from .exceptions import ProfileNotFoundError
from .interfaces import IProfileService
from .models import ProfileFields, UserProfile, UserType
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class ProfileService(IProfileService):
    """Profile reads and upserts for the acting identity."""

    def __init__(self, repository: ProfileRepository):
        self._repo = repository

    async def get(self, user_id: str) -> Optional[UserProfile]:
        """Get a user's profile, or None if they have not created one."""
        return self._repo.get_by_user_id(user_id)

    async def require(self, user_id: str) -> UserProfile:
        """Get a user's profile or raise ProfileNotFoundError."""
        profile = self._repo.get_by_user_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def upsert(self, user: AuthenticatedUser, fields: ProfileFields) -> UserProfile:
        """
        Create or update the caller's profile.

        Optional fields left out of the request are stored as null. An
        unresolvable postal code simply leaves the municipality unset.
        """
        data = fields.model_dump(mode="json")
        if not data.get("municipality") and fields.postal_code:
            data["municipality"] = municipality_for_postal_code(fields.postal_code) or None

        if self._repo.get_by_user_id(user.id) is not None:
            return self._repo.update(user.id, data)

        logger.info("Creating profile for user %s", user.id)
        return self._repo.create({**data, "user_id": user.id, "email": user.email})

    async def create_default(self, user_id: str, email: str, name: str) -> UserProfile:
        """Create the initial individual profile for a newly registered user."""
        return self._repo.create({
            "user_id": user_id,
            "email": email,
            "name": name,
            "user_type": UserType.INDIVIDUAL.value,
        })
