"""
Profile repository for the ``user_profiles`` table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import UserProfile, UserType


PROFILES_TABLE = "user_profiles"


class ProfileRepository(BaseRepository[UserProfile]):
    """Repository for user profiles, keyed by ``user_id``."""

    def get_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        """Get the profile for an identity, or None if it has none yet."""
        result = self._db.table(PROFILES_TABLE).select("*").eq("user_id", user_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_profile(row)

    def create(self, data: dict[str, Any]) -> UserProfile:
        """Insert a profile row."""
        result = self._db.table(PROFILES_TABLE).insert(data).execute()
        return self._map_to_profile(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> UserProfile:
        """Overwrite the writable columns of an existing profile."""
        payload = {**data, "updated_at": self._now()}
        result = (
            self._db.table(PROFILES_TABLE)
            .update(payload)
            .eq("user_id", user_id)
            .execute()
        )
        return self._map_to_profile(result.data[0])

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map database row to UserProfile model."""
        return UserProfile(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            email=data["email"],
            name=data.get("name"),
            phone=data.get("phone"),
            user_type=UserType(data.get("user_type") or UserType.INDIVIDUAL.value),
            club_name=data.get("club_name"),
            org_number=data.get("org_number"),
            municipality=data.get("municipality"),
            postal_code=data.get("postal_code"),
            is_verified=bool(data.get("is_verified", False)),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
