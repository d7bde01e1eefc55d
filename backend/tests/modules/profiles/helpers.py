"""Row and model factories shared by the profile tests."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

from modules.profiles.models import UserProfile
from modules.profiles.repository import ProfileRepository


def create_mock_profile_data(user_id: str = "user-123", **overrides) -> dict:
    """Helper to create a ``user_profiles`` row as the database returns it."""
    now = datetime.now(timezone.utc).isoformat()
    row = {
        "id": "profile-1",
        "user_id": user_id,
        "email": "kari@example.com",
        "name": "Kari",
        "phone": None,
        "user_type": "individual",
        "club_name": None,
        "org_number": None,
        "municipality": "Oslo",
        "postal_code": "0150",
        "is_verified": False,
        "created_at": now,
        "updated_at": now,
    }
    row.update(overrides)
    return row


def create_profile(**overrides) -> UserProfile:
    return ProfileRepository(MagicMock())._map_to_profile(create_mock_profile_data(**overrides))
