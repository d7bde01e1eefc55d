"""
Profiles module.

Public API:
- IProfileService: get/upsert of the caller's profile
- UserProfile, ProfileFields, UserType: profile models
"""

from .interfaces import IProfileService
from .models import UserProfile, ProfileFields, UserType
from .exceptions import ProfileNotFoundError

__all__ = [
    "IProfileService",
    "UserProfile",
    "ProfileFields",
    "UserType",
    "ProfileNotFoundError",
]
