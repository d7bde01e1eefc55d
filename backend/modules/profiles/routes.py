"""
Profile endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_profile_service
from shared.models import AuthenticatedUser

from .models import ProfileFields, UserProfile
from .interfaces import IProfileService

router = APIRouter()


@router.get("", response_model=UserProfile)
async def get_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> UserProfile:
    """Get the caller's profile. 404 until one has been saved."""
    return await service.require(user.id)


@router.post("", response_model=UserProfile)
async def upsert_profile(
    fields: ProfileFields,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProfileService = Depends(get_profile_service),
) -> UserProfile:
    """Create or update the caller's profile."""
    return await service.upsert(user, fields)
