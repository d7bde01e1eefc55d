"""
Profiles module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class UserType(str, Enum):
    """Kind of account holder."""

    INDIVIDUAL = "individual"
    CLUB = "club"


class UserProfile(BaseModel):
    """
    Profile row, 1:1 with an authenticated identity.

    ``is_verified`` is managed by hand in the database. Clubs stay
    unverified until someone flips it; nothing in the API does.
    """

    id: str = Field(..., description="Profile row ID")
    user_id: str = Field(..., description="Identity the profile belongs to")
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    user_type: UserType = UserType.INDIVIDUAL
    club_name: Optional[str] = None
    org_number: Optional[str] = None
    municipality: Optional[str] = None
    postal_code: Optional[str] = None
    is_verified: bool = False
    created_at: datetime
    updated_at: datetime


class ProfileFields(BaseModel):
    """Client-writable profile fields. Email and verification are not among them."""

    name: Optional[str] = None
    phone: Optional[str] = None
    user_type: UserType
    club_name: Optional[str] = None
    org_number: Optional[str] = None
    municipality: Optional[str] = Field(
        None,
        description="Derived from postal_code when omitted and resolvable",
    )
    postal_code: Optional[str] = Field(None, max_length=4)
