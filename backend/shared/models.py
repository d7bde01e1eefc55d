"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, Field


class AuthType(str, Enum):
    """Which identity system vouched for a user."""

    LOCAL = "local"    # Email/password, bearer token
    GOOGLE = "google"  # OAuth session cookie


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Both credential providers produce this model, so route handlers never
    need to know which identity system the caller used.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    name: str = Field(default="", description="Display name")
    auth_type: AuthType = Field(..., description="Identity system that authenticated the user")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
