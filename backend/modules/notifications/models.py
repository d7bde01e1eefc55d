"""
Pole inquiry models.

Field names are camelCase on the wire, matching the payload the listing
page already sends. Owner contact and pole details are never taken from
the request; they are looked up from ``poleId``.
"""

from datetime import datetime
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class PoleDetails(BaseModel):
    """The listing being asked about, as shown in the email."""

    brand: str
    length: Union[int, str]
    weight: Union[int, str]
    location: Optional[str] = None


class PoleInquiry(BaseModel):
    """A message from a prospective renter or buyer about a listing."""

    model_config = ConfigDict(populate_by_name=True)

    pole_id: Optional[str] = Field(None, alias="poleId")
    inquirer_email: Optional[str] = Field(None, alias="inquirerEmail")
    inquirer_name: Optional[str] = Field(None, alias="inquirerName")
    message: Optional[str] = None

    def missing_fields(self) -> list[str]:
        """Wire names of required fields that are absent or empty."""
        missing = []
        if not self.pole_id:
            missing.append("poleId")
        if not self.inquirer_email:
            missing.append("inquirerEmail")
        return missing


class InquiryEmail(BaseModel):
    """An inquiry with the owner and listing resolved from the database."""

    pole_id: str
    owner_email: str
    owner_name: Optional[str] = None
    inquirer_email: str
    inquirer_name: Optional[str] = None
    pole_details: PoleDetails
    message: Optional[str] = None


class InquiryResult(BaseModel):
    """Outcome of delivering an inquiry."""

    success: bool = True
    message: str
    id: Optional[str] = Field(None, description="Email provider message ID when sent")


class StoredInquiry(BaseModel):
    """Row written to ``pole_inquiries`` when email is not configured."""

    pole_id: str
    owner_email: str
    inquirer_email: str
    inquirer_name: Optional[str] = None
    message: Optional[str] = None
    created_at: datetime
