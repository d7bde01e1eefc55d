"""
Pole request data models.

A pole request records a rent or buy inquiry from one user about another
user's listing. Coordination after acceptance happens off-platform.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class RequestType(str, Enum):
    RENT = "rent"
    BUY = "buy"


class RequestStatus(str, Enum):
    """Lifecycle of a request."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    COMPLETED = "completed"


# Allowed status changes; anything not listed is rejected.
STATUS_TRANSITIONS: dict[RequestStatus, frozenset[RequestStatus]] = {
    RequestStatus.PENDING: frozenset({RequestStatus.ACCEPTED, RequestStatus.DECLINED}),
    RequestStatus.ACCEPTED: frozenset({RequestStatus.COMPLETED}),
    RequestStatus.DECLINED: frozenset(),
    RequestStatus.COMPLETED: frozenset(),
}


class PoleRequestFields(BaseModel):
    """Body of a new request."""

    request_type: RequestType
    message: Optional[str] = None
    rental_start_date: Optional[date] = None
    rental_end_date: Optional[date] = None


class StatusUpdate(BaseModel):
    """Owner decision on a request."""

    status: RequestStatus
    agreed_price: Optional[float] = Field(None, ge=0)


class PoleRequest(BaseModel):
    """A persisted request."""

    id: str
    pole_id: str
    requester_id: str
    owner_id: str = Field(..., description="Pole owner at the time of the request")
    request_type: RequestType
    status: RequestStatus
    message: Optional[str] = None
    rental_start_date: Optional[date] = None
    rental_end_date: Optional[date] = None
    agreed_price: Optional[float] = None
    created_at: datetime
    updated_at: datetime
