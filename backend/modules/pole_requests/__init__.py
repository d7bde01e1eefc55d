"""
Pole requests module.

Public API:
- IPoleRequestService: create, list and answer rent/buy requests
- PoleRequest, PoleRequestFields, StatusUpdate: request models
"""

from .interfaces import IPoleRequestService
from .models import (
    PoleRequest,
    PoleRequestFields,
    RequestStatus,
    RequestType,
    StatusUpdate,
    STATUS_TRANSITIONS,
)
from .exceptions import (
    PoleRequestNotFoundError,
    OwnPoleRequestError,
    RequestAccessDeniedError,
    InvalidStatusTransitionError,
)

__all__ = [
    "IPoleRequestService",
    "PoleRequest",
    "PoleRequestFields",
    "RequestStatus",
    "RequestType",
    "StatusUpdate",
    "STATUS_TRANSITIONS",
    "PoleRequestNotFoundError",
    "OwnPoleRequestError",
    "RequestAccessDeniedError",
    "InvalidStatusTransitionError",
]
