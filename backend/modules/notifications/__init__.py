"""
Notifications module.

Public API:
- InquiryService: email a pole owner about their listing
- PoleInquiry, InquiryEmail, PoleDetails, InquiryResult: inquiry models
"""

from .models import InquiryEmail, InquiryResult, PoleDetails, PoleInquiry
from .exceptions import (
    EmailDeliveryError,
    MissingInquiryFieldsError,
    OwnerContactUnavailableError,
)

__all__ = [
    "InquiryEmail",
    "InquiryResult",
    "PoleDetails",
    "PoleInquiry",
    "EmailDeliveryError",
    "MissingInquiryFieldsError",
    "OwnerContactUnavailableError",
]
