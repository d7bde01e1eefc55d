"""
Pole inquiry endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_inquiry_service

from .models import InquiryResult, PoleInquiry
from .service import InquiryService

router = APIRouter()


@router.post("", response_model=InquiryResult, response_model_exclude_none=True)
async def send_inquiry(
    inquiry: PoleInquiry,
    service: InquiryService = Depends(get_inquiry_service),
) -> InquiryResult:
    """Send an inquiry to a pole owner. No auth required."""
    return await service.send_pole_inquiry(inquiry)
