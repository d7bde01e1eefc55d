"""
Pole request endpoints.

Mounted under ``/api``: creating a request hangs off the pole,
listing and answering live under ``/requests``.
"""

from fastapi import APIRouter, Depends, status

from api.dependencies import get_pole_request_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .models import PoleRequest, PoleRequestFields, StatusUpdate
from .interfaces import IPoleRequestService

router = APIRouter()


@router.post(
    "/poles/{pole_id}/request",
    response_model=PoleRequest,
    status_code=status.HTTP_201_CREATED,
)
async def create_request(
    pole_id: str,
    fields: PoleRequestFields,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPoleRequestService = Depends(get_pole_request_service),
) -> PoleRequest:
    """Ask to rent or buy a pole."""
    return await service.create(pole_id, user.id, fields)


@router.get("/requests", response_model=list[PoleRequest])
async def list_requests(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPoleRequestService = Depends(get_pole_request_service),
) -> list[PoleRequest]:
    """Requests the caller sent or received."""
    return await service.list_for_user(user.id)


@router.patch("/requests/{request_id}", response_model=PoleRequest)
async def update_request_status(
    request_id: str,
    update: StatusUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IPoleRequestService = Depends(get_pole_request_service),
) -> PoleRequest:
    """Accept, decline or complete a request on one of the caller's poles."""
    return await service.update_status(request_id, user.id, update)
