"""
Pole listing endpoints.

Browsing is public; every write requires a caller identity and the
service confirms ownership before touching an existing listing.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from pydantic import BaseModel

from api.dependencies import get_pole_service
from api.middleware.auth import get_current_user, get_optional_user
from shared.models import AuthenticatedUser

from .models import (
    POLE_BRANDS,
    PUBLIC_STATUSES,
    BulkCreateRequest,
    BulkCreateResult,
    Pole,
    PoleDetail,
    PoleFields,
    PoleOrder,
    PoleStatus,
    SearchFilters,
)
from .service import PoleService

router = APIRouter()

# Mounted at /api so the caller's own listings live beside /api/poles.
my_poles_router = APIRouter()


class DeleteResponse(BaseModel):
    success: bool = True


@router.get("", response_model=list[Pole])
async def search_poles(
    length_min: Optional[int] = Query(None),
    length_max: Optional[int] = Query(None),
    weight_min: Optional[int] = Query(None),
    weight_max: Optional[int] = Query(None),
    municipality: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
    condition_min: Optional[int] = Query(None, ge=1, le=5),
    status_filter: Optional[list[PoleStatus]] = Query(None, alias="status"),
    sort: PoleOrder = Query(PoleOrder.LENGTH_ASC),
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: PoleService = Depends(get_pole_service),
) -> list[Pole]:
    """
    Browse listings.

    Without a ``status`` parameter only available and for-sale poles are
    shown. Repeat ``status`` to choose several.
    """
    filters = SearchFilters(
        length_min=length_min,
        length_max=length_max,
        weight_min=weight_min,
        weight_max=weight_max,
        municipality=municipality or None,
        brand=brand or None,
        condition_min=condition_min,
        status=frozenset(status_filter) if status_filter else PUBLIC_STATUSES,
    )
    return await service.search(filters, sort, viewer_id=user.id if user else None)


@router.get("/brands", response_model=list[str])
async def list_brands() -> list[str]:
    """Suggested brands for the listing form."""
    return list(POLE_BRANDS)


@router.get("/{pole_id}", response_model=PoleDetail)
async def get_pole(
    pole_id: str,
    user: Optional[AuthenticatedUser] = Depends(get_optional_user),
    service: PoleService = Depends(get_pole_service),
) -> PoleDetail:
    """Get one listing with its owner's public profile."""
    return await service.get_by_id(pole_id, viewer_id=user.id if user else None)


@router.post("", response_model=Pole, status_code=status.HTTP_201_CREATED)
async def create_pole(
    fields: PoleFields,
    user: AuthenticatedUser = Depends(get_current_user),
    service: PoleService = Depends(get_pole_service),
) -> Pole:
    """Create a listing owned by the caller."""
    return await service.create(user.id, fields)


@router.post("/bulk", response_model=BulkCreateResult)
async def bulk_create_poles(
    request: BulkCreateRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: PoleService = Depends(get_pole_service),
) -> BulkCreateResult:
    """Create several listings at one location. Failed rows are reported, not rolled back."""
    return await service.bulk_create(user.id, request)


@router.put("/{pole_id}", response_model=Pole)
async def update_pole(
    pole_id: str,
    fields: dict[str, Any] = Body(...),
    user: AuthenticatedUser = Depends(get_current_user),
    service: PoleService = Depends(get_pole_service),
) -> Pole:
    """
    Overwrite one of the caller's listings.

    The body is validated by the service after the ownership check.
    """
    return await service.update(pole_id, user.id, fields)


@router.delete("/{pole_id}", response_model=DeleteResponse)
async def delete_pole(
    pole_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: PoleService = Depends(get_pole_service),
) -> DeleteResponse:
    """Delete one of the caller's listings."""
    await service.delete(pole_id, user.id)
    return DeleteResponse()


@my_poles_router.get("/my-poles", response_model=list[Pole])
async def list_my_poles(
    user: AuthenticatedUser = Depends(get_current_user),
    service: PoleService = Depends(get_pole_service),
) -> list[Pole]:
    """The caller's own listings, newest first."""
    return await service.list_by_owner(user.id)
