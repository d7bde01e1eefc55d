"""
Poles module interface.

The API layer depends on IPoleService for all listing operations.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    BulkCreateRequest,
    BulkCreateResult,
    Pole,
    PoleDetail,
    PoleFields,
    PoleOrder,
    SearchFilters,
)


@runtime_checkable
class IPoleService(Protocol):
    """
    Interface for pole listing operations.

    Mutations take the acting user's ID from the authenticated identity,
    never from the request body.
    """

    async def search(
        self,
        filters: SearchFilters,
        order: PoleOrder = PoleOrder.LENGTH_ASC,
        viewer_id: Optional[str] = None,
    ) -> list[Pole]:
        """
        Search listings.

        Args:
            filters: Sparse filter, absent fields impose no constraint
            order: Result ordering
            viewer_id: Caller identity, used to decide owner-only fields

        Returns:
            Matching listings
        """
        ...

    async def get_by_id(
        self,
        pole_id: str,
        viewer_id: Optional[str] = None,
    ) -> PoleDetail:
        """
        Get a listing with its owner's public profile.

        Raises:
            PoleNotFoundError: If the listing does not exist
        """
        ...

    async def list_by_owner(self, owner_id: str) -> list[Pole]:
        """List the caller's own listings, newest first."""
        ...

    async def create(self, owner_id: str, fields: PoleFields) -> Pole:
        """
        Create a listing owned by ``owner_id``.

        Raises:
            MunicipalityRequiredError: If no municipality can be determined
        """
        ...

    async def bulk_create(
        self,
        owner_id: str,
        request: BulkCreateRequest,
    ) -> BulkCreateResult:
        """Create several listings independently, reporting per-row failures."""
        ...

    async def update(self, pole_id: str, owner_id: str, fields: PoleFields) -> Pole:
        """
        Overwrite a listing.

        Raises:
            PoleNotFoundError: If the listing does not exist
            PoleAccessDeniedError: If ``owner_id`` does not own it
        """
        ...

    async def delete(self, pole_id: str, owner_id: str) -> None:
        """
        Delete a listing.

        Raises:
            PoleNotFoundError: If the listing does not exist
            PoleAccessDeniedError: If ``owner_id`` does not own it
        """
        ...
