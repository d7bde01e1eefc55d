"""
Pole listing service.

Thin wrappers around the pole repository that enforce ownership before
every mutation. The service runs with the service-role database client,
so these checks are the only thing standing between a caller and someone
else's listing.
"""

import logging
from typing import Any, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from modules.locations import municipality_for_postal_code
from shared.exceptions import ValidationError

from .interfaces import IPoleService
from .models import (
    BulkCreateRequest,
    BulkCreateResult,
    BulkFailure,
    Pole,
    PoleDetail,
    PoleFields,
    PoleOrder,
    SearchFilters,
)
from .repository import PoleRepository
from .exceptions import (
    PoleNotFoundError,
    PoleAccessDeniedError,
    MunicipalityRequiredError,
)

logger = logging.getLogger(__name__)


def parse_pole_fields(raw: Union[PoleFields, dict[str, Any]]) -> PoleFields:
    """
    Validate raw listing fields against the physical bounds.

    Raises:
        ValidationError: With the offending fields listed in ``details``
    """
    if isinstance(raw, PoleFields):
        return raw
    try:
        return PoleFields.model_validate(raw)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ValidationError(
            f"Invalid pole fields: {', '.join(fields)}",
            code="INVALID_POLE_FIELDS",
            details={"fields": fields},
        ) from e


class PoleService(IPoleService):
    """
    Pole service with Supabase backend.

    Implements IPoleService protocol with ownership checks.
    """

    def __init__(self, repository: PoleRepository):
        self._repo = repository

    async def search(
        self,
        filters: SearchFilters,
        order: PoleOrder = PoleOrder.LENGTH_ASC,
        viewer_id: Optional[str] = None,
    ) -> list[Pole]:
        """Search listings, hiding owner-only fields from other viewers."""
        poles = self._repo.search(filters, order)
        return [pole.visible_to(viewer_id) for pole in poles]

    async def get_by_id(
        self,
        pole_id: str,
        viewer_id: Optional[str] = None,
    ) -> PoleDetail:
        """Get a listing joined with its owner's public profile."""
        pole = self._repo.get_by_id(pole_id)
        if pole is None:
            raise PoleNotFoundError(pole_id)

        owner = self._repo.get_owner_summary(pole.owner_id)
        visible = pole.visible_to(viewer_id)
        return PoleDetail(**visible.model_dump(), owner=owner)

    async def list_by_owner(self, owner_id: str) -> list[Pole]:
        """List a user's own listings, newest first."""
        return self._repo.list_by_owner(owner_id, PoleOrder.NEWEST_FIRST)

    async def create(
        self,
        owner_id: str,
        fields: Union[PoleFields, dict[str, Any]],
    ) -> Pole:
        """Create a listing. ``owner_id`` always comes from the caller identity."""
        data = self._to_row(parse_pole_fields(fields))
        data["owner_id"] = owner_id

        pole = self._repo.create(data)
        logger.info("Created pole %s for owner %s", pole.id, owner_id)
        return pole

    async def bulk_create(
        self,
        owner_id: str,
        request: BulkCreateRequest,
    ) -> BulkCreateResult:
        """
        Create several listings sharing one location.

        Each row is submitted on its own. A failing row is recorded and the
        remaining rows are still attempted; nothing is rolled back.
        """
        municipality = request.municipality or municipality_for_postal_code(request.postal_code)
        if not municipality:
            raise MunicipalityRequiredError(request.postal_code)

        result = BulkCreateResult(total=len(request.poles))

        for index, row in enumerate(request.poles):
            if not row.is_complete:
                result.failures.append(BulkFailure(
                    index=index,
                    length_cm=row.length_cm,
                    weight_lbs=row.weight_lbs,
                    error="Length, weight and brand are required",
                ))
                continue

            fields = {
                **row.model_dump(exclude={"flex_rating"}),
                "flex_rating": row.flex_rating or None,
                "municipality": municipality,
                "postal_code": request.postal_code,
            }
            try:
                pole = await self.create(owner_id, fields)
            except ValidationError as e:
                error = e.message
            except Exception as e:
                logger.warning("Bulk create row %d failed for owner %s: %s", index, owner_id, e)
                error = "Could not save pole"
            else:
                result.created.append(pole)
                continue

            result.failures.append(BulkFailure(
                index=index,
                length_cm=row.length_cm,
                weight_lbs=row.weight_lbs,
                error=error,
            ))

        logger.info(
            "Bulk create for owner %s: %d of %d poles created",
            owner_id,
            result.succeeded,
            result.total,
        )
        return result

    async def update(
        self,
        pole_id: str,
        owner_id: str,
        fields: Union[PoleFields, dict[str, Any]],
    ) -> Pole:
        """
        Overwrite a listing after confirming ownership.

        Ownership is checked before the payload is validated, so a caller
        who does not own the listing always gets an authorization error.
        """
        self._get_owned(pole_id, owner_id)

        data = self._to_row(parse_pole_fields(fields))
        pole = self._repo.update(pole_id, data)
        if pole is None:
            raise PoleNotFoundError(pole_id)
        return pole

    async def delete(self, pole_id: str, owner_id: str) -> None:
        """Delete a listing after confirming ownership."""
        self._get_owned(pole_id, owner_id)
        self._repo.delete(pole_id)
        logger.info("Deleted pole %s for owner %s", pole_id, owner_id)

    def _get_owned(self, pole_id: str, owner_id: str) -> Pole:
        """Load a listing and confirm the caller owns it."""
        existing = self._repo.get_by_id(pole_id)
        if existing is None:
            raise PoleNotFoundError(pole_id)
        if existing.owner_id != owner_id:
            raise PoleAccessDeniedError(pole_id, owner_id)
        return existing

    def _to_row(self, fields: PoleFields) -> dict[str, Any]:
        """Column values for a write, with the municipality filled in."""
        data = fields.model_dump(mode="json")
        municipality = fields.municipality or municipality_for_postal_code(fields.postal_code)
        if not municipality:
            raise MunicipalityRequiredError(fields.postal_code)
        data["municipality"] = municipality
        return data
