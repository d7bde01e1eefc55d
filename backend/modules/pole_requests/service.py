"""
Pole request service.

Creating a request copies the pole's current owner onto the request so
the owner can find it later even if the listing changes hands.
"""

import logging

from modules.poles.exceptions import PoleNotFoundError
from modules.poles.repository import PoleRepository

from .exceptions import (
    InvalidStatusTransitionError,
    OwnPoleRequestError,
    PoleRequestNotFoundError,
    RequestAccessDeniedError,
)
from .interfaces import IPoleRequestService
from .models import (
    STATUS_TRANSITIONS,
    PoleRequest,
    PoleRequestFields,
    RequestStatus,
    StatusUpdate,
)
from .repository import PoleRequestRepository

logger = logging.getLogger(__name__)


class PoleRequestService(IPoleRequestService):
    """Rent/buy requests between users."""

    def __init__(self, repository: PoleRequestRepository, poles: PoleRepository):
        self._repo = repository
        self._poles = poles

    async def create(
        self,
        pole_id: str,
        requester_id: str,
        fields: PoleRequestFields,
    ) -> PoleRequest:
        """
        Record a request for someone else's pole.

        Raises:
            PoleNotFoundError: If the pole does not exist
            OwnPoleRequestError: If the requester owns the pole
        """
        pole = self._poles.get_by_id(pole_id)
        if pole is None:
            raise PoleNotFoundError(pole_id)
        if pole.owner_id == requester_id:
            raise OwnPoleRequestError(pole_id)

        request = self._repo.create({
            **fields.model_dump(mode="json"),
            "pole_id": pole_id,
            "requester_id": requester_id,
            "owner_id": pole.owner_id,
            "status": RequestStatus.PENDING.value,
        })
        logger.info(
            "Created %s request %s for pole %s",
            request.request_type.value,
            request.id,
            pole_id,
        )
        return request

    async def list_for_user(self, user_id: str) -> list[PoleRequest]:
        """Requests the user sent or received, newest first."""
        return self._repo.list_for_user(user_id)

    async def update_status(
        self,
        request_id: str,
        owner_id: str,
        update: StatusUpdate,
    ) -> PoleRequest:
        """
        Accept, decline or complete a request. Only the pole owner may do this.

        Raises:
            PoleRequestNotFoundError: If the request does not exist
            RequestAccessDeniedError: If the caller is not the pole owner
            InvalidStatusTransitionError: If the change is not allowed
        """
        existing = self._repo.get_by_id(request_id)
        if existing is None:
            raise PoleRequestNotFoundError(request_id)
        if existing.owner_id != owner_id:
            raise RequestAccessDeniedError(request_id, owner_id)
        if update.status not in STATUS_TRANSITIONS[existing.status]:
            raise InvalidStatusTransitionError(existing.status.value, update.status.value)

        data: dict = {"status": update.status.value}
        if update.agreed_price is not None:
            data["agreed_price"] = update.agreed_price

        updated = self._repo.update(request_id, data)
        if updated is None:
            raise PoleRequestNotFoundError(request_id)

        logger.info(
            "Request %s moved from %s to %s",
            request_id,
            existing.status.value,
            update.status.value,
        )
        return updated
