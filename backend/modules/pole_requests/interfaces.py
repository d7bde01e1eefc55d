"""
Pole requests module interface.
"""

from typing import Protocol, runtime_checkable

from .models import PoleRequest, PoleRequestFields, StatusUpdate


@runtime_checkable
class IPoleRequestService(Protocol):
    """
    Interface for rent/buy requests between users.

    The acting user always comes from the authenticated identity.
    """

    async def create(
        self,
        pole_id: str,
        requester_id: str,
        fields: PoleRequestFields,
    ) -> PoleRequest:
        """
        Record a pending request for someone else's pole.

        Raises:
            PoleNotFoundError: If the pole does not exist
            OwnPoleRequestError: If the requester owns the pole
        """
        ...

    async def list_for_user(self, user_id: str) -> list[PoleRequest]:
        """Requests the user sent or received, newest first."""
        ...

    async def update_status(
        self,
        request_id: str,
        owner_id: str,
        update: StatusUpdate,
    ) -> PoleRequest:
        """
        Move a request along its lifecycle. Only the pole owner may do this.

        Raises:
            PoleRequestNotFoundError: If the request does not exist
            RequestAccessDeniedError: If the caller is not the pole owner
            InvalidStatusTransitionError: If the change is not allowed
        """
        ...
