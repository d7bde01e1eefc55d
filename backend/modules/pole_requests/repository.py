"""
Pole request repository for the ``pole_requests`` table.
"""

from typing import Optional, Any

from shared.repository import BaseRepository
from .models import PoleRequest, RequestStatus, RequestType


REQUESTS_TABLE = "pole_requests"


class PoleRequestRepository(BaseRepository[PoleRequest]):
    """Repository for pole requests."""

    def get_by_id(self, request_id: str) -> Optional[PoleRequest]:
        result = self._db.table(REQUESTS_TABLE).select("*").eq("id", request_id).execute()
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_request(row)

    def list_for_user(self, user_id: str) -> list[PoleRequest]:
        """Requests where the user is either the requester or the owner, newest first."""
        result = (
            self._db.table(REQUESTS_TABLE)
            .select("*")
            .or_(f"requester_id.eq.{user_id},owner_id.eq.{user_id}")
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_request(row) for row in result.data or []]

    def create(self, data: dict[str, Any]) -> PoleRequest:
        result = self._db.table(REQUESTS_TABLE).insert(data).execute()
        return self._map_to_request(result.data[0])

    def update(self, request_id: str, data: dict[str, Any]) -> Optional[PoleRequest]:
        payload = {**data, "updated_at": self._now()}
        result = (
            self._db.table(REQUESTS_TABLE)
            .update(payload)
            .eq("id", request_id)
            .execute()
        )
        row = self._first(result.data)
        if row is None:
            return None
        return self._map_to_request(row)

    def _map_to_request(self, data: dict[str, Any]) -> PoleRequest:
        """Map database row to PoleRequest model."""
        return PoleRequest(
            id=str(data["id"]),
            pole_id=str(data["pole_id"]),
            requester_id=str(data["requester_id"]),
            owner_id=str(data["owner_id"]),
            request_type=RequestType(data["request_type"]),
            status=RequestStatus(data.get("status") or RequestStatus.PENDING.value),
            message=data.get("message"),
            rental_start_date=data.get("rental_start_date"),
            rental_end_date=data.get("rental_end_date"),
            agreed_price=data.get("agreed_price"),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
