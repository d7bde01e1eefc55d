"""Row and model factories shared by the pole request tests."""

from datetime import datetime, timezone

from modules.pole_requests.models import PoleRequest, RequestStatus, RequestType


def create_mock_request_data(
    request_id: str = "request-1",
    status: str = "pending",
    **overrides,
) -> dict:
    """Helper to create a ``pole_requests`` row as the database returns it."""
    now = datetime.now(timezone.utc).isoformat()
    row = {
        "id": request_id,
        "pole_id": "pole-123",
        "requester_id": "requester-1",
        "owner_id": "owner-123",
        "request_type": "rent",
        "status": status,
        "message": "Kan jeg leie staven i juni?",
        "rental_start_date": "2025-06-01",
        "rental_end_date": "2025-06-30",
        "agreed_price": None,
        "created_at": now,
        "updated_at": now,
    }
    row.update(overrides)
    return row


def create_request(
    status: RequestStatus = RequestStatus.PENDING,
    **overrides,
) -> PoleRequest:
    now = datetime.now(timezone.utc)
    values = dict(
        id="request-1",
        pole_id="pole-123",
        requester_id="requester-1",
        owner_id="owner-123",
        request_type=RequestType.RENT,
        status=status,
        created_at=now,
        updated_at=now,
    )
    values.update(overrides)
    return PoleRequest(**values)
