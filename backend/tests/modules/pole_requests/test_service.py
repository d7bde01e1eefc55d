"""Tests for the pole request service."""

from unittest.mock import MagicMock

import pytest

from modules.pole_requests.exceptions import (
    InvalidStatusTransitionError,
    OwnPoleRequestError,
    PoleRequestNotFoundError,
    RequestAccessDeniedError,
)
from modules.pole_requests.interfaces import IPoleRequestService
from modules.pole_requests.models import (
    STATUS_TRANSITIONS,
    PoleRequestFields,
    RequestStatus,
    RequestType,
    StatusUpdate,
)
from modules.pole_requests.service import PoleRequestService
from modules.poles.exceptions import PoleNotFoundError

from tests.modules.pole_requests.helpers import create_request
from tests.modules.poles.helpers import create_pole


@pytest.fixture
def repo():
    repo = MagicMock()
    repo.create.side_effect = lambda data: create_request(
        requester_id=data["requester_id"], owner_id=data["owner_id"]
    )
    return repo


@pytest.fixture
def poles():
    poles = MagicMock()
    poles.get_by_id.return_value = create_pole(owner_id="owner-123")
    return poles


@pytest.fixture
def service(repo, poles):
    return PoleRequestService(repository=repo, poles=poles)


class TestInterface:
    def test_implements_protocol(self, service):
        assert isinstance(service, IPoleRequestService)


class TestCreate:
    @pytest.mark.asyncio
    async def test_copies_owner_and_starts_pending(self, service, repo):
        fields = PoleRequestFields(request_type=RequestType.BUY, message="Selger du?")

        await service.create("pole-123", "requester-1", fields)

        data = repo.create.call_args.args[0]
        assert data["pole_id"] == "pole-123"
        assert data["requester_id"] == "requester-1"
        assert data["owner_id"] == "owner-123"
        assert data["status"] == "pending"
        assert data["request_type"] == "buy"
        assert data["message"] == "Selger du?"

    @pytest.mark.asyncio
    async def test_dates_are_serialised(self, service, repo):
        fields = PoleRequestFields(
            request_type=RequestType.RENT,
            rental_start_date="2025-06-01",
            rental_end_date="2025-06-30",
        )

        await service.create("pole-123", "requester-1", fields)

        data = repo.create.call_args.args[0]
        assert data["rental_start_date"] == "2025-06-01"
        assert data["rental_end_date"] == "2025-06-30"

    @pytest.mark.asyncio
    async def test_missing_pole(self, service, poles, repo):
        poles.get_by_id.return_value = None

        with pytest.raises(PoleNotFoundError):
            await service.create("nope", "requester-1", PoleRequestFields(request_type="rent"))
        repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_own_pole(self, service, repo):
        with pytest.raises(OwnPoleRequestError) as exc_info:
            await service.create("pole-123", "owner-123", PoleRequestFields(request_type="rent"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Cannot request your own pole"
        repo.create.assert_not_called()


class TestUpdateStatus:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("current,target", [
        (RequestStatus.PENDING, RequestStatus.ACCEPTED),
        (RequestStatus.PENDING, RequestStatus.DECLINED),
        (RequestStatus.ACCEPTED, RequestStatus.COMPLETED),
    ])
    async def test_allowed(self, service, repo, current, target):
        repo.get_by_id.return_value = create_request(status=current)
        repo.update.return_value = create_request(status=target)

        updated = await service.update_status("request-1", "owner-123", StatusUpdate(status=target))

        assert updated.status == target
        repo.update.assert_called_once_with("request-1", {"status": target.value})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("current,target", [
        (RequestStatus.PENDING, RequestStatus.COMPLETED),
        (RequestStatus.ACCEPTED, RequestStatus.DECLINED),
        (RequestStatus.DECLINED, RequestStatus.ACCEPTED),
        (RequestStatus.COMPLETED, RequestStatus.PENDING),
        (RequestStatus.PENDING, RequestStatus.PENDING),
    ])
    async def test_rejected(self, service, repo, current, target):
        repo.get_by_id.return_value = create_request(status=current)

        with pytest.raises(InvalidStatusTransitionError):
            await service.update_status("request-1", "owner-123", StatusUpdate(status=target))
        repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_agreed_price_recorded(self, service, repo):
        repo.get_by_id.return_value = create_request()
        repo.update.return_value = create_request(status=RequestStatus.ACCEPTED)

        await service.update_status(
            "request-1",
            "owner-123",
            StatusUpdate(status=RequestStatus.ACCEPTED, agreed_price=1500),
        )

        repo.update.assert_called_once_with(
            "request-1", {"status": "accepted", "agreed_price": 1500}
        )

    @pytest.mark.asyncio
    async def test_requester_cannot_answer(self, service, repo):
        repo.get_by_id.return_value = create_request()

        with pytest.raises(RequestAccessDeniedError):
            await service.update_status(
                "request-1", "requester-1", StatusUpdate(status=RequestStatus.ACCEPTED)
            )
        repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_request(self, service, repo):
        repo.get_by_id.return_value = None

        with pytest.raises(PoleRequestNotFoundError):
            await service.update_status(
                "nope", "owner-123", StatusUpdate(status=RequestStatus.ACCEPTED)
            )


class TestTransitionTable:
    def test_terminal_states(self):
        assert STATUS_TRANSITIONS[RequestStatus.DECLINED] == frozenset()
        assert STATUS_TRANSITIONS[RequestStatus.COMPLETED] == frozenset()

    def test_every_status_listed(self):
        assert set(STATUS_TRANSITIONS) == set(RequestStatus)


class TestStatusUpdateModel:
    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            StatusUpdate(status=RequestStatus.ACCEPTED, agreed_price=-1)
