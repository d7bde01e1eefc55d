"""Tests for pole inquiry delivery."""

import json

import httpx
import pytest

from modules.notifications.exceptions import (
    EmailDeliveryError,
    MissingInquiryFieldsError,
    OwnerContactUnavailableError,
)
from modules.notifications.models import PoleInquiry
from modules.notifications.service import (
    INQUIRIES_TABLE,
    SENT_MESSAGE,
    STORED_MESSAGE,
    InquiryService,
)
from modules.poles.exceptions import PoleNotFoundError
from modules.poles.models import OwnerSummary

from tests.conftest import make_test_settings, mock_db
from tests.modules.notifications.helpers import pole_detail, pole_service


def make_inquiry(**overrides) -> PoleInquiry:
    payload = {
        "poleId": "pole-123",
        "inquirerEmail": "kari@example.com",
        "inquirerName": "Kari",
        "message": "Er staven fortsatt ledig?",
    }
    payload.update(overrides)
    return PoleInquiry.model_validate(payload)


def resend_service(handler, calls=None, poles=None):
    def record(request):
        if calls is not None:
            calls.append(request)
        return handler(request)

    db, query = mock_db()
    service = InquiryService(
        db,
        poles=poles or pole_service(pole_detail()),
        settings=make_test_settings(resend_api_key="re_test"),
        transport=httpx.MockTransport(record),
    )
    return service, db


class TestValidation:
    @pytest.mark.asyncio
    async def test_reports_missing_fields(self):
        db, _ = mock_db()
        poles = pole_service(pole_detail())
        service = InquiryService(db, poles=poles, settings=make_test_settings())
        inquiry = make_inquiry(poleId=None, inquirerEmail=None)

        with pytest.raises(MissingInquiryFieldsError) as exc_info:
            await service.send_pole_inquiry(inquiry)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details["fields"] == ["poleId", "inquirerEmail"]
        poles.get_by_id.assert_not_called()
        db.table.assert_not_called()

    def test_empty_string_counts_as_missing(self):
        assert make_inquiry(inquirerEmail="").missing_fields() == ["inquirerEmail"]

    def test_client_supplied_recipient_is_ignored(self):
        inquiry = make_inquiry(ownerEmail="victim@example.com", poleDetails={"brand": "x"})
        assert not hasattr(inquiry, "owner_email")
        assert "ownerEmail" not in inquiry.model_dump(by_alias=True)


class TestOwnerLookup:
    @pytest.mark.asyncio
    async def test_unknown_pole(self):
        db, _ = mock_db()
        service = InquiryService(db, poles=pole_service(None), settings=make_test_settings())

        with pytest.raises(PoleNotFoundError):
            await service.send_pole_inquiry(make_inquiry())

        db.table.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("owner", [None, OwnerSummary(name="Eier", email=None)])
    async def test_owner_without_email(self, owner):
        db, _ = mock_db()
        poles = pole_service(pole_detail(owner=owner))
        service = InquiryService(db, poles=poles, settings=make_test_settings())

        with pytest.raises(OwnerContactUnavailableError) as exc_info:
            await service.send_pole_inquiry(make_inquiry())

        assert exc_info.value.status_code == 400
        assert exc_info.value.code == "OWNER_CONTACT_UNAVAILABLE"
        db.table.assert_not_called()

    @pytest.mark.asyncio
    async def test_recipient_comes_from_owner_profile(self):
        calls = []
        service, _ = resend_service(
            lambda request: httpx.Response(200, json={"id": "msg-1"}), calls
        )
        inquiry = PoleInquiry.model_validate({
            "poleId": "pole-123",
            "inquirerEmail": "kari@example.com",
            "ownerEmail": "victim@example.com",
            "poleDetails": {"brand": "Fake", "length": 1, "weight": 1},
        })

        await service.send_pole_inquiry(inquiry)

        body = json.loads(calls[0].content)
        assert body["to"] == "eier@example.com"
        assert body["subject"] == "Forespørsel om stav: Essx 420cm"
        assert "Fake" not in body["html"]


class TestStoredFallback:
    @pytest.mark.asyncio
    async def test_stores_when_email_is_off(self):
        db, query = mock_db()
        poles = pole_service(pole_detail())
        service = InquiryService(db, poles=poles, settings=make_test_settings())

        result = await service.send_pole_inquiry(make_inquiry())

        assert result.success is True
        assert result.message == STORED_MESSAGE
        assert result.id is None
        poles.get_by_id.assert_awaited_once_with("pole-123")
        db.table.assert_called_with(INQUIRIES_TABLE)
        row = query.insert.call_args.args[0]
        assert row["pole_id"] == "pole-123"
        assert row["owner_email"] == "eier@example.com"
        assert row["inquirer_email"] == "kari@example.com"
        assert row["message"] == "Er staven fortsatt ledig?"
        assert "created_at" in row


class TestResendDelivery:
    @pytest.mark.asyncio
    async def test_sends_email(self):
        calls = []
        service, db = resend_service(
            lambda request: httpx.Response(200, json={"id": "msg-1"}), calls
        )

        result = await service.send_pole_inquiry(make_inquiry())

        assert result.message == SENT_MESSAGE
        assert result.id == "msg-1"
        db.table.assert_not_called()

        request = calls[0]
        assert str(request.url) == "https://api.resend.com/emails"
        assert request.headers["Authorization"] == "Bearer re_test"
        body = json.loads(request.content)
        assert body["to"] == "eier@example.com"
        assert body["reply_to"] == "kari@example.com"
        assert body["subject"] == "Forespørsel om stav: Essx 420cm"
        assert body["from"] == "PV Market <noreply@pvmarket.no>"
        assert "Er staven fortsatt ledig?" in body["html"]
        assert "Hei Eier," in body["html"]
        assert "<strong>Lokasjon:</strong> Bergen" in body["html"]

    @pytest.mark.asyncio
    async def test_rejected_send(self):
        service, _ = resend_service(lambda request: httpx.Response(422, text="invalid to"))

        with pytest.raises(EmailDeliveryError) as exc_info:
            await service.send_pole_inquiry(make_inquiry())

        assert exc_info.value.status_code == 502
        assert "invalid to" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_network_failure(self):
        def fail(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        service, _ = resend_service(fail)

        with pytest.raises(EmailDeliveryError):
            await service.send_pole_inquiry(make_inquiry())
