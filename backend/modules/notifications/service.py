"""
Pole inquiry delivery.

Sends the inquiry to the pole owner through Resend. The recipient and the
listing details come from the pole and its owner's profile, never from the
request. When no Resend key is configured the inquiry is stored in
``pole_inquiries`` instead, so nothing the inquirer wrote is lost.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import httpx
from supabase import Client

from modules.poles.interfaces import IPoleService
from shared.config import Settings, get_settings

from .exceptions import (
    EmailDeliveryError,
    MissingInquiryFieldsError,
    OwnerContactUnavailableError,
)
from .models import InquiryEmail, InquiryResult, PoleDetails, PoleInquiry, StoredInquiry
from .templates import inquiry_subject, render_inquiry_email

logger = logging.getLogger(__name__)

INQUIRIES_TABLE = "pole_inquiries"

SENT_MESSAGE = "E-post sendt!"
STORED_MESSAGE = "Forespørsel lagret. Eieren vil bli varslet."


class InquiryService:
    """Delivers pole inquiries by email, or stores them when email is off."""

    def __init__(
        self,
        db: Client,
        poles: IPoleService,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._db = db
        self._poles = poles
        self._settings = settings or get_settings()
        self._transport = transport

    async def send_pole_inquiry(self, inquiry: PoleInquiry) -> InquiryResult:
        """
        Deliver an inquiry to the owner of ``inquiry.pole_id``.

        Raises:
            MissingInquiryFieldsError: If the pole id or inquirer email is missing
            PoleNotFoundError: If the pole does not exist
            OwnerContactUnavailableError: If the owner has no email
            EmailDeliveryError: If Resend rejects the send
        """
        missing = inquiry.missing_fields()
        if missing:
            raise MissingInquiryFieldsError(missing)

        email = await self._resolve(inquiry)

        if not self._settings.resend_api_key:
            logger.warning("RESEND_API_KEY not configured, storing inquiry instead")
            self._store(email)
            return InquiryResult(message=STORED_MESSAGE)

        message_id = await self._send_email(email)
        logger.info("Sent inquiry for pole %s, message %s", email.pole_id, message_id)
        return InquiryResult(message=SENT_MESSAGE, id=message_id)

    async def _resolve(self, inquiry: PoleInquiry) -> InquiryEmail:
        pole = await self._poles.get_by_id(inquiry.pole_id)
        owner = pole.owner
        if owner is None or not owner.email:
            logger.warning("Inquiry for pole %s dropped, owner has no email", pole.id)
            raise OwnerContactUnavailableError(pole.id)

        return InquiryEmail(
            pole_id=pole.id,
            owner_email=owner.email,
            owner_name=owner.name,
            inquirer_email=inquiry.inquirer_email,
            inquirer_name=inquiry.inquirer_name,
            pole_details=PoleDetails(
                brand=pole.brand,
                length=pole.length_cm,
                weight=pole.weight_lbs,
                location=pole.municipality or None,
            ),
            message=inquiry.message,
        )

    def _store(self, email: InquiryEmail) -> StoredInquiry:
        row = StoredInquiry(
            pole_id=email.pole_id,
            owner_email=email.owner_email,
            inquirer_email=email.inquirer_email,
            inquirer_name=email.inquirer_name,
            message=email.message,
            created_at=datetime.now(timezone.utc),
        )
        self._db.table(INQUIRIES_TABLE).insert(row.model_dump(mode="json")).execute()
        return row

    async def _send_email(self, email: InquiryEmail) -> Optional[str]:
        payload = {
            "from": self._settings.inquiry_from_email,
            "to": email.owner_email,
            "reply_to": email.inquirer_email,
            "subject": inquiry_subject(email.pole_details),
            "html": render_inquiry_email(email),
        }
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self._settings.resend_api_url,
                    headers={
                        "Authorization": f"Bearer {self._settings.resend_api_key}",
                        "Content-Type": "application/json",
                    },
                    json=payload,
                    timeout=self._settings.external_request_timeout,
                )
        except httpx.HTTPError as e:
            logger.error("Resend request failed: %s", e)
            raise EmailDeliveryError(str(e)) from e

        if response.is_error:
            logger.error("Resend returned %s: %s", response.status_code, response.text)
            raise EmailDeliveryError(response.text)

        return response.json().get("id")
