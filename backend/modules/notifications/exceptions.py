"""
Notification module exceptions.
"""

from shared.exceptions import ValidationError, ExternalServiceError


class MissingInquiryFieldsError(ValidationError):
    """Raised when an inquiry lacks the pole id or the inquirer email."""

    def __init__(self, fields: list[str]):
        super().__init__(
            "Missing required fields",
            code="MISSING_REQUIRED_FIELDS",
            details={"fields": fields},
        )


class OwnerContactUnavailableError(ValidationError):
    """Raised when the pole owner has no email on their profile."""

    def __init__(self, pole_id: str):
        super().__init__(
            "Pole owner cannot be contacted",
            code="OWNER_CONTACT_UNAVAILABLE",
            details={"pole_id": pole_id},
        )


class EmailDeliveryError(ExternalServiceError):
    """Raised when the email provider rejects or fails a send."""

    def __init__(self, message: str):
        super().__init__(
            f"Failed to send email: {message}",
            service="resend",
            code="EMAIL_DELIVERY_FAILED",
        )
