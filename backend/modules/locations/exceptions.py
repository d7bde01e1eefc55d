"""
Locations module exceptions.
"""

from shared.exceptions import ValidationError


class InvalidPostalCodeError(ValidationError):
    """Raised when a postal code is not four digits."""

    def __init__(self, postal_code: str):
        super().__init__(
            f"Invalid postal code: {postal_code!r}. Expected four digits.",
            code="INVALID_POSTAL_CODE",
            details={"postal_code": postal_code},
        )
