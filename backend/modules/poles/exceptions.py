"""
Poles module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    AuthorizationError,
)


class PoleNotFoundError(NotFoundError):
    """Raised when a pole is not found."""

    def __init__(self, pole_id: str):
        super().__init__(
            f"Pole not found: {pole_id}",
            code="POLE_NOT_FOUND",
            details={"pole_id": pole_id},
        )


class PoleAccessDeniedError(AuthorizationError):
    """Raised when a user tries to change a pole they do not own."""

    def __init__(self, pole_id: str, user_id: str):
        super().__init__(
            f"You can only modify your own poles: {pole_id}",
            code="POLE_ACCESS_DENIED",
            details={"pole_id": pole_id, "user_id": user_id},
        )


class MunicipalityRequiredError(ValidationError):
    """Raised when no municipality is given and none can be derived from the postal code."""

    def __init__(self, postal_code: str):
        super().__init__(
            f"Municipality is required, could not derive it from postal code {postal_code}",
            code="MUNICIPALITY_REQUIRED",
            details={"postal_code": postal_code},
        )
