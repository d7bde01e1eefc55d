"""
Pole request module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthorizationError,
)


class PoleRequestNotFoundError(NotFoundError):
    """Raised when a request is not found."""

    def __init__(self, request_id: str):
        super().__init__(
            f"Request not found: {request_id}",
            code="REQUEST_NOT_FOUND",
            details={"request_id": request_id},
        )


class OwnPoleRequestError(ValidationError):
    """Raised when a user requests their own pole."""

    def __init__(self, pole_id: str):
        super().__init__(
            "Cannot request your own pole",
            code="OWN_POLE_REQUEST",
            details={"pole_id": pole_id},
        )


class RequestAccessDeniedError(AuthorizationError):
    """Raised when someone other than the pole owner answers a request."""

    def __init__(self, request_id: str, user_id: str):
        super().__init__(
            f"Only the pole owner can update request: {request_id}",
            code="REQUEST_ACCESS_DENIED",
            details={"request_id": request_id, "user_id": user_id},
        )


class InvalidStatusTransitionError(ConflictError):
    """Raised when a status change is not allowed from the current status."""

    def __init__(self, current: str, requested: str):
        super().__init__(
            f"Cannot change request status from {current} to {requested}",
            code="INVALID_STATUS_TRANSITION",
            details={"current": current, "requested": requested},
        )
