"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ConflictError, ExternalServiceError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no credentials are presented, or none of them validate."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """Raised when email/password login fails. Deliberately vague."""

    def __init__(self):
        super().__init__("Ugyldig e-post eller passord", code="INVALID_CREDENTIALS")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering an email that already has a local account."""

    def __init__(self, email: str):
        super().__init__(
            "En bruker med denne e-postadressen eksisterer allerede",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )


class AuthNotConfiguredError(AuthenticationError):
    """Raised when the server lacks the secret or service credentials it needs."""

    def __init__(self, what: str):
        super().__init__(
            f"Server authentication not configured: {what}",
            code="AUTH_NOT_CONFIGURED",
            details={"missing": what},
        )


class OAuthServiceError(ExternalServiceError):
    """Raised when the OAuth users service fails or rejects a call."""

    def __init__(self, message: str):
        super().__init__(message, service="oauth_users_service", code="OAUTH_SERVICE_ERROR")
