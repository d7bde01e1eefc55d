"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    PVMarketError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)


class TestPVMarketError:
    def test_message(self):
        """PVMarketError should store message."""
        error = PVMarketError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """PVMarketError should default code to class name."""
        error = PVMarketError("Test error")
        assert error.code == "PVMarketError"

    def test_custom_code(self):
        error = PVMarketError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_default_details(self):
        error = PVMarketError("Test error")
        assert error.details == {}

    def test_to_dict(self):
        """PVMarketError should convert to dict."""
        error = PVMarketError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"

    def test_default_status_code(self):
        assert PVMarketError("boom").status_code == 500


class TestStatusCodes:
    @pytest.mark.parametrize(
        "error_class, status_code",
        [
            (NotFoundError, 404),
            (ValidationError, 400),
            (ConflictError, 400),
            (AuthenticationError, 401),
            (AuthorizationError, 403),
        ],
    )
    def test_each_base_maps_to_one_status(self, error_class, status_code):
        error = error_class("message")
        assert error.status_code == status_code
        assert isinstance(error, PVMarketError)


class TestExternalServiceError:
    def test_records_service(self):
        error = ExternalServiceError("Timed out", service="resend")
        assert error.service == "resend"
        assert error.details["service"] == "resend"
        assert error.status_code == 502

    def test_keeps_existing_details(self):
        error = ExternalServiceError("Bad", service="resend", details={"status": 500})
        assert error.details == {"status": 500, "service": "resend"}
