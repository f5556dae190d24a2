"""Tests for custom exception hierarchy."""

from micropay_client.exceptions import (
    GENERIC_NETWORK_MESSAGE,
    GENERIC_SERVER_MESSAGE,
    ApiError,
    ClientValidationError,
    ConfigurationError,
    DecodeError,
    InvalidAmountError,
    MicropayError,
    NetworkError,
    NotAuthenticatedError,
    NotFoundError,
    RequestRejectedError,
    ServerError,
    UnauthorizedError,
    UnknownVariantError,
    ValidationError,
)
from micropay_client.models.error import ErrorBody


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_micropay_error_is_exception(self) -> None:
        assert isinstance(MicropayError("test"), Exception)

    def test_unknown_variant_is_decode_error(self) -> None:
        err = UnknownVariantError("PaymentStatus", "SETTLED")
        assert isinstance(err, DecodeError)
        assert isinstance(err, MicropayError)
        assert err.enum_name == "PaymentStatus"
        assert err.value == "SETTLED"

    def test_invalid_amount_is_client_validation_and_value_error(self) -> None:
        err = InvalidAmountError()
        assert isinstance(err, ClientValidationError)
        assert isinstance(err, ValueError)
        assert err.field == "amount"

    def test_not_found_is_request_rejected(self) -> None:
        err = NotFoundError(404, ErrorBody(status=404))
        assert isinstance(err, RequestRejectedError)
        assert isinstance(err, ApiError)

    def test_api_error_subclasses(self) -> None:
        body = ErrorBody(status=400)
        for cls in (UnauthorizedError, ValidationError, RequestRejectedError, ServerError):
            assert isinstance(cls(400, body), ApiError)

    def test_configuration_error_is_micropay_error(self) -> None:
        assert isinstance(ConfigurationError("test"), MicropayError)

    def test_not_authenticated_default_message(self) -> None:
        assert str(NotAuthenticatedError()) == "Not logged in"


class TestUserMessages:
    """Test the user-facing messages of each failure category."""

    def test_network_error_is_generic(self) -> None:
        assert NetworkError("GET /api/wallet/u1: connection refused").user_message == GENERIC_NETWORK_MESSAGE

    def test_server_error_is_generic(self) -> None:
        err = ServerError(500, ErrorBody(status=500, message="NullPointerException at line 42"))
        assert err.user_message == GENERIC_SERVER_MESSAGE

    def test_rejection_uses_server_message(self) -> None:
        err = RequestRejectedError(400, ErrorBody(status=400, error="Bad Request", message="Insufficient balance"))
        assert err.user_message == "Insufficient balance"

    def test_rejection_falls_back_to_error(self) -> None:
        err = RequestRejectedError(409, ErrorBody(status=409, error="Conflict"))
        assert err.user_message == "Conflict"

    def test_validation_error_lists_fields(self) -> None:
        body = ErrorBody(
            status=400,
            message="Validation failed",
            validation_errors={"email": "must not be blank", "amount": "must be positive"},
        )
        err = ValidationError(400, body)
        assert err.field_errors == {"email": "must not be blank", "amount": "must be positive"}
        assert err.user_message == "amount: must be positive; email: must not be blank"

    def test_exception_message(self) -> None:
        err = ApiError(404, ErrorBody(status=404, message="Wallet not found"))
        assert str(err) == "HTTP 404: Wallet not found"
        assert err.status_code == 404
