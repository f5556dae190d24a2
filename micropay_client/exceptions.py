"""Custom exception hierarchy for micropay-client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from micropay_client.models.error import ErrorBody

GENERIC_NETWORK_MESSAGE = "Could not reach the payment service. Please try again."
GENERIC_SERVER_MESSAGE = "The payment service failed to process the request. Please try again later."


class MicropayError(Exception):
    """Base exception for all micropay-client errors."""

    @property
    def user_message(self) -> str:
        """Message suitable for showing to the user."""
        return str(self)


class ConfigurationError(MicropayError):
    """Raised when configuration is invalid or missing."""


class DecodeError(MicropayError):
    """Raised when a server payload cannot be decoded into a model."""


class UnknownVariantError(DecodeError):
    """Raised when the server sends an enum value the client does not know."""

    def __init__(self, enum_name: str, value: object) -> None:
        super().__init__(f"Unknown {enum_name} value: {value!r}")
        self.enum_name = enum_name
        self.value = value


class ClientValidationError(MicropayError, ValueError):
    """Raised when input is rejected before any network call is made."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class InvalidAmountError(ClientValidationError):
    """Raised when an amount is not a positive number the ledger can store."""

    def __init__(self, message: str = "Amount must be greater than 0", field: str = "amount") -> None:
        super().__init__(message, field=field)


class NotAuthenticatedError(MicropayError):
    """Raised when an authenticated operation is attempted without a session."""

    def __init__(self, message: str = "Not logged in") -> None:
        super().__init__(message)


class NetworkError(MicropayError):
    """Raised when no response was received from the server."""

    @property
    def user_message(self) -> str:
        return GENERIC_NETWORK_MESSAGE


class ApiError(MicropayError):
    """Raised for any non-2xx response.

    Parameters
    ----------
    status_code : int
        HTTP status of the response.
    body : ErrorBody
        Decoded error body (best effort for non-JSON bodies).
    """

    def __init__(self, status_code: int, body: ErrorBody) -> None:
        super().__init__(f"HTTP {status_code}: {body.message or body.error}")
        self.status_code = status_code
        self.body = body

    @property
    def user_message(self) -> str:
        return self.body.message or self.body.error or f"Request failed with status {self.status_code}"


class UnauthorizedError(ApiError):
    """Raised on 401. The session has already been cleared when this is raised."""


class ValidationError(ApiError):
    """Raised on 4xx responses that carry a field error map."""

    @property
    def field_errors(self) -> dict[str, str]:
        return dict(self.body.validation_errors)

    @property
    def user_message(self) -> str:
        return "; ".join(f"{field}: {msg}" for field, msg in sorted(self.body.validation_errors.items()))


class RequestRejectedError(ApiError):
    """Raised on 4xx business rejections (e.g. insufficient funds)."""


class NotFoundError(RequestRejectedError):
    """Raised on 404."""


class ServerError(ApiError):
    """Raised on 5xx."""

    @property
    def user_message(self) -> str:
        return GENERIC_SERVER_MESSAGE
