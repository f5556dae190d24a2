"""Structured results returned by flows."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from micropay_client.exceptions import (
    ApiError,
    ClientValidationError,
    MicropayError,
    NetworkError,
    NotAuthenticatedError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)

T = TypeVar("T")


class OutcomeStatus(str, Enum):
    OK = "OK"
    UNAUTHENTICATED = "UNAUTHENTICATED"  # no session, nothing was sent
    UNAUTHORIZED = "UNAUTHORIZED"  # server answered 401, session cleared
    INVALID = "INVALID"  # client- or server-side field validation
    REJECTED = "REJECTED"  # business rejection, e.g. insufficient funds
    FAILED = "FAILED"  # network, server or decode failure


@dataclass
class Outcome(Generic[T]):
    """Discriminated result of a flow.

    ``redirect_to`` is set when the user has to log in again; the caller
    decides how to get there.
    """

    status: OutcomeStatus
    value: T | None = None
    message: str = ""
    field_errors: dict[str, str] = field(default_factory=dict)
    retryable: bool = False
    redirect_to: str | None = None
    context: Any = None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK

    @property
    def needs_login(self) -> bool:
        return self.status in (OutcomeStatus.UNAUTHENTICATED, OutcomeStatus.UNAUTHORIZED)

    @classmethod
    def success(cls, value: T, message: str = "") -> "Outcome[T]":
        return cls(status=OutcomeStatus.OK, value=value, message=message)

    @classmethod
    def from_error(cls, exc: MicropayError, login_path: str) -> "Outcome[T]":
        """Map an exception onto the user-facing taxonomy."""
        if isinstance(exc, NotAuthenticatedError):
            return cls(
                status=OutcomeStatus.UNAUTHENTICATED,
                message=exc.user_message,
                redirect_to=login_path,
            )
        if isinstance(exc, UnauthorizedError):
            return cls(
                status=OutcomeStatus.UNAUTHORIZED,
                message="Your session has expired. Please log in again.",
                redirect_to=login_path,
            )
        if isinstance(exc, ClientValidationError):
            field_errors = {exc.field: str(exc)} if exc.field else {}
            return cls(status=OutcomeStatus.INVALID, message=str(exc), field_errors=field_errors)
        if isinstance(exc, ValidationError):
            return cls(
                status=OutcomeStatus.INVALID,
                message=exc.user_message,
                field_errors=exc.field_errors,
            )
        if isinstance(exc, NetworkError):
            return cls(status=OutcomeStatus.FAILED, message=exc.user_message, retryable=True)
        if isinstance(exc, ServerError):
            return cls(status=OutcomeStatus.FAILED, message=exc.user_message)
        if isinstance(exc, ApiError):
            return cls(status=OutcomeStatus.REJECTED, message=exc.user_message)
        return cls(status=OutcomeStatus.FAILED, message=exc.user_message)
