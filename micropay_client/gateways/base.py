"""Base gateway class and client-side input checks."""

from __future__ import annotations

from abc import ABC
from decimal import Decimal, InvalidOperation
from urllib.parse import quote

from micropay_client.exceptions import ClientValidationError, InvalidAmountError
from micropay_client.transport import Transport


# Server amount columns are NUMERIC(19, 2).
AMOUNT_QUANTUM = Decimal("0.01")
MAX_AMOUNT = Decimal("99999999999999999.99")


def validate_amount(amount: Decimal | int | str | float) -> Decimal:
    """Return ``amount`` as a positive Decimal or raise InvalidAmountError.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``. Amounts
    with more than two decimal places or above ``MAX_AMOUNT`` are refused
    here rather than rounded or overflowed by the server.
    """
    if isinstance(amount, bool):
        raise InvalidAmountError("Amount must be a number")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmountError("Amount must be a number") from None
    if not value.is_finite():
        raise InvalidAmountError("Amount must be a finite number")
    if value <= 0:
        raise InvalidAmountError()
    if value > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount must not exceed {MAX_AMOUNT}")
    if value != value.quantize(AMOUNT_QUANTUM):
        raise InvalidAmountError("Amount must have at most 2 decimal places")
    return value


def require_text(value: str | None, field: str, label: str | None = None) -> str:
    """Reject missing or blank required inputs."""
    if value is None or not str(value).strip():
        raise ClientValidationError(f"{label or field} is required", field=field)
    return str(value)


class BaseGateway(ABC):
    """Base class for resource gateways.

    Gateways are stateless: each method maps one domain operation to
    one HTTP call and decodes the result.

    Parameters
    ----------
    transport : Transport
        Shared transport carrying the session credential.
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    @staticmethod
    def _segment(value: str) -> str:
        """Quote a path segment taken from user input."""
        return quote(str(value), safe="")
