"""Payment models."""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from micropay_client.exceptions import DecodeError
from micropay_client.models.enums import PaymentStatus, PaymentType
from micropay_client.serialization import (
    parse_datetime,
    parse_decimal,
    parse_enum,
    parse_optional_str,
    require,
)


@dataclass(frozen=True)
class PaymentRequest:
    """Payment as submitted by the payer.

    ``idempotency_key`` is left empty while the user is editing and is
    filled in by ``PaymentSubmission`` right before sending.
    """

    payer_user_id: str
    payee_user_id: str | None
    amount: Decimal
    currency: str | None = None
    payment_type: PaymentType | None = None
    description: str | None = None
    reference: str | None = None
    idempotency_key: str | None = None

    def with_key(self, idempotency_key: str) -> "PaymentRequest":
        return replace(self, idempotency_key=idempotency_key)


@dataclass(frozen=True)
class Payment:
    """Payment record returned by the server."""

    id: str
    payment_id: str
    payer_user_id: str
    amount: Decimal
    currency: str
    payment_type: PaymentType
    status: PaymentStatus
    payee_user_id: str | None = None
    idempotency_key: str | None = None
    description: str | None = None
    reference: str | None = None
    transaction_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    completed_at: datetime | None = None
    failed_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Payment":
        if not isinstance(data, dict):
            raise DecodeError(f"Payment: expected a JSON object, got {type(data).__name__}")
        ident = data.get("id") or data.get("paymentId")
        if ident is None:
            raise DecodeError("Payment: missing required field 'id'")
        return cls(
            id=str(data.get("id") or ident),
            payment_id=str(data.get("paymentId") or ident),
            payer_user_id=str(require(data, "payerUserId", "Payment")),
            payee_user_id=parse_optional_str(data.get("payeeUserId")),
            amount=parse_decimal(require(data, "amount", "Payment")),
            currency=str(require(data, "currency", "Payment")),
            payment_type=parse_enum(PaymentType, require(data, "paymentType", "Payment")),
            status=parse_enum(PaymentStatus, require(data, "status", "Payment")),
            idempotency_key=parse_optional_str(data.get("idempotencyKey")),
            description=parse_optional_str(data.get("description")),
            reference=parse_optional_str(data.get("reference")),
            transaction_id=parse_optional_str(data.get("transactionId")),
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
            completed_at=parse_datetime(data.get("completedAt")),
            failed_at=parse_datetime(data.get("failedAt")),
        )
