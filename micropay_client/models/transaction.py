"""Transaction model for the ledger domain."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from micropay_client.exceptions import DecodeError
from micropay_client.models.enums import EntryType, TransactionStatus
from micropay_client.serialization import (
    parse_datetime,
    parse_decimal,
    parse_enum,
    parse_optional_str,
    require,
)


@dataclass(frozen=True)
class TransactionEntry:
    """One side of a double-entry record.

    ``amount`` is never negative; direction comes from ``entry_type``.
    """

    id: str
    user_id: str
    entry_type: EntryType
    amount: Decimal
    currency: str

    @property
    def signed_amount(self) -> Decimal:
        return self.amount * self.entry_type.sign

    @classmethod
    def from_dict(cls, data: dict) -> "TransactionEntry":
        amount = parse_decimal(require(data, "amount", "TransactionEntry"))
        if amount < 0:
            raise DecodeError(f"TransactionEntry: amount must not be negative, got {amount}")
        return cls(
            id=str(require(data, "id", "TransactionEntry")),
            user_id=str(require(data, "userId", "TransactionEntry")),
            entry_type=parse_enum(EntryType, require(data, "entryType", "TransactionEntry")),
            amount=amount,
            currency=str(require(data, "currency", "TransactionEntry")),
        )


@dataclass(frozen=True)
class Transaction:
    """Recorded ledger transaction.

    Entries keep the order the server sent them in.
    """

    id: str
    transaction_id: str
    payment_id: str | None
    status: TransactionStatus
    entries: tuple[TransactionEntry, ...]
    created_at: datetime | None = None
    updated_at: datetime | None = None
    recorded_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        if not isinstance(data, dict):
            raise DecodeError(f"Transaction: expected a JSON object, got {type(data).__name__}")
        ident = data.get("id") or data.get("transactionId")
        if ident is None:
            raise DecodeError("Transaction: missing required field 'id'")
        raw_entries = data.get("entries") or []
        if not isinstance(raw_entries, list):
            raise DecodeError("Transaction: 'entries' must be a list")
        return cls(
            id=str(data.get("id") or ident),
            transaction_id=str(data.get("transactionId") or ident),
            payment_id=parse_optional_str(data.get("paymentId")),
            status=parse_enum(TransactionStatus, require(data, "status", "Transaction")),
            entries=tuple(TransactionEntry.from_dict(entry) for entry in raw_entries),
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
            recorded_at=parse_datetime(data.get("recordedAt")),
        )
