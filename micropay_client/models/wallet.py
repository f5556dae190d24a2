"""Wallet model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from micropay_client.models.enums import WalletStatus
from micropay_client.serialization import (
    parse_datetime,
    parse_decimal,
    parse_enum,
    require,
)


@dataclass(frozen=True)
class Wallet:
    """Wallet snapshot as last fetched.

    The balance is authoritative only for the moment it was fetched.
    A credit or debit response is not a substitute for a fresh fetch.
    """

    id: str
    user_id: str
    balance: Decimal
    currency: str  # ISO 4217
    status: WalletStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Wallet":
        return cls(
            id=str(require(data, "id", "Wallet")),
            user_id=str(require(data, "userId", "Wallet")),
            balance=parse_decimal(require(data, "balance", "Wallet"), "balance"),
            currency=str(require(data, "currency", "Wallet")),
            status=parse_enum(WalletStatus, require(data, "status", "Wallet")),
            created_at=parse_datetime(data.get("createdAt")),
            updated_at=parse_datetime(data.get("updatedAt")),
        )


@dataclass(frozen=True)
class BalanceChangeRequest:
    """Body of a credit or debit call."""

    amount: Decimal
    transaction_id: str | None = None
    description: str | None = None
