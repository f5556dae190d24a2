"""Enumeration types for ledger domain entities."""

from enum import Enum


class WalletStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    CLOSED = "CLOSED"


class PaymentType(str, Enum):
    TRANSFER = "TRANSFER"
    PAYMENT = "PAYMENT"
    REFUND = "REFUND"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    INITIATED = "INITIATED"
    AUTHORIZED = "AUTHORIZED"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    REVERSED = "REVERSED"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL_PAYMENT_STATUSES


_TERMINAL_PAYMENT_STATUSES = frozenset(
    {
        PaymentStatus.COMPLETED,
        PaymentStatus.FAILED,
        PaymentStatus.CANCELLED,
        PaymentStatus.REVERSED,
    }
)


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    RECORDED = "RECORDED"
    FAILED = "FAILED"
    REVERSED = "REVERSED"


class EntryType(str, Enum):
    """Double-entry side. DEBIT decreases the payer, CREDIT increases the payee."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

    @property
    def sign(self) -> int:
        return -1 if self is EntryType.DEBIT else 1


class NotificationType(str, Enum):
    PAYMENT_COMPLETED = "PAYMENT_COMPLETED"
    TRANSACTION_RECORDED = "TRANSACTION_RECORDED"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    WALLET_BALANCE_UPDATED = "WALLET_BALANCE_UPDATED"
    ACCOUNT_VERIFIED = "ACCOUNT_VERIFIED"
    SECURITY_ALERT = "SECURITY_ALERT"


class NotificationChannel(str, Enum):
    IN_APP = "IN_APP"
    EMAIL = "EMAIL"
    SMS = "SMS"
    PUSH = "PUSH"


class NotificationStatus(str, Enum):
    PENDING = "PENDING"
    SENT = "SENT"
    FAILED = "FAILED"
