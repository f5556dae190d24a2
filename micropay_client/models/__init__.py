"""Domain models returned by the ledger service."""

from micropay_client.models.auth import AuthResponse, RegisterRequest
from micropay_client.models.enums import (
    EntryType,
    NotificationChannel,
    NotificationStatus,
    NotificationType,
    PaymentStatus,
    PaymentType,
    TransactionStatus,
    WalletStatus,
)
from micropay_client.models.error import ErrorBody
from micropay_client.models.notification import Notification
from micropay_client.models.payment import Payment, PaymentRequest
from micropay_client.models.transaction import Transaction, TransactionEntry
from micropay_client.models.wallet import BalanceChangeRequest, Wallet

__all__ = [
    "AuthResponse",
    "BalanceChangeRequest",
    "EntryType",
    "ErrorBody",
    "Notification",
    "NotificationChannel",
    "NotificationStatus",
    "NotificationType",
    "Payment",
    "PaymentRequest",
    "PaymentStatus",
    "PaymentType",
    "RegisterRequest",
    "Transaction",
    "TransactionEntry",
    "TransactionStatus",
    "Wallet",
    "WalletStatus",
]
