"""Gateways mapping domain operations onto the ledger REST API."""

from micropay_client.gateways.auth import AuthGateway
from micropay_client.gateways.base import BaseGateway, require_text, validate_amount
from micropay_client.gateways.notification import NotificationGateway
from micropay_client.gateways.payment import PaymentGateway
from micropay_client.gateways.transaction import TransactionGateway
from micropay_client.gateways.wallet import WalletGateway

__all__ = [
    "AuthGateway",
    "BaseGateway",
    "NotificationGateway",
    "PaymentGateway",
    "TransactionGateway",
    "WalletGateway",
    "require_text",
    "validate_amount",
]
