"""Orchestration flows consumed by the user interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from micropay_client.flows.auth import AuthFlow
from micropay_client.flows.history import (
    Dashboard,
    DashboardFlow,
    NotificationFlow,
    TransactionFlow,
)
from micropay_client.flows.outcome import Outcome, OutcomeStatus
from micropay_client.flows.payments import PaymentFlow
from micropay_client.flows.wallet import WalletFlow

if TYPE_CHECKING:
    from micropay_client.client import MicropayClient


@dataclass
class Flows:
    """All flows of one client, sharing its session and snapshot store."""

    auth: AuthFlow
    wallet: WalletFlow
    payments: PaymentFlow
    dashboard: DashboardFlow
    transactions: TransactionFlow
    notifications: NotificationFlow

    @classmethod
    def for_client(cls, client: MicropayClient) -> "Flows":
        return cls(
            auth=AuthFlow(client),
            wallet=WalletFlow(client),
            payments=PaymentFlow(client),
            dashboard=DashboardFlow(client),
            transactions=TransactionFlow(client),
            notifications=NotificationFlow(client),
        )


__all__ = [
    "AuthFlow",
    "Dashboard",
    "DashboardFlow",
    "Flows",
    "NotificationFlow",
    "Outcome",
    "OutcomeStatus",
    "PaymentFlow",
    "TransactionFlow",
    "WalletFlow",
]
