"""Last-fetched snapshots shown to the user."""

from dataclasses import dataclass, field

from micropay_client.models import Notification, Payment, Transaction, Wallet


@dataclass
class SnapshotStore:
    """View state for the flows.

    Every ``replace_*`` swaps the previous snapshot out wholesale. Nothing
    is merged and no balance is ever derived locally, so the last fetch
    always wins.
    """

    wallet: Wallet | None = None
    transactions: list[Transaction] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
    payments: dict[str, Payment] = field(default_factory=dict)

    def replace_wallet(self, wallet: Wallet) -> None:
        self.wallet = wallet

    def replace_transactions(self, transactions: list[Transaction]) -> None:
        self.transactions = list(transactions)

    def replace_notifications(self, notifications: list[Notification]) -> None:
        self.notifications = list(notifications)

    def replace_payment(self, payment: Payment) -> None:
        self.payments[payment.payment_id] = payment

    def reset(self) -> None:
        """Drop everything, e.g. after logout or a 401."""
        self.wallet = None
        self.transactions = []
        self.notifications = []
        self.payments = {}
