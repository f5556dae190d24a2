"""Dashboard, transaction history and notifications."""

from dataclasses import dataclass

from micropay_client.flows.base import BaseFlow
from micropay_client.flows.outcome import Outcome
from micropay_client.models import Notification, Transaction, Wallet


@dataclass(frozen=True)
class Dashboard:
    """Wallet plus the most recent transactions."""

    wallet: Wallet
    recent_transactions: list[Transaction]


class DashboardFlow(BaseFlow):
    def load(self) -> Outcome[Dashboard]:
        def fetch() -> Dashboard:
            user_id = self._require_user()
            wallet = self.client.wallets.get(user_id)
            transactions = self.client.transactions.list(user_id)
            self.store.replace_wallet(wallet)
            self.store.replace_transactions(transactions)
            # Server order is newest-first; take the head without re-sorting
            recent = transactions[: self.client.config.recent_transactions]
            return Dashboard(wallet=wallet, recent_transactions=recent)

        return self._run(fetch, "Load dashboard")


class TransactionFlow(BaseFlow):
    def history(self) -> Outcome[list[Transaction]]:
        def fetch() -> list[Transaction]:
            transactions = self.client.transactions.list(self._require_user())
            self.store.replace_transactions(transactions)
            return transactions

        return self._run(fetch, "Load transactions")

    def detail(self, transaction_id: str) -> Outcome[Transaction]:
        def fetch() -> Transaction:
            self._require_user()
            return self.client.transactions.get(transaction_id)

        return self._run(fetch, "Load transaction")


class NotificationFlow(BaseFlow):
    def load(self, page: int = 0, size: int | None = None) -> Outcome[list[Notification]]:
        page_size = size if size is not None else self.client.config.notifications_page_size

        def fetch() -> list[Notification]:
            notifications = self.client.notifications.list(self._require_user(), page, page_size)
            self.store.replace_notifications(notifications)
            return notifications

        return self._run(fetch, "Load notifications")
