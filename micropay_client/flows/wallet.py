"""Wallet display, credit and debit."""

from decimal import Decimal

from micropay_client.flows.base import BaseFlow
from micropay_client.flows.outcome import Outcome
from micropay_client.models.wallet import Wallet


class WalletFlow(BaseFlow):
    """Wallet operations that always end with a fresh fetch.

    The wallet echoed by a credit or debit is discarded; only the
    re-fetched snapshot is stored and returned.
    """

    def load(self) -> Outcome[Wallet]:
        return self._run(self.refresh, "Load wallet")

    def refresh(self) -> Wallet:
        wallet = self.client.wallets.get(self._require_user())
        self.store.replace_wallet(wallet)
        return wallet

    def credit(self, amount: Decimal | int | str, description: str = "Wallet credit") -> Outcome[Wallet]:
        def credit_and_refresh() -> Wallet:
            self.client.wallets.credit(self._require_user(), amount, description=description)
            return self.refresh()

        return self._run(credit_and_refresh, "Credit wallet", "Wallet credited successfully!")

    def debit(self, amount: Decimal | int | str, description: str = "Wallet debit") -> Outcome[Wallet]:
        def debit_and_refresh() -> Wallet:
            self.client.wallets.debit(self._require_user(), amount, description=description)
            return self.refresh()

        return self._run(debit_and_refresh, "Debit wallet", "Wallet debited successfully!")
