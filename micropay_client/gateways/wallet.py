"""Wallet gateway."""

from decimal import Decimal

from micropay_client.gateways.base import BaseGateway, require_text, validate_amount
from micropay_client.models.wallet import BalanceChangeRequest, Wallet
from micropay_client.serialization import to_payload


class WalletGateway(BaseGateway):
    """Read a wallet and move funds in or out of it.

    ``credit`` and ``debit`` return whatever wallet the server echoes.
    Callers that display a balance must fetch again with ``get``.
    Insufficient funds is reported by the server, not checked here.
    """

    def get(self, user_id: str) -> Wallet:
        require_text(user_id, "userId", "User ID")
        data = self.transport.get(f"/api/wallet/{self._segment(user_id)}")
        return Wallet.from_dict(data)

    def credit(
        self,
        user_id: str,
        amount: Decimal | int | str,
        description: str | None = None,
        transaction_id: str | None = None,
    ) -> Wallet:
        return self._change(user_id, "credit", amount, description, transaction_id)

    def debit(
        self,
        user_id: str,
        amount: Decimal | int | str,
        description: str | None = None,
        transaction_id: str | None = None,
    ) -> Wallet:
        return self._change(user_id, "debit", amount, description, transaction_id)

    def _change(
        self,
        user_id: str,
        action: str,
        amount: Decimal | int | str,
        description: str | None,
        transaction_id: str | None,
    ) -> Wallet:
        request = BalanceChangeRequest(
            amount=validate_amount(amount),
            transaction_id=transaction_id,
            description=description,
        )
        require_text(user_id, "userId", "User ID")
        data = self.transport.post(
            f"/api/wallet/{self._segment(user_id)}/{action}",
            json=to_payload(request),
        )
        return Wallet.from_dict(data)
