"""Transaction gateway."""

from micropay_client.exceptions import DecodeError
from micropay_client.gateways.base import BaseGateway, require_text
from micropay_client.models.transaction import Transaction


class TransactionGateway(BaseGateway):
    """Read recorded ledger transactions.

    The list comes back newest-first as ordered by the server and is
    never re-sorted here.
    """

    def list(self, user_id: str) -> list[Transaction]:
        require_text(user_id, "userId", "User ID")
        data = self.transport.get(f"/api/transactions/{self._segment(user_id)}")
        if data is None:
            return []
        if not isinstance(data, list):
            raise DecodeError("Expected a list of transactions")
        return [Transaction.from_dict(item) for item in data]

    def get(self, transaction_id: str) -> Transaction:
        require_text(transaction_id, "transactionId", "Transaction ID")
        data = self.transport.get(f"/api/transaction/{self._segment(transaction_id)}")
        return Transaction.from_dict(data)
