"""Payment submission with explicit, same-key retries."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from micropay_client.exceptions import MicropayError
from micropay_client.flows.base import BaseFlow
from micropay_client.flows.outcome import Outcome
from micropay_client.flows.wallet import WalletFlow
from micropay_client.gateways.base import require_text, validate_amount
from micropay_client.idempotency import IdempotencyKeyFactory, PaymentSubmission
from micropay_client.models.enums import PaymentType
from micropay_client.models.payment import Payment, PaymentRequest
from micropay_client.store import SnapshotStore

if TYPE_CHECKING:
    from micropay_client.client import MicropayClient

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "USD"


class PaymentFlow(BaseFlow):
    """Submit payments and look them up.

    Each ``submit`` is a new user intent with a new idempotency key.
    When a submission fails without a response the outcome is marked
    ``retryable`` and carries the submission in ``context``; passing it to
    ``retry`` resends with the original key. Nothing is retried
    automatically.
    """

    def __init__(
        self,
        client: MicropayClient,
        store: SnapshotStore | None = None,
        key_factory: IdempotencyKeyFactory | None = None,
    ) -> None:
        super().__init__(client, store)
        self.key_factory = key_factory or client.key_factory
        self._wallet_flow = WalletFlow(client, self.store)

    def submit(
        self,
        payee_user_id: str,
        amount: Decimal | int | str,
        currency: str = DEFAULT_CURRENCY,
        payment_type: PaymentType = PaymentType.PAYMENT,
        description: str | None = None,
        reference: str | None = None,
    ) -> Outcome[Payment]:
        try:
            request = PaymentRequest(
                payer_user_id=self._require_user(),
                payee_user_id=require_text(payee_user_id, "payeeUserId", "Payee user ID"),
                amount=validate_amount(amount),
                currency=currency,
                payment_type=payment_type,
                description=description or None,
                reference=reference or None,
            )
        except MicropayError as exc:
            return self._fail(exc, "Payment")

        return self._send(PaymentSubmission(request, self.key_factory))

    def retry(self, submission: PaymentSubmission) -> Outcome[Payment]:
        """Resend a submission that got no response, with its original key."""
        return self._send(submission)

    def status(self, payment_id: str) -> Outcome[Payment]:
        def fetch() -> Payment:
            self._require_user()
            payment = self.client.payments.get(payment_id)
            self.store.replace_payment(payment)
            return payment

        return self._run(fetch, "Load payment")

    def _send(self, submission: PaymentSubmission) -> Outcome[Payment]:
        try:
            self._require_user()
            payment = submission.send(self.client.payments)
        except MicropayError as exc:
            outcome = self._fail(exc, "Payment")
            if outcome.retryable:
                outcome.context = submission
            return outcome

        self.store.replace_payment(payment)
        logger.info("Payment %s is %s", payment.payment_id, payment.status.value)

        outcome = Outcome.success(payment, "Payment initiated successfully!")
        refreshed = self._wallet_flow.load()
        if not refreshed.ok:
            logger.warning("Payment sent but wallet refresh failed: %s", refreshed.message)
            outcome.message += " Balance could not be refreshed."
        return outcome
