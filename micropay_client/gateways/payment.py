"""Payment gateway."""

from dataclasses import replace

from micropay_client.exceptions import ClientValidationError
from micropay_client.gateways.base import BaseGateway, require_text, validate_amount
from micropay_client.models.payment import Payment, PaymentRequest
from micropay_client.serialization import to_payload


class PaymentGateway(BaseGateway):
    """Initiate and look up payments."""

    def initiate(self, request: PaymentRequest) -> Payment:
        """Submit a payment.

        The request must already carry a freshly minted idempotency key;
        use ``PaymentSubmission`` rather than calling this directly.
        """
        require_text(request.payer_user_id, "payerUserId", "Payer user ID")
        require_text(request.payee_user_id, "payeeUserId", "Payee user ID")
        amount = validate_amount(request.amount)
        if not request.idempotency_key:
            raise ClientValidationError("Idempotency key is required", field="idempotencyKey")

        data = self.transport.post("/api/payment", json=to_payload(replace(request, amount=amount)))
        return Payment.from_dict(data)

    def get(self, payment_id: str) -> Payment:
        require_text(payment_id, "paymentId", "Payment ID")
        data = self.transport.get(f"/api/payment/{self._segment(payment_id)}")
        return Payment.from_dict(data)
