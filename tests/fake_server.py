"""In-memory stand-in for the ledger REST API, served through httpx.MockTransport."""

from __future__ import annotations

import json
import re
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

import httpx


def _now() -> str:
    return datetime(2025, 3, 1, 12, 0, 0).isoformat()


def _error(status: int, message: str, validation_errors: dict[str, str] | None = None) -> httpx.Response:
    body: dict[str, Any] = {
        "status": status,
        "error": httpx.codes.get_reason_phrase(status),
        "message": message,
        "timestamp": _now(),
    }
    if validation_errors:
        body["validationErrors"] = validation_errors
    return httpx.Response(status, json=body)


@dataclass
class FakeLedger:
    """Minimal ledger with users, wallets, payments, transactions and notifications.

    ``requests`` records every request received, in order. Failures can be
    queued with ``fail_next`` (a status code, or an exception class raised
    as a transport error).
    """

    users: dict[str, dict] = field(default_factory=dict)
    tokens: dict[str, str] = field(default_factory=dict)
    wallets: dict[str, dict] = field(default_factory=dict)
    payments: dict[str, dict] = field(default_factory=dict)
    payments_by_key: dict[str, str] = field(default_factory=dict)
    transactions: dict[str, dict] = field(default_factory=dict)
    user_transactions: dict[str, list[str]] = field(default_factory=dict)
    notifications: dict[str, list[dict]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)
    _failures: list[Any] = field(default_factory=list)

    # ------------------------------------------------------------------ setup

    def add_user(self, email: str, password: str, balance: Decimal = Decimal("0")) -> str:
        user_id = str(uuid.uuid4())
        self.users[email] = {"password": password, "userId": user_id}
        self.wallets[user_id] = {
            "id": str(uuid.uuid4()),
            "userId": user_id,
            "balance": Decimal(balance),
            "currency": "USD",
            "status": "ACTIVE",
            "createdAt": _now(),
            "updatedAt": _now(),
        }
        self.user_transactions[user_id] = []
        self.notifications[user_id] = []
        return user_id

    def revoke_all_tokens(self) -> None:
        self.tokens.clear()

    def fail_next(self, failure: int | type[Exception]) -> None:
        self._failures.append(failure)

    def adjust_balance(self, user_id: str, delta: Decimal) -> None:
        """Change a balance behind the client's back (another tab, a payee...)."""
        self.wallets[user_id]["balance"] += delta

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def paths(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]

    # ---------------------------------------------------------------- routing

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self._failures:
            failure = self._failures.pop(0)
            if isinstance(failure, int):
                return _error(failure, "Injected failure")
            raise failure("injected", request=request)

        path = request.url.path
        if request.method == "POST" and path == "/api/auth/login":
            return self._login(self._body(request))
        if request.method == "POST" and path == "/api/auth/register":
            return self._register(self._body(request))

        caller = self._authenticate(request)
        if caller is None:
            return _error(401, "Invalid or expired token")

        for method, pattern, handler in self._routes():
            match = re.fullmatch(pattern, path)
            if match and request.method == method:
                return handler(request, caller, *match.groups())
        return _error(404, f"No route for {request.method} {path}")

    def _routes(self) -> list[tuple[str, str, Callable[..., httpx.Response]]]:
        return [
            ("GET", r"/api/wallet/([^/]+)", self._get_wallet),
            ("POST", r"/api/wallet/([^/]+)/credit", self._credit),
            ("POST", r"/api/wallet/([^/]+)/debit", self._debit),
            ("POST", r"/api/payment", self._initiate_payment),
            ("GET", r"/api/payment/([^/]+)", self._get_payment),
            ("GET", r"/api/transactions/([^/]+)", self._list_transactions),
            ("GET", r"/api/transaction/([^/]+)", self._get_transaction),
            ("GET", r"/api/notifications/([^/]+)", self._list_notifications),
        ]

    @staticmethod
    def _body(request: httpx.Request) -> dict:
        return json.loads(request.content or b"{}")

    def _authenticate(self, request: httpx.Request) -> str | None:
        header = request.headers.get("Authorization", "")
        if not header.startswith("Bearer "):
            return None
        return self.tokens.get(header[len("Bearer "):])

    # ------------------------------------------------------------------- auth

    def _issue(self, email: str) -> httpx.Response:
        token = uuid.uuid4().hex
        user_id = self.users[email]["userId"]
        self.tokens[token] = user_id
        return httpx.Response(200, json={"token": token, "userId": user_id, "email": email})

    def _login(self, body: dict) -> httpx.Response:
        user = self.users.get(body.get("email", ""))
        if user is None or user["password"] != body.get("password"):
            return _error(401, "Invalid email or password")
        return self._issue(body["email"])

    def _register(self, body: dict) -> httpx.Response:
        missing = {
            key: f"{key} is required"
            for key in ("email", "password", "firstName", "lastName")
            if not body.get(key)
        }
        if missing:
            return _error(400, "Validation failed", missing)
        if body["email"] in self.users:
            return _error(409, "Email already registered")
        self.add_user(body["email"], body["password"])
        return self._issue(body["email"])

    # ----------------------------------------------------------------- wallet

    @staticmethod
    def _wallet_json(wallet: dict) -> dict:
        return {**wallet, "balance": float(wallet["balance"])}

    def _get_wallet(self, request: httpx.Request, caller: str, user_id: str) -> httpx.Response:
        wallet = self.wallets.get(user_id)
        if wallet is None:
            return _error(404, f"Wallet not found for user {user_id}")
        return httpx.Response(200, json=self._wallet_json(wallet))

    def _credit(self, request: httpx.Request, caller: str, user_id: str) -> httpx.Response:
        return self._change(request, user_id, Decimal(1))

    def _debit(self, request: httpx.Request, caller: str, user_id: str) -> httpx.Response:
        return self._change(request, user_id, Decimal(-1))

    def _change(self, request: httpx.Request, user_id: str, sign: Decimal) -> httpx.Response:
        wallet = self.wallets.get(user_id)
        if wallet is None:
            return _error(404, f"Wallet not found for user {user_id}")
        amount = Decimal(str(self._body(request).get("amount", 0)))
        if amount <= 0:
            return _error(400, "Validation failed", {"amount": "Amount must be greater than 0"})
        if sign < 0 and wallet["balance"] < amount:
            return _error(400, "Insufficient balance")
        wallet["balance"] += sign * amount
        # The echo deliberately omits the balance, like a service that only acknowledges
        return httpx.Response(200, json={**self._wallet_json(wallet), "balance": 0})

    # ---------------------------------------------------------------- payment

    def _initiate_payment(self, request: httpx.Request, caller: str) -> httpx.Response:
        body = self._body(request)
        key = body.get("idempotencyKey")
        if not key:
            return _error(400, "Validation failed", {"idempotencyKey": "Idempotency key is required"})
        if key in self.payments_by_key:
            return httpx.Response(200, json=self.payments[self.payments_by_key[key]])

        payer, payee = body["payerUserId"], body.get("payeeUserId")
        amount = Decimal(str(body["amount"]))
        payment_id = str(uuid.uuid4())
        payment = {
            "id": payment_id,
            "paymentId": payment_id,
            "payerUserId": payer,
            "payeeUserId": payee,
            "amount": float(amount),
            "currency": body.get("currency") or "USD",
            "paymentType": body.get("paymentType") or "PAYMENT",
            "status": "COMPLETED",
            "idempotencyKey": key,
            "description": body.get("description"),
            "reference": body.get("reference"),
            "createdAt": _now(),
            "updatedAt": _now(),
        }

        payer_wallet = self.wallets[payer]
        if payer_wallet["balance"] < amount:
            payment.update(status="FAILED", failedAt=_now())
        else:
            payer_wallet["balance"] -= amount
            if payee in self.wallets:
                self.wallets[payee]["balance"] += amount
            payment.update(completedAt=_now(), transactionId=self._record(payment_id, payer, payee, amount))

        self.payments[payment_id] = payment
        self.payments_by_key[key] = payment_id
        return httpx.Response(200, json=payment)

    def _record(self, payment_id: str, payer: str, payee: str | None, amount: Decimal) -> str:
        transaction_id = str(uuid.uuid4())
        entries = [
            {"id": str(uuid.uuid4()), "userId": payer, "entryType": "DEBIT", "amount": float(amount), "currency": "USD"},
            {"id": str(uuid.uuid4()), "userId": payee, "entryType": "CREDIT", "amount": float(amount), "currency": "USD"},
        ]
        self.transactions[transaction_id] = {
            "id": transaction_id,
            "transactionId": transaction_id,
            "paymentId": payment_id,
            "status": "RECORDED",
            "entries": entries,
            "createdAt": _now(),
            "updatedAt": _now(),
            "recordedAt": _now(),
        }
        for user_id in (payer, payee):
            if user_id in self.user_transactions:
                self.user_transactions[user_id].insert(0, transaction_id)
                self.notifications[user_id].insert(
                    0,
                    {
                        "id": str(uuid.uuid4()),
                        "userId": user_id,
                        "notificationType": "TRANSACTION_RECORDED",
                        "channel": "IN_APP",
                        "status": "SENT",
                        "title": "Transaction recorded",
                        "message": f"Transaction {transaction_id} recorded",
                        "referenceId": transaction_id,
                        "referenceType": "TRANSACTION",
                        "createdAt": _now(),
                        "sentAt": _now(),
                    },
                )
        return transaction_id

    def _get_payment(self, request: httpx.Request, caller: str, payment_id: str) -> httpx.Response:
        payment = self.payments.get(payment_id)
        if payment is None:
            return _error(404, f"Payment not found: {payment_id}")
        return httpx.Response(200, json=payment)

    # ------------------------------------------------------- ledger & inbox

    def _list_transactions(self, request: httpx.Request, caller: str, user_id: str) -> httpx.Response:
        ids = self.user_transactions.get(user_id, [])
        return httpx.Response(200, json=[self.transactions[t] for t in ids])

    def _get_transaction(self, request: httpx.Request, caller: str, transaction_id: str) -> httpx.Response:
        transaction = self.transactions.get(transaction_id)
        if transaction is None:
            return _error(404, f"Transaction not found: {transaction_id}")
        return httpx.Response(200, json=transaction)

    def _list_notifications(self, request: httpx.Request, caller: str, user_id: str) -> httpx.Response:
        page = int(request.url.params.get("page", 0))
        size = int(request.url.params.get("size", 20))
        items = self.notifications.get(user_id, [])
        return httpx.Response(200, json=items[page * size : (page + 1) * size])
