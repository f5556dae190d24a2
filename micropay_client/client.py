"""Client facade wiring session, transport, gateways and flows."""

from __future__ import annotations

from functools import cached_property

import httpx

from micropay_client.config import ClientConfig
from micropay_client.flows import Flows
from micropay_client.gateways import (
    AuthGateway,
    NotificationGateway,
    PaymentGateway,
    TransactionGateway,
    WalletGateway,
)
from micropay_client.idempotency import IdempotencyKeyFactory, default_factory
from micropay_client.session import FileSessionStorage, MemorySessionStorage, Session
from micropay_client.store import SnapshotStore
from micropay_client.transport import Transport


class MicropayClient:
    """One client instance: one session, one transport, one set of gateways.

    Parameters
    ----------
    config : ClientConfig | None
        Configuration (default ``ClientConfig()``).
    session : Session | None
        Session to use. When omitted one is created from ``config.session``:
        file-backed when ``persist`` is set, in memory otherwise.
    http_transport : httpx.BaseTransport | None
        Low-level transport handed to httpx (tests use ``httpx.MockTransport``).
    key_factory : IdempotencyKeyFactory | None
        Source of payment idempotency keys (default: process-wide factory).
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: Session | None = None,
        http_transport: httpx.BaseTransport | None = None,
        key_factory: IdempotencyKeyFactory | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.session = session if session is not None else self._make_session()
        self.transport = Transport(self.session, self.config.http, transport=http_transport)
        self.key_factory = key_factory or default_factory()
        self.store = SnapshotStore()

        self.auth = AuthGateway(self.transport)
        self.wallets = WalletGateway(self.transport)
        self.payments = PaymentGateway(self.transport)
        self.transactions = TransactionGateway(self.transport)
        self.notifications = NotificationGateway(self.transport)

    def _make_session(self) -> Session:
        if self.config.session.persist:
            return Session(FileSessionStorage(self.config.session.session_file))
        return Session(MemorySessionStorage())

    @cached_property
    def flows(self) -> Flows:
        return Flows.for_client(self)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "MicropayClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
