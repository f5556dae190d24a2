"""Idempotency keys for payment submissions.

A key is ``"<time_ns>-<32 hex chars>"``: a nanosecond wall-clock stamp
joined with 128 bits from ``os.urandom``. One key belongs to one
user-initiated submission. Retrying that submission after a network
failure resends the same key so the server can deduplicate; editing the
form and submitting again is a new intent and gets a new key.

Usage::

    factory = IdempotencyKeyFactory()
    submission = PaymentSubmission(request, factory)
    payment = submission.send(gateway)   # key minted here
    payment = submission.send(gateway)   # retry: same key
"""

from __future__ import annotations

import logging
import os
import time
from typing import TYPE_CHECKING, Callable

from micropay_client.models.payment import PaymentRequest

if TYPE_CHECKING:
    from micropay_client.gateways.payment import PaymentGateway
    from micropay_client.models.payment import Payment

logger = logging.getLogger(__name__)


class EntropyPool:
    """Batch-read random hex tokens from ``os.urandom``.

    Parameters
    ----------
    batch_size : int
        Number of 16-byte tokens to read per refill (default 256).
    """

    __slots__ = ("_batch_size", "_pool", "_index")

    def __init__(self, batch_size: int = 256) -> None:
        self._batch_size = batch_size
        self._pool: list[str] = []
        self._index = 0
        self._refill()

    def _refill(self) -> None:
        raw = os.urandom(16 * self._batch_size)
        self._pool = [raw[i : i + 16].hex() for i in range(0, len(raw), 16)]
        self._index = 0

    def next(self) -> str:
        """Return the next random token, refilling when exhausted."""
        if self._index >= len(self._pool):
            self._refill()
        val = self._pool[self._index]
        self._index += 1
        return val


class IdempotencyKeyFactory:
    """Mint idempotency keys from a nanosecond clock and 128 random bits.

    Parameters
    ----------
    clock : Callable[[], int]
        Nanosecond clock (default ``time.time_ns``).
    entropy : Callable[[], str] | None
        Random component source (default an ``EntropyPool``).
    """

    def __init__(
        self,
        clock: Callable[[], int] = time.time_ns,
        entropy: Callable[[], str] | None = None,
    ) -> None:
        self._clock = clock
        self._entropy = entropy or EntropyPool().next
        self._last: str | None = None

    def next(self) -> str:
        # Only an immediate repeat is redrawn; no history is kept.
        key = f"{self._clock()}-{self._entropy()}"
        while key == self._last:
            key = f"{self._clock()}-{self._entropy()}"
        self._last = key
        return key


_default_factory: IdempotencyKeyFactory | None = None


def default_factory() -> IdempotencyKeyFactory:
    """Process-wide factory shared by flows that are not given one."""
    global _default_factory
    if _default_factory is None:
        _default_factory = IdempotencyKeyFactory()
    return _default_factory


class PaymentSubmission:
    """One user-initiated payment attempt and its idempotency key.

    The key is minted on the first ``send`` and reused by every later
    ``send`` of the same submission.
    """

    def __init__(
        self,
        request: PaymentRequest,
        factory: IdempotencyKeyFactory | None = None,
    ) -> None:
        self.request = request
        self._factory = factory or default_factory()
        self._key: str | None = None
        self.attempts = 0

    @property
    def idempotency_key(self) -> str | None:
        return self._key

    def send(self, gateway: PaymentGateway) -> Payment:
        if self._key is None:
            self._key = self._factory.next()
        self.attempts += 1
        if self.attempts > 1:
            logger.info("Retrying payment submission (attempt %d) with the same key", self.attempts)
        return gateway.initiate(self.request.with_key(self._key))
