"""Base class for orchestration flows."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TypeVar

from micropay_client.exceptions import MicropayError, NotAuthenticatedError
from micropay_client.flows.outcome import Outcome, OutcomeStatus
from micropay_client.store import SnapshotStore

if TYPE_CHECKING:
    from micropay_client.client import MicropayClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseFlow:
    """Common plumbing for flows.

    Flows check the session before any authenticated call, so nothing is
    sent while logged out, and turn every failure into an ``Outcome``.

    Parameters
    ----------
    client : MicropayClient
        Client providing the session, gateways and config.
    store : SnapshotStore | None
        View state to update. Defaults to the client's store.
    """

    def __init__(self, client: MicropayClient, store: SnapshotStore | None = None) -> None:
        self.client = client
        self.store = store if store is not None else client.store

    @property
    def login_path(self) -> str:
        return self.client.config.login_path

    def _require_user(self) -> str:
        user_id = self.client.session.current_user
        if user_id is None:
            raise NotAuthenticatedError()
        return user_id

    def _fail(self, exc: MicropayError, action: str) -> Outcome:
        outcome: Outcome = Outcome.from_error(exc, self.login_path)
        if outcome.status is OutcomeStatus.UNAUTHORIZED:
            self.store.reset()
        logger.info("%s failed (%s): %s", action, outcome.status.value, exc)
        return outcome

    def _run(self, fn: Callable[[], T], action: str, success_message: str = "") -> Outcome[T]:
        try:
            return Outcome.success(fn(), success_message)
        except MicropayError as exc:
            return self._fail(exc, action)
