"""Login, registration and logout."""

import logging

from micropay_client.exceptions import MicropayError, UnauthorizedError
from micropay_client.flows.base import BaseFlow
from micropay_client.flows.outcome import Outcome, OutcomeStatus
from micropay_client.models.auth import AuthResponse, RegisterRequest

logger = logging.getLogger(__name__)


class AuthFlow(BaseFlow):
    """The only flow that establishes or clears the session."""

    @property
    def is_authenticated(self) -> bool:
        return self.client.session.is_active

    def login(self, email: str, password: str) -> Outcome[AuthResponse]:
        try:
            credentials = self.client.auth.login(email, password)
        except UnauthorizedError as exc:
            # Bad credentials, not an expired session
            return Outcome(
                status=OutcomeStatus.REJECTED,
                message=exc.body.message or "Invalid email or password",
            )
        except MicropayError as exc:
            return self._fail(exc, "Login")
        return self._start(credentials, "Logged in successfully")

    def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> Outcome[AuthResponse]:
        request = RegisterRequest(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
        )
        try:
            credentials = self.client.auth.register(request)
        except MicropayError as exc:
            return self._fail(exc, "Registration")
        return self._start(credentials, "Account created successfully")

    def logout(self) -> Outcome[None]:
        self.client.session.clear()
        self.store.reset()
        return Outcome.success(None, "Logged out")

    def _start(self, credentials: AuthResponse, message: str) -> Outcome[AuthResponse]:
        self.store.reset()
        self.client.session.establish(credentials.token, credentials.user_id)
        return Outcome.success(credentials, message)
