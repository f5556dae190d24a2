"""Authentication gateway."""

import logging

from micropay_client.gateways.base import BaseGateway, require_text
from micropay_client.models.auth import AuthResponse, RegisterRequest
from micropay_client.serialization import to_payload

logger = logging.getLogger(__name__)


class AuthGateway(BaseGateway):
    """Login and registration. Never retried."""

    def login(self, email: str, password: str) -> AuthResponse:
        require_text(email, "email", "Email")
        require_text(password, "password", "Password")

        logger.debug("Logging in %s", email)
        data = self.transport.post("/api/auth/login", json={"email": email, "password": password})
        return AuthResponse.from_dict(data)

    def register(self, request: RegisterRequest) -> AuthResponse:
        require_text(request.email, "email", "Email")
        require_text(request.password, "password", "Password")
        require_text(request.first_name, "firstName", "First name")
        require_text(request.last_name, "lastName", "Last name")

        logger.debug("Registering %s", request.email)
        data = self.transport.post("/api/auth/register", json=to_payload(request))
        return AuthResponse.from_dict(data)
