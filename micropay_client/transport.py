"""HTTP transport shared by all gateways."""

import logging
from decimal import Decimal
from typing import Any

import httpx

from micropay_client.config import HttpConfig
from micropay_client.exceptions import (
    ApiError,
    DecodeError,
    NetworkError,
    NotFoundError,
    RequestRejectedError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from micropay_client.models.error import ErrorBody
from micropay_client.session import Session

logger = logging.getLogger(__name__)

# Endpoints under this prefix never carry the bearer credential
PUBLIC_PATH_PREFIX = "/api/auth/"


class Transport:
    """Single HTTP client with credential attachment and 401 teardown.

    Every outgoing request carries ``Authorization: Bearer <token>`` when
    the session is active. Any 401 response clears the session before the
    resulting ``UnauthorizedError`` reaches the caller. Nothing is retried.

    Parameters
    ----------
    session : Session
        Session the credential is read from and cleared on 401.
    config : HttpConfig | None
        Base URL, timeout and user agent.
    transport : httpx.BaseTransport | None
        Optional low-level transport (e.g. ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        session: Session,
        config: HttpConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.session = session
        self.config = config or HttpConfig()
        self._client = httpx.Client(
            base_url=self.config.base_url,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": self.config.user_agent,
            },
            timeout=self.config.timeout_seconds,
            event_hooks={
                "request": [self._attach_credentials],
                "response": [self._intercept_unauthorized],
            },
            transport=transport,
        )

    def _api_path(self, url: httpx.URL) -> str:
        """Path of ``url`` below the base URL (``/gw/api/x`` -> ``/api/x``)."""
        prefix = self._client.base_url.path.rstrip("/")
        if prefix and url.path.startswith(prefix + "/"):
            return url.path[len(prefix):]
        return url.path

    def _attach_credentials(self, request: httpx.Request) -> None:
        token = self.session.token
        if token and not self._api_path(request.url).startswith(PUBLIC_PATH_PREFIX):
            request.headers["Authorization"] = f"Bearer {token}"
        else:
            request.headers.pop("Authorization", None)

    def _intercept_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code == 401:
            logger.warning(
                "401 from %s %s, clearing session",
                response.request.method,
                response.request.url.path,
            )
            self.session.clear()

    def request(
        self,
        method: str,
        path: str,
        json: dict | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Perform a request and return the decoded JSON body.

        Returns
        -------
        Any
            Decoded body (``None`` for an empty body). Fractional numbers
            are decoded as ``Decimal``.

        Raises
        ------
        NetworkError
            No response was received.
        ApiError
            The server answered with a non-2xx status.
        DecodeError
            A 2xx body was not valid JSON.
        """
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, json=json, params=params)
        except httpx.TransportError as exc:
            logger.error("%s %s failed: %s", method, path, exc)
            raise NetworkError(f"{method} {path}: {exc}") from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)

        if not response.is_success:
            raise self._error_for(response)
        return self._decode(response)

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: dict | None = None) -> Any:
        return self.request("POST", path, json=json)

    def _decode(self, response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json(parse_float=Decimal)
        except ValueError as exc:
            raise DecodeError(
                f"Invalid JSON from {response.request.method} {response.request.url.path}"
            ) from exc

    def _error_for(self, response: httpx.Response) -> ApiError:
        """Map a non-2xx response onto the error taxonomy."""
        try:
            data = response.json()
        except ValueError:
            data = response.text

        status = response.status_code
        body = ErrorBody.from_response(status, data, response.reason_phrase)

        if status == 401:
            return UnauthorizedError(status, body)
        if status >= 500:
            logger.error("Server error %d: %s", status, body.message or body.error)
            return ServerError(status, body)
        if body.validation_errors:
            return ValidationError(status, body)
        if status == 404:
            return NotFoundError(status, body)
        return RequestRejectedError(status, body)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
