"""Error body returned by the server on any non-2xx response."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ErrorBody:
    """Decoded ``{status, error, message, timestamp, validationErrors?}``."""

    status: int
    error: str = ""
    message: str = ""
    timestamp: str | None = None
    validation_errors: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, status_code: int, data: Any, reason: str = "") -> "ErrorBody":
        """Build from a decoded body, tolerating bodies that are not JSON objects.

        Some services send the field map under ``errors`` instead of
        ``validationErrors``; both are accepted.
        """
        if not isinstance(data, dict):
            return cls(status=status_code, error=reason, message=str(data) if data else reason)

        field_map = data.get("validationErrors") or data.get("errors") or {}
        if not isinstance(field_map, dict):
            field_map = {}

        status = data.get("status")
        return cls(
            status=status if isinstance(status, int) else status_code,
            error=str(data.get("error") or reason),
            message=str(data.get("message") or ""),
            timestamp=None if data.get("timestamp") is None else str(data["timestamp"]),
            validation_errors={str(k): str(v) for k, v in field_map.items()},
        )
