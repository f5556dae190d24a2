"""Logging setup for micropay-client.

Everything goes to stderr so that JSON printed by the CLI on stdout stays
parseable. A redaction filter on the handler masks bearer credentials in
case one ever ends up in a message.
"""

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

_BEARER = re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+")
_SECRET_KEYS = frozenset({"token", "password", "authorization"})
REDACTED = "***"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure logging for micropay-client.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown names
        fall back to INFO.
    format_type : str
        "standard" for pipe-delimited text, "json" for one object per line.
    stream : TextIO | None
        Destination (default ``sys.stderr``).
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    handler.addFilter(RedactingFilter())
    root_logger.addHandler(handler)

    logging.getLogger("micropay_client").setLevel(log_level)

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def redact(text: str) -> str:
    """Mask bearer credentials in ``text``."""
    return _BEARER.sub(rf"\g<1>{REDACTED}", text)


class RedactingFilter(logging.Filter):
    """Mask bearer tokens in messages and secret keys in ``extra``."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = redact(message)
        if masked != message:
            record.msg, record.args = masked, None

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            record.extra = {
                key: REDACTED if key.lower() in _SECRET_KEYS else value
                for key, value in extra.items()
            }
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if isinstance(getattr(record, "extra", None), dict):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return the named logger (usually ``__name__``)."""
    return logging.getLogger(name)
