"""Configuration management for micropay-client."""

from dataclasses import dataclass, field
from pathlib import Path

from micropay_client.exceptions import ConfigurationError

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_SESSION_FILE = Path.home() / ".micropay" / "session.json"


@dataclass
class HttpConfig:
    """HTTP transport configuration."""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    user_agent: str = "micropay-client"

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.timeout_seconds <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got {self.timeout_seconds}")


@dataclass
class SessionConfig:
    """Session persistence configuration."""

    session_file: Path = field(default_factory=lambda: DEFAULT_SESSION_FILE)
    persist: bool = True


@dataclass
class ClientConfig:
    """Main configuration for micropay-client."""

    http: HttpConfig = field(default_factory=HttpConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    login_path: str = "/login"
    recent_transactions: int = 5
    notifications_page_size: int = 50

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create config from environment variables."""
        import os

        timeout_str = os.getenv("MICROPAY_TIMEOUT", "10")
        try:
            timeout = float(timeout_str)
        except ValueError as exc:
            raise ConfigurationError(f"MICROPAY_TIMEOUT is not a number: {timeout_str!r}") from exc

        http = HttpConfig(
            base_url=os.getenv("MICROPAY_API_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=timeout,
        )

        session_file = os.getenv("MICROPAY_SESSION_FILE")
        session = SessionConfig(
            session_file=Path(session_file) if session_file else DEFAULT_SESSION_FILE,
            persist=os.getenv("MICROPAY_PERSIST_SESSION", "true").lower() == "true",
        )

        return cls(
            http=http,
            session=session,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
