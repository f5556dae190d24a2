"""Client for the micropay ledger and payment service."""

from micropay_client.client import MicropayClient
from micropay_client.config import ClientConfig, HttpConfig, SessionConfig
from micropay_client.flows import Outcome, OutcomeStatus
from micropay_client.session import FileSessionStorage, MemorySessionStorage, Session

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "FileSessionStorage",
    "HttpConfig",
    "MemorySessionStorage",
    "MicropayClient",
    "Outcome",
    "OutcomeStatus",
    "Session",
    "SessionConfig",
]
