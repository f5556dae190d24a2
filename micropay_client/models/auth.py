"""Authentication models."""

from dataclasses import dataclass, field

from micropay_client.serialization import require


@dataclass(frozen=True)
class AuthResponse:
    """Credentials returned by login and register."""

    token: str = field(repr=False)
    user_id: str
    email: str

    @classmethod
    def from_dict(cls, data: dict) -> "AuthResponse":
        return cls(
            token=str(require(data, "token", "AuthResponse")),
            user_id=str(require(data, "userId", "AuthResponse")),
            email=str(data.get("email") or ""),
        )


@dataclass(frozen=True)
class RegisterRequest:
    """Profile submitted to create an account."""

    email: str
    password: str = field(repr=False)
    first_name: str
    last_name: str
