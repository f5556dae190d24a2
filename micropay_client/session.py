"""Session store holding the bearer token and user id.

A ``Session`` is the only mutable state shared between the transport and
the flows. It is written by the login/register/logout flows and by the
transport's 401 hook, and read everywhere else.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class SessionStorage(Protocol):
    """Durable storage for the ``(token, user_id)`` pair."""

    def load(self) -> tuple[str, str] | None: ...

    def save(self, token: str, user_id: str) -> None: ...

    def delete(self) -> None: ...


class MemorySessionStorage:
    """Storage that lives only as long as the object."""

    def __init__(self, token: str | None = None, user_id: str | None = None) -> None:
        self._pair = (token, user_id) if token and user_id else None

    def load(self) -> tuple[str, str] | None:
        return self._pair

    def save(self, token: str, user_id: str) -> None:
        self._pair = (token, user_id)

    def delete(self) -> None:
        self._pair = None


class FileSessionStorage:
    """Store the session as a small JSON file.

    Parameters
    ----------
    path : str | Path
        File to read at start-up and to write on login. Parent
        directories are created on first save.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> tuple[str, str] | None:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, exc)
            return None

        if not isinstance(data, dict):
            return None
        token, user_id = data.get("token"), data.get("userId")
        if not token or not user_id:
            return None
        return str(token), str(user_id)

    def save(self, token: str, user_id: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write-then-rename so readers never see a token without its user id
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".session-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"token": token, "userId": user_id}, f)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)


class Session:
    """Current authenticated identity.

    Exists iff a token is present. The token and user id are always
    set and cleared together.

    Parameters
    ----------
    storage : SessionStorage | None
        Backing store, read once at construction. Defaults to memory.
    """

    def __init__(self, storage: SessionStorage | None = None) -> None:
        self._storage = storage if storage is not None else MemorySessionStorage()
        self._token: str | None = None
        self._user_id: str | None = None

        stored = self._storage.load()
        if stored is not None:
            self._token, self._user_id = stored
            logger.debug("Restored session for user %s", self._user_id)

    @property
    def is_active(self) -> bool:
        return bool(self._token)

    @property
    def current_user(self) -> str | None:
        return self._user_id if self.is_active else None

    @property
    def token(self) -> str | None:
        return self._token

    def establish(self, token: str, user_id: str) -> None:
        """Store a new ``(token, user_id)`` pair, replacing any previous one."""
        if not token or not user_id:
            raise ValueError("Both token and user_id are required to establish a session")

        self._storage.save(token, user_id)
        self._token, self._user_id = token, user_id
        logger.info("Session established for user %s", user_id)

    def clear(self) -> None:
        """Forget the current session. Safe to call when already cleared."""
        had_session = self.is_active
        self._token = None
        self._user_id = None
        self._storage.delete()
        if had_session:
            logger.info("Session cleared")

    def __repr__(self) -> str:
        return f"Session(active={self.is_active}, user_id={self.current_user!r})"
