"""In-memory session store adapter.

Implements SessionStorePort for the auth component. Sessions are keyed by
the SHA-256 of the issued token, never the raw token.
"""

from datetime import datetime

from src.domain.entities import Session


class InMemorySessionStore:
    """In-memory session storage - suitable for single-process deployments."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    def save(self, token: str, session: Session) -> None:
        self._sessions[token] = session

    def delete(self, token: str) -> None:
        self._sessions.pop(token, None)

    def purge_expired(self, now: datetime) -> int:
        """Drop sessions whose expiry has passed. Returns count removed."""
        expired = [k for k, v in self._sessions.items() if v.expires_at <= now]
        for key in expired:
            del self._sessions[key]
        return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)
