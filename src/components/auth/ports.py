from collections.abc import Mapping
from datetime import datetime
from typing import Any, Protocol

from src.domain.entities import Session, User


class SessionAuthenticatorPort(Protocol):
    """
    Establishes a session from a credential payload.

    Returns nothing on success. Rejections raise AuthError with a ``type``
    tag; anything else raised is an infrastructure failure.
    """

    async def sign_in(self, provider: str, form: Mapping[str, Any]) -> None: ...


class UserRepoPort(Protocol):
    async def get_by_email(self, email: str) -> User | None: ...


class PasswordVerifierPort(Protocol):
    def verify_password(self, plain: str, hashed: str) -> bool: ...


class SessionStorePort(Protocol):
    """Port for session storage - removes global state from component."""

    def save(self, token: str, session: Session) -> None:
        """Save session with token as key."""
        ...

    def delete(self, token: str) -> None:
        """Delete session by token."""
        ...

    def purge_expired(self, now: datetime) -> int:
        """Drop expired sessions. Returns count removed."""
        ...


class TimePort(Protocol):
    def now_utc(self) -> datetime: ...
