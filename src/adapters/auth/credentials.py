"""
Credentials session authenticator.

Implements SessionAuthenticatorPort for the ``credentials`` provider:
email/password checked against the user repo, then a JWT session issued and
written to the response cookie.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta
from typing import Any
from uuid import uuid4

from fastapi import Response
from pydantic import BaseModel, Field, ValidationError

from src.adapters.clock import SystemClock
from src.api.auth_utils import create_access_token, hash_token, verify_password
from src.components.auth import (
    CREDENTIALS_PROVIDER,
    CREDENTIALS_SIGNIN,
    PasswordVerifierPort,
    SessionStorePort,
    TimePort,
    UserRepoPort,
)
from src.domain.entities import Session
from src.domain.errors import AuthError
from src.rules.models import SessionCookieRules


class CredentialsPayload(BaseModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+$")
    password: str


class PasslibPasswordVerifier:
    def verify_password(self, plain: str, hashed: str) -> bool:
        return verify_password(plain, hashed)


DEFAULT_COOKIE = SessionCookieRules(
    name="access_token", secure=False, http_only=True, same_site="lax"
)


class CredentialsAuthenticator:
    """Email/password sign-in. Data store failures are not classified and propagate."""

    def __init__(
        self,
        *,
        user_repo: UserRepoPort,
        session_store: SessionStorePort,
        response: Response | None = None,
        password_verifier: PasswordVerifierPort | None = None,
        time: TimePort | None = None,
        password_min_length: int = 6,
        ttl_minutes: int = 60 * 24,
        cookie: SessionCookieRules = DEFAULT_COOKIE,
    ) -> None:
        self.user_repo = user_repo
        self.session_store = session_store
        self.response = response
        self.password_verifier = password_verifier or PasslibPasswordVerifier()
        self.time = time or SystemClock()
        self.password_min_length = password_min_length
        self.ttl_minutes = ttl_minutes
        self.cookie = cookie

    async def sign_in(self, provider: str, form: Mapping[str, Any]) -> None:
        if provider != CREDENTIALS_PROVIDER:
            raise AuthError("Configuration", f"Unsupported provider: {provider}")

        try:
            creds = CredentialsPayload.model_validate(
                {"email": form.get("email"), "password": form.get("password")}
            )
        except ValidationError:
            raise AuthError(CREDENTIALS_SIGNIN, "Malformed credentials") from None

        if len(creds.password) < self.password_min_length:
            raise AuthError(CREDENTIALS_SIGNIN, "Password too short")

        user = await self.user_repo.get_by_email(creds.email)
        if user is None:
            raise AuthError(CREDENTIALS_SIGNIN, "Unknown user")

        if not self.password_verifier.verify_password(creds.password, user.password_hash):
            raise AuthError(CREDENTIALS_SIGNIN, "Password mismatch")

        now = self.time.now_utc()
        ttl = timedelta(minutes=self.ttl_minutes)
        token = create_access_token({"sub": str(user.id)}, ttl, now_utc=now)
        token_hash = hash_token(token)

        self.session_store.purge_expired(now)
        self.session_store.save(
            token_hash,
            Session(
                id=str(uuid4()),
                user_id=user.id,
                token_hash=token_hash,
                expires_at=now + ttl,
                created_at=now,
            ),
        )

        if self.response is not None:
            self.response.set_cookie(
                key=self.cookie.name,
                value=f"Bearer {token}",
                httponly=self.cookie.http_only,
                max_age=self.ttl_minutes * 60,
                samesite=self.cookie.same_site,  # type: ignore[arg-type]
                secure=self.cookie.secure,
            )
