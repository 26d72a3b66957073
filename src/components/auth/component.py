"""
Auth component - sign-in action.

Forwards a credential form to the session authenticator and turns
authentication-domain rejections into user-facing messages. Errors that are
not AuthError propagate untouched.
"""

import logging

from src.domain.errors import AuthError

from .models import (
    CREDENTIALS_SIGNIN,
    OUTCOME_MESSAGES,
    AuthenticateInput,
    AuthOutcome,
)
from .ports import SessionAuthenticatorPort

logger = logging.getLogger(__name__)


def classify_auth_error(error: AuthError | None) -> AuthOutcome:
    if error is None:
        return AuthOutcome.SUCCESS
    if error.type == CREDENTIALS_SIGNIN:
        return AuthOutcome.INVALID_CREDENTIALS
    return AuthOutcome.UNKNOWN_ERROR


async def run_authenticate(
    inp: AuthenticateInput, authenticator: SessionAuthenticatorPort
) -> str | None:
    """Sign in; returns None on success or a message describing the rejection."""
    try:
        await authenticator.sign_in(inp.provider, inp.form)
    except AuthError as e:
        outcome = classify_auth_error(e)
        logger.info("Sign-in rejected (%s): %s", e.type, outcome.value)
        return OUTCOME_MESSAGES[outcome]

    return None


async def run(
    inp: AuthenticateInput,
    *,
    authenticator: SessionAuthenticatorPort | None = None,
) -> str | None:
    if isinstance(inp, AuthenticateInput):
        assert authenticator
        return await run_authenticate(inp, authenticator)

    raise TypeError(f"Unsupported auth input: {type(inp).__name__}")
