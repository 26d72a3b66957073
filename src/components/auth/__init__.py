"""
Auth component - credentials sign-in.

Classifies authentication failures into user-facing messages.
"""

from .component import classify_auth_error, run, run_authenticate
from .models import (
    CREDENTIALS_PROVIDER,
    CREDENTIALS_SIGNIN,
    INVALID_CREDENTIALS_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    AuthenticateInput,
    AuthOutcome,
)
from .ports import (
    PasswordVerifierPort,
    SessionAuthenticatorPort,
    SessionStorePort,
    TimePort,
    UserRepoPort,
)

__all__ = [
    # Entry points
    "run",
    "run_authenticate",
    "classify_auth_error",
    # Models
    "AuthenticateInput",
    "AuthOutcome",
    "CREDENTIALS_PROVIDER",
    "CREDENTIALS_SIGNIN",
    "INVALID_CREDENTIALS_MESSAGE",
    "UNKNOWN_ERROR_MESSAGE",
    # Ports
    "PasswordVerifierPort",
    "SessionAuthenticatorPort",
    "SessionStorePort",
    "TimePort",
    "UserRepoPort",
]
