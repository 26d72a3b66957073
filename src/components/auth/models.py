from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

CREDENTIALS_PROVIDER = "credentials"
CREDENTIALS_SIGNIN = "CredentialsSignin"

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials."
UNKNOWN_ERROR_MESSAGE = "Something went wrong."


class AuthOutcome(Enum):
    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNKNOWN_ERROR = "unknown_error"


OUTCOME_MESSAGES: dict[AuthOutcome, str | None] = {
    AuthOutcome.SUCCESS: None,
    AuthOutcome.INVALID_CREDENTIALS: INVALID_CREDENTIALS_MESSAGE,
    AuthOutcome.UNKNOWN_ERROR: UNKNOWN_ERROR_MESSAGE,
}


@dataclass(frozen=True)
class AuthenticateInput:
    form: Mapping[str, Any]
    provider: str = CREDENTIALS_PROVIDER
