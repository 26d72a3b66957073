"""
Infrastructure error hierarchy.

Validation failures are returned as values and never raised. Everything here
is raised by adapters (data store, authenticator) and either caught at the
action boundary or propagated to the caller.
"""

from __future__ import annotations


class InfrastructureError(Exception):
    """Base class for failures raised by external collaborators."""


class DataStoreError(InfrastructureError):
    """A data store statement failed. The record is assumed unmodified."""

    def __init__(self, message: str, *, statement: str | None = None) -> None:
        super().__init__(message)
        self.statement = statement


class AuthError(InfrastructureError):
    """
    Authentication-domain failure, classified by ``type``.

    Known types:
    - ``CredentialsSignin``: credential mismatch
    - ``Configuration``: unsupported provider or misconfigured authenticator
    """

    def __init__(self, type: str, message: str | None = None) -> None:
        super().__init__(message or type)
        self.type = type
