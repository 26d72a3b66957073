"""
Navigator adapter for the HTTP shell.

Actions call ``redirect`` as a side effect; the route handler then turns the
recorded location into a response. Only internal paths are accepted.
"""

from __future__ import annotations

from fastapi import status
from fastapi.responses import RedirectResponse


def is_internal_path(path: str) -> bool:
    """Check if path is internal (not a full URL)."""
    if not path or not path.startswith("/"):
        return False

    # Protocol-relative URL or embedded scheme
    if path.startswith("//") or "://" in path:
        return False

    return True


class ResponseNavigator:
    """Records the redirect target for the current request."""

    def __init__(self, status_code: int = status.HTTP_303_SEE_OTHER) -> None:
        self.status_code = status_code
        self.location: str | None = None

    def redirect(self, location: str) -> None:
        if not is_internal_path(location):
            raise ValueError(f"Refusing to redirect to non-internal location: {location!r}")
        self.location = location

    @property
    def redirected(self) -> bool:
        return self.location is not None

    def to_response(self) -> RedirectResponse:
        if self.location is None:
            raise RuntimeError("No redirect was requested")
        return RedirectResponse(url=self.location, status_code=self.status_code)
