from typing import Any

from fastapi import Request
from pydantic import BaseModel


# --- Action State ---
class ActionStateResponse(BaseModel):
    """Form state returned when an action does not redirect."""

    errors: dict[str, list[str]] | None = None
    message: str | None = None


class MessageResponse(BaseModel):
    message: str


# --- Forms ---
async def read_form(request: Request) -> dict[str, Any]:
    """Text fields of the submitted form; file uploads are ignored."""
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
