from datetime import UTC, datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
InvoiceStatus = Literal["pending", "paid"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


# --- User & Auth ---

class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: str
    name: str
    password_hash: str
    created_at: datetime = Field(default_factory=_utcnow)


class Session(BaseModel):
    id: str  # Token or Session ID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    created_at: datetime = Field(default_factory=_utcnow)


# --- Invoices ---

class InvoiceRecord(BaseModel):
    id: str
    customer_id: str
    amount: int  # minor currency units
    status: InvoiceStatus
    date: str  # ISO-8601 YYYY-MM-DD
