"""
Invoices component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class InvoiceRepoPort(Protocol):
    """Data store for invoices. Raises DataStoreError on failure."""

    async def insert(self, *, customer_id: str, amount: int, status: str, date: str) -> None:
        """Insert a new invoice."""
        ...

    async def update(self, invoice_id: str, *, customer_id: str, amount: int, status: str) -> None:
        """Update the mutable fields of an invoice."""
        ...

    async def delete(self, invoice_id: str) -> None:
        """Delete an invoice."""
        ...


class RevalidationPort(Protocol):
    """Marks cached renderings of a route as stale."""

    def revalidate_path(self, path: str) -> bool:
        """Revalidate cache entries for the given path."""
        ...


class NavigatorPort(Protocol):
    """Sends the caller to a new location."""

    def redirect(self, location: str) -> None: ...


class TimePort(Protocol):
    """Port for time operations - enables deterministic testing."""

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...
