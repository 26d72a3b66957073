"""
Invoices component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# --- Messages ---

CREATE_VALIDATION_MESSAGE = "Missing Fields. Failed to Create Invoice."
UPDATE_VALIDATION_MESSAGE = "Missing Fields. Failed to Update Invoice."
CREATE_FAILED_MESSAGE = "Database Error: Failed to Create Invoice."
UPDATE_FAILED_MESSAGE = "Database Error: Failed to Update Invoice."
# Delete keeps its own wording, unlike create and update.
DELETE_FAILED_MESSAGE = "Database error. Failed to Delete Invoice"

INVOICES_ROUTE = "/dashboard/invoices"


# --- Configuration ---


@dataclass(frozen=True)
class InvoiceActionConfig:
    """Invoice action configuration from rules."""

    route: str = INVOICES_ROUTE

    # Create and update intentionally keep separate factors; they differ today.
    create_minor_unit_factor: int = 10
    update_minor_unit_factor: int = 100


# --- Input Models ---


@dataclass(frozen=True)
class CreateInvoiceInput:
    """Raw form submission for a new invoice."""

    form: Mapping[str, Any]


@dataclass(frozen=True)
class UpdateInvoiceInput:
    """Raw form submission for an existing invoice."""

    invoice_id: str
    form: Mapping[str, Any]


@dataclass(frozen=True)
class DeleteInvoiceInput:
    """Delete request for an existing invoice."""

    invoice_id: str


# --- Output Models ---


@dataclass(frozen=True)
class ActionResult:
    """
    Terminal value of an invoice action.

    A result with neither ``errors`` nor ``message`` is a success; create and
    update also carry the location the caller was sent to.
    """

    errors: dict[str, list[str]] | None = None
    message: str | None = None
    redirect_to: str | None = None

    @property
    def ok(self) -> bool:
        return not self.errors and self.message is None
