"""
Invoices component - invoice form actions.

Validates submitted invoice forms, writes them to the data store, then
revalidates the invoices route and navigates back to it.
"""

from .component import (
    build_config,
    run,
    run_create,
    run_delete,
    run_update,
    to_minor_units,
)
from .models import (
    CREATE_FAILED_MESSAGE,
    CREATE_VALIDATION_MESSAGE,
    DELETE_FAILED_MESSAGE,
    INVOICES_ROUTE,
    UPDATE_FAILED_MESSAGE,
    UPDATE_VALIDATION_MESSAGE,
    ActionResult,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceActionConfig,
    UpdateInvoiceInput,
)
from .ports import InvoiceRepoPort, NavigatorPort, RevalidationPort, TimePort
from .schema import (
    CreateInvoice,
    InvoiceForm,
    InvoiceValidation,
    UpdateInvoice,
    validate_invoice_form,
)

__all__ = [
    # Entry points
    "run",
    "run_create",
    "run_delete",
    "run_update",
    "build_config",
    "to_minor_units",
    # Input models
    "CreateInvoiceInput",
    "DeleteInvoiceInput",
    "UpdateInvoiceInput",
    # Output models
    "ActionResult",
    "InvoiceActionConfig",
    # Schema
    "CreateInvoice",
    "InvoiceForm",
    "InvoiceValidation",
    "UpdateInvoice",
    "validate_invoice_form",
    # Messages
    "CREATE_FAILED_MESSAGE",
    "CREATE_VALIDATION_MESSAGE",
    "DELETE_FAILED_MESSAGE",
    "INVOICES_ROUTE",
    "UPDATE_FAILED_MESSAGE",
    "UPDATE_VALIDATION_MESSAGE",
    # Ports
    "InvoiceRepoPort",
    "NavigatorPort",
    "RevalidationPort",
    "TimePort",
]
