"""
Invoice form schema and validation.

One schema serves both create and update; ``id`` and ``date`` are never
accepted from the form. Validation is pure: it never touches the data store
and reports every offending field at once.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from src.domain.entities import InvoiceStatus

# Client-side field names, in form order
FORM_FIELDS: tuple[str, ...] = ("customerId", "amount", "status")

TYPE_MESSAGES: dict[str, str] = {
    "customerId": "Please select a customer",
    "amount": "Please enter a valid amount.",
    "status": "Please select an invoice status.",
}

RANGE_MESSAGES: dict[str, str] = {
    "amount": "Please enter an amount greater than $0.",
}

_RANGE_ERROR_TYPES = frozenset(
    {"greater_than", "greater_than_equal", "less_than", "less_than_equal"}
)


def _coerce_form_number(value: Any) -> Any:
    """Blank or missing numeric inputs count as zero, like an empty number field."""
    if value is None:
        return 0
    if isinstance(value, str):
        text = value.strip()
        return text if text else 0
    return value


FormAmount = Annotated[float, BeforeValidator(_coerce_form_number)]


class InvoiceForm(BaseModel):
    """Validated invoice fields (customer, decimal amount, status)."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: FormAmount = Field(gt=0, allow_inf_nan=False)
    status: InvoiceStatus


CreateInvoice = InvoiceForm
UpdateInvoice = InvoiceForm


@dataclass(frozen=True)
class InvoiceValidation:
    """Either validated data or per-field error messages, never both."""

    data: InvoiceForm | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.data is not None and not self.errors


def _message_for(field_name: str, error_type: str) -> str:
    if error_type in _RANGE_ERROR_TYPES and field_name in RANGE_MESSAGES:
        return RANGE_MESSAGES[field_name]
    return TYPE_MESSAGES.get(field_name, "Invalid value.")


def flatten_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by form field, one message per distinct failure."""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = err.get("loc") or ()
        field_name = str(loc[0]) if loc else "form"
        message = _message_for(field_name, err["type"])
        bucket = errors.setdefault(field_name, [])
        if message not in bucket:
            bucket.append(message)
    return errors


def validate_invoice_form(
    form: Mapping[str, Any],
    schema: type[InvoiceForm] = InvoiceForm,
) -> InvoiceValidation:
    """Validate raw form input against the invoice schema."""
    payload = {name: form.get(name) for name in FORM_FIELDS}
    try:
        data = schema.model_validate(payload)
    except ValidationError as e:
        return InvoiceValidation(errors=flatten_errors(e))
    return InvoiceValidation(data=data)
