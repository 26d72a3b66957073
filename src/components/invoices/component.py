"""
Invoices component - create, update and delete invoice records.

Every action runs the same pipeline:
validate form -> write to data store -> revalidate route -> navigate.

Invariants:
- Invalid input never reaches the data store
- A failed write never revalidates or navigates
- Delete revalidates but never navigates
- Amounts are stored as integer minor units
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from src.domain.errors import DataStoreError
from src.rules.models import InvoiceRules

from .models import (
    CREATE_FAILED_MESSAGE,
    CREATE_VALIDATION_MESSAGE,
    DELETE_FAILED_MESSAGE,
    UPDATE_FAILED_MESSAGE,
    UPDATE_VALIDATION_MESSAGE,
    ActionResult,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceActionConfig,
    UpdateInvoiceInput,
)
from .ports import InvoiceRepoPort, NavigatorPort, RevalidationPort, TimePort
from .schema import CreateInvoice, UpdateInvoice, validate_invoice_form

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = InvoiceActionConfig()


def build_config(rules: InvoiceRules | None) -> InvoiceActionConfig:
    """Build action config from the invoices section of the rules."""
    if rules is None:
        return DEFAULT_CONFIG

    return InvoiceActionConfig(
        route=rules.route,
        create_minor_unit_factor=rules.create_minor_unit_factor,
        update_minor_unit_factor=rules.update_minor_unit_factor,
    )


def to_minor_units(amount: float, factor: int) -> int:
    """Scale to minor units, rounding halves away from zero (0.25 x 10 -> 3)."""
    scaled = amount * factor
    with localcontext() as ctx:
        # Holds the integer part of any finite float times the factor
        ctx.prec = 400
        exact = Decimal(scaled) if math.isfinite(scaled) else Decimal(amount) * factor
        return int(exact.quantize(Decimal(1), rounding=ROUND_HALF_UP))


# --- Component Entry Points ---


async def run_create(
    inp: CreateInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    revalidator: RevalidationPort,
    navigator: NavigatorPort,
    time: TimePort,
    config: InvoiceActionConfig = DEFAULT_CONFIG,
) -> ActionResult:
    validation = validate_invoice_form(inp.form, CreateInvoice)
    if not validation.success:
        logger.info("Create invoice rejected, invalid fields: %s", sorted(validation.errors))
        return ActionResult(errors=validation.errors, message=CREATE_VALIDATION_MESSAGE)

    invoice = validation.data
    assert invoice is not None
    amount = to_minor_units(invoice.amount, config.create_minor_unit_factor)
    date = time.now_utc().date().isoformat()

    try:
        await repo.insert(
            customer_id=invoice.customer_id,
            amount=amount,
            status=invoice.status,
            date=date,
        )
    except DataStoreError:
        logger.exception("Failed to create invoice for customer %s", invoice.customer_id)
        return ActionResult(message=CREATE_FAILED_MESSAGE)

    revalidator.revalidate_path(config.route)
    navigator.redirect(config.route)
    logger.info("Created invoice for customer %s", invoice.customer_id)
    return ActionResult(redirect_to=config.route)


async def run_update(
    inp: UpdateInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    revalidator: RevalidationPort,
    navigator: NavigatorPort,
    config: InvoiceActionConfig = DEFAULT_CONFIG,
) -> ActionResult:
    validation = validate_invoice_form(inp.form, UpdateInvoice)
    if not validation.success:
        logger.info(
            "Update of invoice %s rejected, invalid fields: %s",
            inp.invoice_id,
            sorted(validation.errors),
        )
        return ActionResult(errors=validation.errors, message=UPDATE_VALIDATION_MESSAGE)

    invoice = validation.data
    assert invoice is not None
    amount = to_minor_units(invoice.amount, config.update_minor_unit_factor)

    try:
        await repo.update(
            inp.invoice_id,
            customer_id=invoice.customer_id,
            amount=amount,
            status=invoice.status,
        )
    except DataStoreError:
        logger.exception("Failed to update invoice %s", inp.invoice_id)
        return ActionResult(message=UPDATE_FAILED_MESSAGE)

    revalidator.revalidate_path(config.route)
    navigator.redirect(config.route)
    logger.info("Updated invoice %s", inp.invoice_id)
    return ActionResult(redirect_to=config.route)


async def run_delete(
    inp: DeleteInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    revalidator: RevalidationPort,
    config: InvoiceActionConfig = DEFAULT_CONFIG,
) -> ActionResult:
    try:
        await repo.delete(inp.invoice_id)
    except DataStoreError:
        logger.exception("Failed to delete invoice %s", inp.invoice_id)
        return ActionResult(message=DELETE_FAILED_MESSAGE)

    revalidator.revalidate_path(config.route)
    logger.info("Deleted invoice %s", inp.invoice_id)
    return ActionResult()


async def run(
    inp: CreateInvoiceInput | UpdateInvoiceInput | DeleteInvoiceInput,
    *,
    repo: InvoiceRepoPort,
    revalidator: RevalidationPort,
    navigator: NavigatorPort | None = None,
    time: TimePort | None = None,
    config: InvoiceActionConfig = DEFAULT_CONFIG,
) -> ActionResult:
    if isinstance(inp, CreateInvoiceInput):
        assert navigator and time
        return await run_create(
            inp, repo=repo, revalidator=revalidator, navigator=navigator, time=time, config=config
        )

    elif isinstance(inp, UpdateInvoiceInput):
        assert navigator
        return await run_update(
            inp, repo=repo, revalidator=revalidator, navigator=navigator, config=config
        )

    elif isinstance(inp, DeleteInvoiceInput):
        return await run_delete(inp, repo=repo, revalidator=revalidator, config=config)

    raise TypeError(f"Unsupported invoice action input: {type(inp).__name__}")
