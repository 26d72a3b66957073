"""
Invoice form action routes.

Form-encoded POST endpoints for the dashboard. Successful create/update
answer with a 303 to the invoices page; failures answer with the action
state so the form can render every field error at once.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.adapters.navigation import ResponseNavigator
from src.api.deps import (
    get_action_config,
    get_clock,
    get_invoice_repo,
    get_navigator,
    get_revalidator,
)
from src.api.schemas import ActionStateResponse, read_form
from src.components.invoices import (
    ActionResult,
    CreateInvoiceInput,
    DeleteInvoiceInput,
    InvoiceActionConfig,
    InvoiceRepoPort,
    RevalidationPort,
    TimePort,
    UpdateInvoiceInput,
    run_create,
    run_delete,
    run_update,
)

router = APIRouter()


# --- Helper Functions ---


def _state_response(result: ActionResult) -> JSONResponse:
    code = status.HTTP_400_BAD_REQUEST if result.errors else status.HTTP_500_INTERNAL_SERVER_ERROR
    body = ActionStateResponse(errors=result.errors, message=result.message)
    return JSONResponse(status_code=code, content=body.model_dump())


def _finish(result: ActionResult, navigator: ResponseNavigator) -> Response:
    if result.ok and navigator.redirected:
        return navigator.to_response()
    if result.ok:
        return JSONResponse(content=ActionStateResponse().model_dump())
    return _state_response(result)


# --- Routes ---


@router.post("/create", responses={400: {"model": ActionStateResponse}})
async def create_invoice(
    request: Request,
    repo: InvoiceRepoPort = Depends(get_invoice_repo),
    revalidator: RevalidationPort = Depends(get_revalidator),
    navigator: ResponseNavigator = Depends(get_navigator),
    time: TimePort = Depends(get_clock),
    config: InvoiceActionConfig = Depends(get_action_config),
) -> Response:
    """Create an invoice from the submitted form."""
    result = await run_create(
        CreateInvoiceInput(form=await read_form(request)),
        repo=repo,
        revalidator=revalidator,
        navigator=navigator,
        time=time,
        config=config,
    )
    return _finish(result, navigator)


@router.post("/{invoice_id}/edit", responses={400: {"model": ActionStateResponse}})
async def update_invoice(
    invoice_id: str,
    request: Request,
    repo: InvoiceRepoPort = Depends(get_invoice_repo),
    revalidator: RevalidationPort = Depends(get_revalidator),
    navigator: ResponseNavigator = Depends(get_navigator),
    config: InvoiceActionConfig = Depends(get_action_config),
) -> Response:
    """Update an invoice from the submitted form."""
    result = await run_update(
        UpdateInvoiceInput(invoice_id=invoice_id, form=await read_form(request)),
        repo=repo,
        revalidator=revalidator,
        navigator=navigator,
        config=config,
    )
    return _finish(result, navigator)


@router.post("/{invoice_id}/delete")
async def delete_invoice(
    invoice_id: str,
    repo: InvoiceRepoPort = Depends(get_invoice_repo),
    revalidator: RevalidationPort = Depends(get_revalidator),
    navigator: ResponseNavigator = Depends(get_navigator),
    config: InvoiceActionConfig = Depends(get_action_config),
) -> Response:
    """Delete an invoice. Never redirects."""
    result = await run_delete(
        DeleteInvoiceInput(invoice_id=invoice_id),
        repo=repo,
        revalidator=revalidator,
        config=config,
    )
    return _finish(result, navigator)
