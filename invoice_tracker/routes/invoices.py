"""
Invoice API endpoints.

- POST   /invoices            - create an invoice
- GET    /invoices            - list invoices, expiring-soon first
- DELETE /invoices/{id}       - delete an invoice (unknown ids succeed)
- PUT    /invoices/{id}/done  - toggle the done flag

Domain errors raised by the service layer are turned into responses by the
exception handlers in main.py.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from invoice_tracker.db.store import InvoiceStore
from invoice_tracker.dependencies import get_invoice_store
from invoice_tracker.schemas.invoices import (
    ErrorResponse,
    InvoiceCreateRequest,
    InvoiceDeleteResponse,
    InvoiceListItem,
    InvoiceRecord,
)
from invoice_tracker.services import (
    create_invoice,
    delete_invoice,
    list_invoices,
    toggle_invoice_done,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])

StoreDep = Annotated[InvoiceStore, Depends(get_invoice_store)]


@router.post(
    "",
    response_model=InvoiceRecord,
    status_code=status.HTTP_200_OK,
    summary="Create an invoice",
    description="""
    Persist a new invoice with done=false.

    - invoiceDate and expiryDate must both parse as dates, otherwise 400
      and nothing is written
    - The stored record is returned with raw timestamps
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid date"},
        500: {"model": ErrorResponse, "description": "Store error"},
    },
)
async def create_invoice_record(
    request: InvoiceCreateRequest,
    store: StoreDep,
) -> InvoiceRecord:
    logger.info(f"POST /invoices number={request.invoice_number}")
    return await create_invoice(store=store, request=request)


@router.get(
    "",
    response_model=List[InvoiceListItem],
    status_code=status.HTTP_200_OK,
    summary="List invoices",
    description="""
    Return every invoice with dates formatted as YYYY-MM-DD.

    Invoices expiring within the next 24 hours come first; the remaining
    order is the store's order.
    """,
    responses={500: {"model": ErrorResponse, "description": "Store error"}},
)
async def list_invoice_records(store: StoreDep) -> List[InvoiceListItem]:
    invoices = await list_invoices(store=store)
    logger.info(f"Returning {len(invoices)} invoices")
    return invoices


@router.delete(
    "/{invoice_id}",
    response_model=InvoiceDeleteResponse,
    status_code=status.HTTP_200_OK,
    summary="Delete an invoice",
    description="Delete an invoice by id. Deleting an unknown id still succeeds.",
    responses={500: {"model": ErrorResponse, "description": "Store error"}},
)
async def delete_invoice_record(invoice_id: str, store: StoreDep) -> InvoiceDeleteResponse:
    await delete_invoice(store=store, invoice_id=invoice_id)
    return InvoiceDeleteResponse(message="Invoice deleted")


@router.put(
    "/{invoice_id}/done",
    response_model=InvoiceRecord,
    status_code=status.HTTP_200_OK,
    summary="Toggle invoice done flag",
    description="Flip the done flag and return the updated record.",
    responses={
        404: {"model": ErrorResponse, "description": "Invoice not found"},
        500: {"model": ErrorResponse, "description": "Store error"},
    },
)
async def toggle_invoice_record_done(invoice_id: str, store: StoreDep) -> InvoiceRecord:
    logger.info(f"Toggling done for invoice {invoice_id}")
    return await toggle_invoice_done(store=store, invoice_id=invoice_id)
