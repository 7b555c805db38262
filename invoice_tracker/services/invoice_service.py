"""
Invoice service.

The four invoice operations, independent of HTTP:
1. create_invoice      - parse dates, insert with done=False
2. list_invoices       - format dates for display, expiring-soon first
3. delete_invoice      - delete if present, absence is not an error
4. toggle_invoice_done - flip done, NotFoundError if the id is unknown

Every function receives the store handle explicitly.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from invoice_tracker.db.store import InvoiceStore
from invoice_tracker.errors import NotFoundError, StoreError
from invoice_tracker.schemas.invoices import (
    InvoiceCreateRequest,
    InvoiceListItem,
    InvoiceRecord,
)
from invoice_tracker.utils.dates import format_date, parse_date, sort_expiring_first

logger = logging.getLogger(__name__)


def _to_record(row: Dict[str, Any]) -> InvoiceRecord:
    """Validate a store row into an InvoiceRecord."""
    try:
        return InvoiceRecord.model_validate(row)
    except PydanticValidationError as e:
        logger.error(f"Store returned a malformed invoice row (id={row.get('id')}): {e}")
        raise StoreError("Stored invoice is malformed") from e


async def create_invoice(
    store: InvoiceStore,
    request: InvoiceCreateRequest,
) -> InvoiceRecord:
    """
    Create an invoice record.

    Both dates are parsed before anything is written, so an invalid date never
    produces a row.

    Args:
        store: Record store handle
        request: Validated request body

    Returns:
        The stored record, with store-assigned id and raw timestamps.

    Raises:
        ValidationError: If invoiceDate or expiryDate is not a date
        StoreError: If the insert fails
    """
    invoice_date = parse_date(request.invoice_date)
    expiry_date = parse_date(request.expiry_date)

    invoice_data = {
        "invoice_number": request.invoice_number,
        "invoice_date": invoice_date.isoformat(),
        "item_name": request.item_name,
        "price": request.price,
        "expiry_date": expiry_date.isoformat(),
        "done": False,
    }

    logger.info(
        f"Creating invoice: number={request.invoice_number}, "
        f"expiry={invoice_data['expiry_date']}"
    )

    created = _to_record(store.insert(invoice_data))

    logger.info(f"Invoice created successfully: id={created.id}")

    return created


async def list_invoices(
    store: InvoiceStore,
    now: Optional[datetime] = None,
) -> List[InvoiceListItem]:
    """
    Fetch every invoice as a display copy, expiring-soon invoices first.

    Dates are rendered as YYYY-MM-DD ("Invalid Date" if unreadable). Ordering is
    a stable partition on the formatted expiry date, so invoices of the same
    class keep the store's order.

    Args:
        store: Record store handle
        now: Reference instant for "expiring soon" (defaults to the current time)

    Returns:
        List of InvoiceListItem
    """
    rows = store.find_all()

    items = [
        InvoiceListItem.model_validate({
            **row,
            "invoice_date": format_date(row.get("invoice_date")),
            "expiry_date": format_date(row.get("expiry_date")),
        })
        for row in rows
    ]

    ordered = sort_expiring_first(items, lambda item: item.expiry_date, now)

    logger.info(f"Fetched {len(ordered)} invoices")

    return ordered


async def delete_invoice(store: InvoiceStore, invoice_id: str) -> None:
    """Delete an invoice if it exists. Unknown ids are ignored."""
    logger.info(f"Deleting invoice {invoice_id}")
    store.delete(invoice_id)


async def toggle_invoice_done(store: InvoiceStore, invoice_id: str) -> InvoiceRecord:
    """
    Flip the done flag of an invoice.

    This is a plain read-modify-write; concurrent toggles on one id can race.

    Raises:
        NotFoundError: If no invoice has this id
        StoreError: If the store fails
    """
    row = store.find_by_id(invoice_id)

    if row is None:
        logger.warning(f"Invoice {invoice_id} not found for done toggle")
        raise NotFoundError("Invoice not found")

    current = _to_record(row)
    updated = store.update(invoice_id, {"done": not current.done})

    if updated is None:
        # Deleted between the read and the write
        logger.warning(f"Invoice {invoice_id} disappeared during done toggle")
        raise NotFoundError("Invoice not found")

    record = _to_record(updated)

    logger.info(f"Invoice {invoice_id} done set to {record.done}")

    return record
