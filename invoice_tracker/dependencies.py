"""
FastAPI dependency functions.

The record store handle lives on app.state (set by create_app or its
lifespan) and reaches route handlers through get_invoice_store.
"""

import logging

from fastapi import Request

from invoice_tracker.db.store import InvoiceStore

logger = logging.getLogger(__name__)


async def get_invoice_store(request: Request) -> InvoiceStore:
    """
    Return the store handle attached to the running application.

    Raises:
        RuntimeError: If the application was started without a store
    """
    store = getattr(request.app.state, "invoice_store", None)

    if store is None:
        logger.error("No invoice store configured on application state")
        raise RuntimeError("Invoice store is not configured")

    return store
