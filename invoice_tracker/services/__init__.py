"""
Service layer for the invoice tracker.

Services hold the invoice operations and sit between routes (HTTP layer)
and the record store. They raise domain errors from invoice_tracker.errors;
main.py maps those to HTTP responses.
"""

from .invoice_service import (
    create_invoice,
    delete_invoice,
    list_invoices,
    toggle_invoice_done,
)

__all__ = [
    "create_invoice",
    "list_invoices",
    "delete_invoice",
    "toggle_invoice_done",
]
