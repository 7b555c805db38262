"""
Domain exceptions for the invoice tracker.

Services raise these; the exception handlers registered in main.py turn them
into HTTP responses:

- ValidationError -> 400
- NotFoundError   -> 404
- StoreError      -> 500 (store message passed through)
"""


class InvoiceTrackerError(Exception):
    """Base class for all invoice tracker errors."""

    error_code = "invoice_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(InvoiceTrackerError):
    """Client input could not be turned into a valid invoice."""

    error_code = "invalid_date"


class NotFoundError(InvoiceTrackerError):
    """No invoice matches the requested id."""

    error_code = "not_found"


class StoreError(InvoiceTrackerError):
    """The record store failed to complete an operation."""

    error_code = "store_error"
