"""
Invoice record store.

InvoiceStore is the handle the service layer talks to. Rows go in and come out
as plain dicts keyed by column name (snake_case); validation into InvoiceRecord
happens in the service layer.

SupabaseInvoiceStore is the production implementation. Any failure reported by
PostgREST or the HTTP transport surfaces as StoreError. Ids that are not
UUIDs never reach the store: they cannot match a row, and PostgREST would
reject them as malformed uuid input.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional, Protocol, cast

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from invoice_tracker.errors import StoreError

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


class InvoiceStore(Protocol):
    """Operations the invoice service needs from a record store."""

    def insert(self, data: Row) -> Row:
        ...

    def find_all(self) -> List[Row]:
        ...

    def find_by_id(self, invoice_id: str) -> Optional[Row]:
        ...

    def update(self, invoice_id: str, changes: Row) -> Optional[Row]:
        ...

    def delete(self, invoice_id: str) -> None:
        ...


class SupabaseInvoiceStore:
    """InvoiceStore backed by a Supabase table."""

    def __init__(self, client: Client, table: str = "invoice"):
        self.client = client
        self.table = table

    def _execute(self, query: Any, action: str) -> List[Row]:
        try:
            result = query.execute()
        except APIError as e:
            logger.error(f"Store rejected {action} on table {self.table}: {e}", exc_info=True)
            raise StoreError(getattr(e, "message", None) or str(e)) from e
        except httpx.HTTPError as e:
            logger.error(f"Store unreachable during {action}: {e}", exc_info=True)
            raise StoreError(str(e)) from e

        return cast(List[Row], result.data or [])

    def insert(self, data: Row) -> Row:
        rows = self._execute(self.client.table(self.table).insert(data), "insert")

        if not rows:
            raise StoreError("Failed to create invoice: no data returned")

        return rows[0]

    def find_all(self) -> List[Row]:
        query = self.client.table(self.table).select("*").order("created_at")
        return self._execute(query, "select")

    def find_by_id(self, invoice_id: str) -> Optional[Row]:
        if not _is_uuid(invoice_id):
            return None

        query = self.client.table(self.table).select("*").eq("id", invoice_id)
        rows = self._execute(query, "select")
        return rows[0] if rows else None

    def update(self, invoice_id: str, changes: Row) -> Optional[Row]:
        if not _is_uuid(invoice_id):
            return None

        query = self.client.table(self.table).update(changes).eq("id", invoice_id)
        rows = self._execute(query, "update")
        return rows[0] if rows else None

    def delete(self, invoice_id: str) -> None:
        # ids are uuids; anything else cannot match a row
        if not _is_uuid(invoice_id):
            return

        query = self.client.table(self.table).delete().eq("id", invoice_id)
        self._execute(query, "delete")
