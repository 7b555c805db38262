"""
Pytest configuration for invoice tracker tests.

Sets up the test environment and provides an in-memory record store that is
injected into the app through create_app(store=...).
"""
import os
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-key")

from invoice_tracker.main import create_app  # noqa: E402


class InMemoryInvoiceStore:
    """InvoiceStore double keeping rows in insertion order."""

    def __init__(self) -> None:
        self.rows: Dict[str, Dict[str, Any]] = {}

    def insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        row = {
            "id": str(uuid.uuid4()),
            "done": False,
            "created_at": datetime.now(timezone.utc).isoformat(),
            **data,
        }
        self.rows[row["id"]] = row
        return dict(row)

    def find_all(self) -> List[Dict[str, Any]]:
        return [dict(row) for row in self.rows.values()]

    def find_by_id(self, invoice_id: str) -> Optional[Dict[str, Any]]:
        row = self.rows.get(invoice_id)
        return dict(row) if row is not None else None

    def update(self, invoice_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if invoice_id not in self.rows:
            return None
        self.rows[invoice_id].update(changes)
        return dict(self.rows[invoice_id])

    def delete(self, invoice_id: str) -> None:
        self.rows.pop(invoice_id, None)


@pytest.fixture
def memory_store():
    """Empty in-memory invoice store."""
    return InMemoryInvoiceStore()


@pytest.fixture
def client(memory_store):
    """Test client for an app wired to the in-memory store."""
    return TestClient(create_app(store=memory_store))
