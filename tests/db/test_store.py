"""
Tests for SupabaseInvoiceStore.

Mocks the Supabase query builder chain and checks the table calls and the
translation of store failures into StoreError.
"""

import httpx
import pytest
from unittest.mock import MagicMock, Mock
from postgrest.exceptions import APIError

from invoice_tracker.db.store import SupabaseInvoiceStore
from invoice_tracker.errors import StoreError

INVOICE_ID = "3f1c2a9e-8b7d-4c6e-9a51-2d4f0b7e6c13"


@pytest.fixture
def mock_supabase_client():
    """Mock Supabase client; query builder calls chain through MagicMock."""
    return MagicMock()


@pytest.fixture
def store(mock_supabase_client):
    return SupabaseInvoiceStore(mock_supabase_client, table="invoice")


def _result(rows):
    result = Mock()
    result.data = rows
    return result


class TestInsert:

    def test_insert_returns_created_row(self, store, mock_supabase_client):
        mock_table = mock_supabase_client.table.return_value
        mock_table.insert.return_value.execute.return_value = _result(
            [{"id": "invoice-uuid-123", "done": False}]
        )

        row = store.insert({"invoice_number": "INV1", "done": False})

        mock_supabase_client.table.assert_called_with("invoice")
        mock_table.insert.assert_called_once_with({"invoice_number": "INV1", "done": False})
        assert row["id"] == "invoice-uuid-123"

    def test_insert_raises_on_empty_result(self, store, mock_supabase_client):
        mock_table = mock_supabase_client.table.return_value
        mock_table.insert.return_value.execute.return_value = _result([])

        with pytest.raises(StoreError, match="Failed to create invoice"):
            store.insert({"invoice_number": "INV1"})


class TestQueries:

    def test_find_all_orders_by_creation(self, store, mock_supabase_client):
        mock_table = mock_supabase_client.table.return_value
        mock_select = mock_table.select.return_value
        mock_select.order.return_value.execute.return_value = _result(
            [{"id": "inv-1"}, {"id": "inv-2"}]
        )

        rows = store.find_all()

        mock_table.select.assert_called_once_with("*")
        mock_select.order.assert_called_once_with("created_at")
        assert [row["id"] for row in rows] == ["inv-1", "inv-2"]

    def test_find_all_handles_null_data(self, store, mock_supabase_client):
        mock_select = mock_supabase_client.table.return_value.select.return_value
        mock_select.order.return_value.execute.return_value = _result(None)

        assert store.find_all() == []

    def test_find_by_id_returns_none_when_missing(self, store, mock_supabase_client):
        mock_select = mock_supabase_client.table.return_value.select.return_value
        mock_select.eq.return_value.execute.return_value = _result([])

        assert store.find_by_id(INVOICE_ID) is None
        mock_select.eq.assert_called_once_with("id", INVOICE_ID)

    def test_update_filters_by_id(self, store, mock_supabase_client):
        mock_update = mock_supabase_client.table.return_value.update
        mock_update.return_value.eq.return_value.execute.return_value = _result(
            [{"id": INVOICE_ID, "done": True}]
        )

        row = store.update(INVOICE_ID, {"done": True})

        mock_update.assert_called_once_with({"done": True})
        mock_update.return_value.eq.assert_called_once_with("id", INVOICE_ID)
        assert row == {"id": INVOICE_ID, "done": True}

    def test_update_returns_none_when_no_row_matched(self, store, mock_supabase_client):
        mock_update = mock_supabase_client.table.return_value.update
        mock_update.return_value.eq.return_value.execute.return_value = _result([])

        assert store.update(INVOICE_ID, {"done": True}) is None

    def test_delete_filters_by_id(self, store, mock_supabase_client):
        mock_delete = mock_supabase_client.table.return_value.delete
        mock_delete.return_value.eq.return_value.execute.return_value = _result([])

        store.delete(INVOICE_ID)

        mock_delete.return_value.eq.assert_called_once_with("id", INVOICE_ID)
        mock_delete.return_value.eq.return_value.execute.assert_called_once()


class TestNonUuidIds:
    """Ids that are not UUIDs are answered without a round trip."""

    @pytest.mark.parametrize("invoice_id", ["abc", "inv-1", "", "123"])
    def test_find_by_id_returns_none(self, store, mock_supabase_client, invoice_id):
        assert store.find_by_id(invoice_id) is None
        mock_supabase_client.table.assert_not_called()

    def test_update_returns_none(self, store, mock_supabase_client):
        assert store.update("abc", {"done": True}) is None
        mock_supabase_client.table.assert_not_called()

    def test_delete_is_a_no_op(self, store, mock_supabase_client):
        mock_delete = mock_supabase_client.table.return_value.delete
        mock_delete.return_value.eq.return_value.execute.side_effect = APIError({
            "message": "invalid input syntax for type uuid: \"abc\"",
            "code": "22P02",
            "hint": None,
            "details": None,
        })

        store.delete("abc")

        mock_delete.return_value.eq.return_value.execute.assert_not_called()


class TestErrorTranslation:

    def test_api_error_becomes_store_error_with_message(self, store, mock_supabase_client):
        mock_select = mock_supabase_client.table.return_value.select.return_value
        mock_select.order.return_value.execute.side_effect = APIError({
            "message": "relation \"invoice\" does not exist",
            "code": "42P01",
            "hint": None,
            "details": None,
        })

        with pytest.raises(StoreError) as exc_info:
            store.find_all()

        assert exc_info.value.message == "relation \"invoice\" does not exist"

    def test_transport_error_becomes_store_error(self, store, mock_supabase_client):
        mock_delete = mock_supabase_client.table.return_value.delete
        mock_delete.return_value.eq.return_value.execute.side_effect = httpx.ConnectError(
            "connection refused"
        )

        with pytest.raises(StoreError, match="connection refused"):
            store.delete(INVOICE_ID)
