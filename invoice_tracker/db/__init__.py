"""
Record store access layer for the invoice tracker.

Includes:
- Supabase client construction from Settings
- The InvoiceStore protocol used by the service layer
- SupabaseInvoiceStore, which maps store failures to StoreError
"""

from .client import get_supabase_client
from .store import InvoiceStore, SupabaseInvoiceStore

__all__ = ["get_supabase_client", "InvoiceStore", "SupabaseInvoiceStore"]
