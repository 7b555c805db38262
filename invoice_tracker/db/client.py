"""
Supabase client factory for the invoice record store.

The client is created once per application (see main.create_app) and wrapped in
a SupabaseInvoiceStore. Handlers never reach for a module-level client.
"""

import logging

from supabase import Client, create_client

from invoice_tracker.config import Settings

logger = logging.getLogger(__name__)


def get_supabase_client(app_settings: Settings) -> Client:
    """
    Create a Supabase client from the configured URL and key.

    Args:
        app_settings: Settings carrying SUPABASE_URL and SUPABASE_KEY

    Returns:
        A Supabase client ready for table queries.

    Raises:
        ValueError: If the URL or key is not configured.
    """
    if not app_settings.SUPABASE_URL or not app_settings.SUPABASE_KEY:
        raise ValueError(
            "SUPABASE_URL and SUPABASE_KEY must be set to connect to the record store."
        )

    client: Client = create_client(
        supabase_url=app_settings.SUPABASE_URL,
        supabase_key=app_settings.SUPABASE_KEY,
    )

    logger.info(f"Connected to record store at {app_settings.SUPABASE_URL}")

    return client
