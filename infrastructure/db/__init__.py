"""
Infrastructure Database Layer.

This package provides the Supabase-backed implementation of the CatalogStore
interface defined in application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseCatalogStore

    client = create_client(SUPABASE_URL, SUPABASE_KEY)
    catalog_store = SupabaseCatalogStore(client)
"""

from infrastructure.db.catalog_repository import SupabaseCatalogStore

__all__ = [
    "SupabaseCatalogStore",
]
