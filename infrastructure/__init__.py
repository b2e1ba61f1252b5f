"""
Infrastructure Layer for the exercise catalog service.

This package contains concrete implementations of the application ports:
- db/: Supabase catalog store
- exercisedb_client.py: ExerciseDB HTTP provider
- local_provider.py: Provider backed by the local catalog store
"""

from infrastructure.db import SupabaseCatalogStore
from infrastructure.exercisedb_client import ExerciseDBClient, UpstreamConfig
from infrastructure.local_provider import LocalCatalogProvider

__all__ = [
    "SupabaseCatalogStore",
    "ExerciseDBClient",
    "UpstreamConfig",
    "LocalCatalogProvider",
]
