"""
FastAPI Dependency Providers for the exercise catalog API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake
implementations.

Architecture:
- Settings, Supabase client and upstream config are cached per-process (lru_cache)
- Provider, store and use-case providers create new instances per-request
- Auth providers wrap backend.auth

Usage in routers:
    from api.deps import get_exercise_query_use_case
    from application.use_cases import ExerciseQueryUseCase

    @router.get("/search")
    async def search(
        use_case: ExerciseQueryUseCase = Depends(get_exercise_query_use_case),
    ):
        return await use_case.search(q="squat")

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_exercise_provider] = lambda: FakeExerciseProvider()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import CatalogStore, ExerciseProvider
from application.use_cases import ExerciseQueryUseCase

# Concrete implementations
from infrastructure import (
    ExerciseDBClient,
    LocalCatalogProvider,
    SupabaseCatalogStore,
    UpstreamConfig,
)

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns None if credentials are not configured.
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Catalog Store Provider
# =============================================================================


def get_catalog_store(
    client: Client = Depends(get_supabase_client_required),
) -> CatalogStore:
    """Get the local catalog store."""
    return SupabaseCatalogStore(client, table=_get_settings().catalog_table)


# =============================================================================
# Upstream Provider
# =============================================================================


@lru_cache
def get_upstream_config() -> UpstreamConfig:
    """
    Get the ExerciseDB config for request-time calls (cached).

    Built once per process with the search timeout.
    """
    settings = _get_settings()
    return UpstreamConfig.from_settings(settings, timeout=settings.search_timeout_seconds)


def get_exercise_provider(
    settings: Settings = Depends(get_settings),
) -> ExerciseProvider:
    """
    Get the provider for the read path.

    EXERCISE_SOURCE=upstream (default) queries ExerciseDB;
    EXERCISE_SOURCE=local serves the same contract from the catalog store.
    """
    if settings.exercise_source == "local":
        store = SupabaseCatalogStore(
            get_supabase_client_required(), table=settings.catalog_table
        )
        return LocalCatalogProvider(store)
    return ExerciseDBClient(get_upstream_config())


# =============================================================================
# Use Case Providers
# =============================================================================


def get_exercise_query_use_case(
    provider: ExerciseProvider = Depends(get_exercise_provider),
) -> ExerciseQueryUseCase:
    """Get the query use case bound to the configured provider."""
    return ExerciseQueryUseCase(provider=provider)


# =============================================================================
# Authentication Providers
# =============================================================================

# Re-exported so routers and tests depend on api.deps only.
get_current_user = _get_current_user
