"""
API package for the exercise catalog service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_catalog_store,
    get_upstream_config,
    get_exercise_provider,
    get_exercise_query_use_case,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    "get_catalog_store",
    # Upstream
    "get_upstream_config",
    "get_exercise_provider",
    # Use cases
    "get_exercise_query_use_case",
    # Authentication
    "get_current_user",
]
