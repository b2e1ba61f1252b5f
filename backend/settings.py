"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.exercisedb_base_url)
"""

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "exercise-catalog-jwt-secret-change-in-production"

# Environments allowed to run with DEFAULT_JWT_SECRET
INSECURE_SECRET_ENVIRONMENTS = {"development", "test"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Upstream Provider - ExerciseDB (RapidAPI)
    # -------------------------------------------------------------------------
    exercisedb_base_url: str = Field(
        default="https://exercisedb.p.rapidapi.com",
        validation_alias=AliasChoices("exercisedb_base_url", "exercisedb_base"),
        description="ExerciseDB base URL",
    )
    exercisedb_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("exercisedb_key", "rapidapi_key"),
        description="RapidAPI key sent as x-rapidapi-key",
    )
    exercisedb_host: str = Field(
        default="exercisedb.p.rapidapi.com",
        description="RapidAPI host sent as x-rapidapi-host",
    )
    search_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for request-time search and lookup calls",
    )
    import_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout for bulk import calls",
    )
    import_pacing_ms: int = Field(
        default=600,
        ge=0,
        description="Pause between muscle groups during an import sweep",
    )
    exercise_source: str = Field(
        default="upstream",
        description="Read path provider: upstream (ExerciseDB) or local (catalog store)",
    )

    # -------------------------------------------------------------------------
    # Supabase Database
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (limited access)",
    )
    catalog_table: str = Field(
        default="exercises",
        description="Table holding the local exercise catalog",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------
    jwt_secret: str = Field(
        default=DEFAULT_JWT_SECRET,
        description="Shared secret for HS256 bearer tokens",
    )
    api_keys: str = Field(
        default="",
        description="Comma-separated list of valid API keys",
    )

    @property
    def api_keys_list(self) -> list[str]:
        """Parse API keys into a list."""
        return [k.strip() for k in self.api_keys.split(",") if k.strip()]

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("exercise_source")
    @classmethod
    def validate_exercise_source(cls, v: str) -> str:
        """Ensure the read path provider is known."""
        valid_sources = {"upstream", "local"}
        if v.lower() not in valid_sources:
            raise ValueError(
                f"Invalid exercise_source '{v}'. Must be one of: {valid_sources}"
            )
        return v.lower()

    @model_validator(mode="after")
    def validate_jwt_secret(self) -> "Settings":
        """Refuse the built-in JWT secret outside development and test."""
        if (
            self.jwt_secret == DEFAULT_JWT_SECRET
            and self.environment not in INSECURE_SECRET_ENVIRONMENTS
        ):
            raise ValueError(
                f"JWT_SECRET must be set when environment is '{self.environment}'"
            )
        return self

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def import_pacing_seconds(self) -> float:
        """Pause between muscle groups, in seconds."""
        return self.import_pacing_ms / 1000.0


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
