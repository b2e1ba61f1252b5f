"""
Supabase implementation of CatalogStore.

This module provides the concrete Supabase implementation for reading and
writing the local `exercises` catalog table. Unlike read-only repositories,
failures are raised as CatalogStoreError so the importer can record them
against the muscle group being processed.

Expected schema beyond the catalog columns:

    create unique index exercises_natural_key
        on exercises (name, coalesce(muscle_group, ''));

    create table import_locks (
        name text primary key,
        owner text not null,
        acquired_at timestamptz not null,
        expires_at timestamptz not null
    );
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import CatalogStoreError

logger = logging.getLogger(__name__)

TABLE = "exercises"
LOCK_TABLE = "import_locks"

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class SupabaseCatalogStore:
    """
    Supabase implementation of CatalogStore protocol.

    Each catalog method issues a single statement. The importer serializes
    its find-then-write upsert with the lock row kept in `import_locks`;
    the unique index on `(name, muscle_group)` rejects any duplicate that
    slips past it.
    """

    def __init__(self, client: Client, table: str = TABLE, lock_table: str = LOCK_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Catalog table name
            lock_table: Table holding import run locks
        """
        self._client = client
        self._table = table
        self._lock_table = lock_table

    def _query(self):
        return self._client.table(self._table)

    def find_by_natural_key(
        self, name: str, muscle_group: Optional[str]
    ) -> Optional[Dict[str, Any]]:
        """Find the row for an exact, case-sensitive `(name, muscle_group)` pair."""
        try:
            query = self._query().select("*").eq("name", name)
            if muscle_group is None:
                query = query.is_("muscle_group", "null")
            else:
                query = query.eq("muscle_group", muscle_group)
            result = query.limit(1).execute()
        except Exception as e:
            logger.exception(f"Error finding exercise name={name!r} muscle_group={muscle_group!r}")
            raise CatalogStoreError(f"Failed to look up exercise '{name}': {e}") from e

        if result.data:
            return result.data[0]
        return None

    def find_by_external_id(self, external_id: str) -> Optional[Dict[str, Any]]:
        """Find the row carrying a provider id."""
        try:
            result = self._query().select("*").eq("external_id", external_id).limit(1).execute()
        except Exception as e:
            logger.exception(f"Error finding exercise by external_id {external_id}")
            raise CatalogStoreError(f"Failed to look up external id '{external_id}': {e}") from e

        if result.data:
            return result.data[0]
        return None

    def get_by_id(self, row_id: Any) -> Optional[Dict[str, Any]]:
        """Get a row by its local primary key."""
        try:
            result = self._query().select("*").eq("id", row_id).limit(1).execute()
        except Exception as e:
            logger.exception(f"Error fetching exercise by id {row_id}")
            raise CatalogStoreError(f"Failed to fetch exercise {row_id}: {e}") from e

        if result.data:
            return result.data[0]
        return None

    def create(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a new catalog row and return it with its generated id."""
        try:
            result = self._query().insert(row).execute()
        except Exception as e:
            logger.exception(f"Error creating exercise {row.get('name')!r}")
            raise CatalogStoreError(f"Failed to create exercise '{row.get('name')}': {e}") from e

        if not result.data:
            raise CatalogStoreError(f"Insert returned no row for '{row.get('name')}'")
        return result.data[0]

    def update_by_id(self, row_id: Any, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Overwrite the given columns of an existing row."""
        payload = dict(fields)
        payload["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            result = self._query().update(payload).eq("id", row_id).execute()
        except Exception as e:
            logger.exception(f"Error updating exercise {row_id}")
            raise CatalogStoreError(f"Failed to update exercise {row_id}: {e}") from e

        if not result.data:
            raise CatalogStoreError(f"Update matched no row for id {row_id}")
        return result.data[0]

    def list_all(self, limit: int = 50, offset: int = 0) -> List[Dict[str, Any]]:
        """List rows ordered by id."""
        try:
            result = (
                self._query()
                .select("*")
                .order("id")
                .range(offset, offset + limit - 1)
                .execute()
            )
        except Exception as e:
            logger.exception("Error listing exercises")
            raise CatalogStoreError(f"Failed to list exercises: {e}") from e

        return result.data or []

    # =========================================================================
    # Import run lock
    # =========================================================================

    def _locks(self):
        return self._client.table(self._lock_table)

    def acquire_import_lock(self, name: str, owner: str, ttl_seconds: float) -> bool:
        """Insert the lock row, taking over an expired one; False if it is held."""
        now = datetime.now(timezone.utc)
        try:
            self._locks().delete().eq("name", name).lt("expires_at", now.isoformat()).execute()
            self._locks().insert({
                "name": name,
                "owner": owner,
                "acquired_at": now.isoformat(),
                "expires_at": (now + timedelta(seconds=ttl_seconds)).isoformat(),
            }).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                logger.warning(f"Import lock '{name}' is held by another run")
                return False
            logger.exception(f"Error acquiring import lock '{name}'")
            raise CatalogStoreError(f"Failed to acquire import lock '{name}': {e}") from e
        except Exception as e:
            logger.exception(f"Error acquiring import lock '{name}'")
            raise CatalogStoreError(f"Failed to acquire import lock '{name}': {e}") from e

        logger.info(f"Import lock '{name}' acquired by {owner}")
        return True

    def release_import_lock(self, name: str, owner: str) -> None:
        """Delete the lock row if owner still holds it."""
        try:
            self._locks().delete().eq("name", name).eq("owner", owner).execute()
        except Exception as e:
            logger.exception(f"Error releasing import lock '{name}'")
            raise CatalogStoreError(f"Failed to release import lock '{name}': {e}") from e
