"""
Catalog Store Interface (Port).

This module defines the abstract interface for the local exercise catalog.
Each call is assumed transactional for a single row; the find-then-write
upsert sequence is not atomic. It is serialized by the store-level import
lock and backed by a unique index on `(name, muscle_group)`.
"""
from typing import Any, Dict, List, Optional, Protocol


class CatalogStore(Protocol):
    """
    Abstract interface for persisting catalog exercises.

    Rows are dictionaries shaped by domain.converters.record_to_db_row plus
    an `id` primary key. Implementations raise CatalogStoreError on failure.
    """

    def find_by_natural_key(
        self, name: str, muscle_group: Optional[str]
    ) -> Optional[Dict[str, Any]]:
        """
        Find the row for a `(name, muscle_group)` pair.

        Matching is exact and case-sensitive. A None muscle_group only
        matches rows whose muscle_group is NULL.

        Returns:
            Row dictionary or None if not found
        """
        ...

    def find_by_external_id(self, external_id: str) -> Optional[Dict[str, Any]]:
        """Find the row carrying a provider id, or None."""
        ...

    def get_by_id(self, row_id: Any) -> Optional[Dict[str, Any]]:
        """Get a row by its local primary key, or None."""
        ...

    def create(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new row.

        Returns:
            The stored row including its generated id
        """
        ...

    def update_by_id(self, row_id: Any, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Overwrite the given columns of an existing row.

        Returns:
            The stored row after the update
        """
        ...

    def list_all(self, limit: int = 50, offset: int = 0) -> List[Dict[str, Any]]:
        """List rows ordered by id."""
        ...

    def acquire_import_lock(self, name: str, owner: str, ttl_seconds: float) -> bool:
        """
        Take the named run lock shared by every importer process.

        An expired lock is taken over. The lock expires ttl_seconds after it
        is taken, so a crashed run cannot block later runs forever.

        Returns:
            True if the lock is now held by owner, False if another owner holds it
        """
        ...

    def release_import_lock(self, name: str, owner: str) -> None:
        """Release the named run lock if owner still holds it."""
        ...
