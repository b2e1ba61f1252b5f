"""
Fake CatalogStore for testing.

This module provides an in-memory fake implementation of CatalogStore
for unit testing without database access.
"""
import copy
import threading
import time
from typing import Any, Callable, Dict, List, Optional

from application.exceptions import CatalogStoreError


class FakeCatalogStore:
    """
    In-memory fake implementation of CatalogStore for testing.

    Rows get sequential integer ids starting at 1, like the real table.
    Natural key lookups are exact and case-sensitive, and `create` rejects a
    second row with the same `(name, muscle_group)` like the unique index.
    Import locks expire against `clock`.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1
        self._clock = clock
        self._lock_guard = threading.Lock()
        self.locks: Dict[str, Dict[str, Any]] = {}
        self.create_calls = 0
        self.update_calls = 0

    # =========================================================================
    # Test Helpers
    # =========================================================================

    def seed(self, rows: List[Dict[str, Any]]) -> None:
        """Add rows directly, assigning ids where missing."""
        for row in rows:
            row = copy.deepcopy(row)
            if "id" not in row:
                row["id"] = self._next_id
            self._rows[row["id"]] = row
            self._next_id = max(self._next_id, row["id"] + 1)

    def reset(self) -> None:
        """Clear all data."""
        self._rows.clear()
        self._next_id = 1
        self.locks.clear()
        self.create_calls = 0
        self.update_calls = 0

    @property
    def rows(self) -> List[Dict[str, Any]]:
        """All stored rows ordered by id."""
        return [copy.deepcopy(self._rows[k]) for k in sorted(self._rows)]

    # =========================================================================
    # Protocol Methods
    # =========================================================================

    def _row_with_natural_key(
        self, name: Optional[str], muscle_group: Optional[str]
    ) -> Optional[Dict[str, Any]]:
        for key in sorted(self._rows):
            row = self._rows[key]
            if row.get("name") == name and row.get("muscle_group") == muscle_group:
                return row
        return None

    def find_by_natural_key(
        self, name: str, muscle_group: Optional[str]
    ) -> Optional[Dict[str, Any]]:
        row = self._row_with_natural_key(name, muscle_group)
        return copy.deepcopy(row) if row else None

    def find_by_external_id(self, external_id: str) -> Optional[Dict[str, Any]]:
        for key in sorted(self._rows):
            row = self._rows[key]
            if row.get("external_id") == external_id:
                return copy.deepcopy(row)
        return None

    def get_by_id(self, row_id: Any) -> Optional[Dict[str, Any]]:
        row = self._rows.get(row_id)
        return copy.deepcopy(row) if row else None

    def create(self, row: Dict[str, Any]) -> Dict[str, Any]:
        self.create_calls += 1
        if self._row_with_natural_key(row.get("name"), row.get("muscle_group")):
            raise CatalogStoreError(
                f"duplicate key value violates unique constraint: "
                f"(name, muscle_group)=({row.get('name')}, {row.get('muscle_group')})"
            )
        stored = copy.deepcopy(row)
        stored["id"] = self._next_id
        self._next_id += 1
        self._rows[stored["id"]] = stored
        return copy.deepcopy(stored)

    def update_by_id(self, row_id: Any, fields: Dict[str, Any]) -> Dict[str, Any]:
        self.update_calls += 1
        self._rows[row_id].update(copy.deepcopy(fields))
        return copy.deepcopy(self._rows[row_id])

    def list_all(self, limit: int = 50, offset: int = 0) -> List[Dict[str, Any]]:
        return self.rows[offset:offset + limit]

    def acquire_import_lock(self, name: str, owner: str, ttl_seconds: float) -> bool:
        with self._lock_guard:
            now = self._clock()
            held = self.locks.get(name)
            if held and held["expires_at"] > now:
                return False
            self.locks[name] = {"owner": owner, "expires_at": now + ttl_seconds}
            return True

    def release_import_lock(self, name: str, owner: str) -> None:
        with self._lock_guard:
            held = self.locks.get(name)
            if held and held["owner"] == owner:
                del self.locks[name]
