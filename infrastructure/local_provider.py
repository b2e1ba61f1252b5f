"""
ExerciseProvider served from the local catalog store.

Used when EXERCISE_SOURCE=local so the read path does not depend on the
third-party provider. Stored rows are rendered with provider field names,
so the query use case normalizes them exactly like upstream payloads.
Store calls are synchronous and run in the threadpool.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from starlette.concurrency import run_in_threadpool

from application.exceptions import ExerciseNotFound, UpstreamError
from application.ports import CatalogStore, CriteriaKind
from domain.converters import db_row_to_upstream_shape

logger = logging.getLogger(__name__)

PAGE_SIZE = 500


def _equals(field: str, value: str) -> Callable[[Dict[str, Any]], bool]:
    wanted = value.lower()
    return lambda item: (item.get(field) or "").lower() == wanted


def _contains(field: str, value: str) -> Callable[[Dict[str, Any]], bool]:
    needle = value.lower()
    return lambda item: needle in (item.get(field) or "").lower()


class LocalCatalogProvider:
    """
    Catalog-store implementation of the ExerciseProvider protocol.

    Criteria lookups behave like the provider's path lookups: name is a
    case-insensitive substring match, the categorical criteria are
    case-insensitive equality.
    """

    def __init__(self, catalog_store: CatalogStore, page_size: int = PAGE_SIZE):
        self._store = catalog_store
        self._page_size = page_size

    def _all_rows(self) -> List[Dict[str, Any]]:
        rows: List[Dict[str, Any]] = []
        offset = 0
        while True:
            page = self._store.list_all(limit=self._page_size, offset=offset)
            rows.extend(page)
            if len(page) < self._page_size:
                return rows
            offset += self._page_size

    async def fetch_by_criteria(
        self, kind: CriteriaKind, value: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        rows = await run_in_threadpool(self._all_rows)
        items = [db_row_to_upstream_shape(row) for row in rows]
        if kind == CriteriaKind.NONE:
            return items
        if not value:
            raise ValueError(f"A value is required for criteria '{kind.value}'")

        if kind == CriteriaKind.NAME:
            matches = _contains("name", value)
        else:
            matches = _equals(kind.value, value)
        return [item for item in items if matches(item)]

    async def fetch_by_id(self, external_id: str) -> Dict[str, Any]:
        row = await run_in_threadpool(self._store.find_by_external_id, external_id)
        if not row:
            raise ExerciseNotFound(external_id)
        return db_row_to_upstream_shape(row)

    async def fetch_image(self, external_id: str, resolution: str = "180") -> bytes:
        raise UpstreamError("Images are not served from the local catalog", 501)
