"""
Query Exercises Use Case.

Turns a client's free-text and structured filters into a single upstream
call plus local refinement and pagination.

Strategy selection is a strict priority chain evaluated once per call:
    q -> name, bodyPart -> bodyPart, target -> target,
    equipment -> equipment, otherwise the full listing.
Every other supplied filter is applied locally to the returned records.
"""
import logging
import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from application.ports import CriteriaKind, ExerciseProvider
from domain.converters import RawUpstreamRecord, normalize_upstream_record
from domain.models import ExerciseRecord

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 50
DEFAULT_OFFSET = 0


def _parse_number(value: Any) -> Optional[float]:
    """Best-effort numeric parse; returns None for anything non-numeric or NaN."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if math.isnan(number):
        return None
    return number


def clamp_limit(value: Any) -> int:
    """Coerce a page size into [1, 50]; missing or invalid input means 20."""
    parsed = _parse_number(value)
    if parsed is None:
        return DEFAULT_LIMIT
    if isinstance(parsed, float) and math.isinf(parsed):
        return MAX_LIMIT if parsed > 0 else MIN_LIMIT
    return max(MIN_LIMIT, min(int(parsed), MAX_LIMIT))


def clamp_offset(value: Any) -> int:
    """Coerce an offset to >= 0; missing, invalid or +inf input means 0."""
    parsed = _parse_number(value)
    if parsed is None or (isinstance(parsed, float) and math.isinf(parsed)):
        return DEFAULT_OFFSET
    return max(int(parsed), 0)


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


@dataclass
class SearchQuery:
    """Trimmed client filters plus effective pagination."""
    q: str = ""
    body_part: str = ""
    target: str = ""
    equipment: str = ""
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    @classmethod
    def from_params(
        cls,
        q: Optional[str] = None,
        body_part: Optional[str] = None,
        target: Optional[str] = None,
        equipment: Optional[str] = None,
        limit: Any = None,
        offset: Any = None,
    ) -> "SearchQuery":
        return cls(
            q=_clean(q),
            body_part=_clean(body_part),
            target=_clean(target),
            equipment=_clean(equipment),
            limit=clamp_limit(limit),
            offset=clamp_offset(offset),
        )


@dataclass
class SearchResult:
    """One page of the locally refined upstream result."""
    total: int
    items: List[ExerciseRecord] = field(default_factory=list)
    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET


def select_strategy(query: SearchQuery) -> Tuple[CriteriaKind, Optional[str]]:
    """Pick the single upstream criteria for a query (first match wins)."""
    if query.q:
        return CriteriaKind.NAME, query.q
    if query.body_part:
        return CriteriaKind.BODY_PART, query.body_part
    if query.target:
        return CriteriaKind.TARGET, query.target
    if query.equipment:
        return CriteriaKind.EQUIPMENT, query.equipment
    return CriteriaKind.NONE, None


def _provider_text(raw: RawUpstreamRecord, key: str) -> Optional[str]:
    value = raw.get(key)
    return None if value is None else str(value)


def refine(
    records: List[RawUpstreamRecord],
    query: SearchQuery,
    strategy: CriteriaKind,
) -> List[RawUpstreamRecord]:
    """
    Apply every filter not already used as the upstream strategy.

    Filters run on the provider's own fields, before normalization, so a
    record without a `target` never matches a target filter through the
    bodyPart fallback. Order: body part, equipment, target (exact match),
    then name (case-insensitive substring). A record must satisfy all of them.
    """
    predicates = []
    if query.body_part and strategy != CriteriaKind.BODY_PART:
        predicates.append(lambda r: _provider_text(r, "bodyPart") == query.body_part)
    if query.equipment and strategy != CriteriaKind.EQUIPMENT:
        predicates.append(lambda r: _provider_text(r, "equipment") == query.equipment)
    if query.target and strategy != CriteriaKind.TARGET:
        predicates.append(lambda r: _provider_text(r, "target") == query.target)
    if query.q and strategy != CriteriaKind.NAME:
        needle = query.q.lower()
        predicates.append(lambda r: needle in (_provider_text(r, "name") or "").lower())

    return [r for r in records if all(p(r) for p in predicates)]


class ExerciseQueryUseCase:
    """
    Use case for reading the exercise catalog.

    Stateless and request scoped: each call re-hits the provider, nothing
    is cached between calls.
    """

    def __init__(self, provider: ExerciseProvider):
        """
        Initialize with required dependencies.

        Args:
            provider: Upstream (or local) exercise provider
        """
        self._provider = provider

    async def search(
        self,
        q: Optional[str] = None,
        body_part: Optional[str] = None,
        target: Optional[str] = None,
        equipment: Optional[str] = None,
        limit: Any = None,
        offset: Any = None,
    ) -> SearchResult:
        """
        Search exercises with one upstream call and local refinement.

        Args:
            q: Free-text name search
            body_part: Body part filter
            target: Target muscle filter
            equipment: Equipment filter
            limit: Page size, clamped to [1, 50] (default 20)
            offset: Page offset, clamped to >= 0 (default 0)

        Returns:
            SearchResult where total counts the refined records

        Raises:
            UpstreamTimeout: If the provider call timed out
            UpstreamError: If the provider call failed
        """
        query = SearchQuery.from_params(q, body_part, target, equipment, limit, offset)
        kind, value = select_strategy(query)

        raw_records = await self._provider.fetch_by_criteria(kind, value)
        filtered = [
            normalize_upstream_record(raw) for raw in refine(raw_records, query, kind)
        ]

        logger.debug(
            f"Exercise search strategy={kind.value} value={value!r} "
            f"upstream={len(raw_records)} filtered={len(filtered)}"
        )

        return SearchResult(
            total=len(filtered),
            items=filtered[query.offset:query.offset + query.limit],
            limit=query.limit,
            offset=query.offset,
        )

    async def get_by_external_id(self, external_id: str) -> ExerciseRecord:
        """
        Fetch one exercise directly from the provider.

        Raises:
            ValueError: If the id is blank
            ExerciseNotFound: If the provider does not know the id
            UpstreamTimeout / UpstreamError: On provider failure
        """
        cleaned = _clean(external_id)
        if not cleaned:
            raise ValueError("external_id is required")
        raw = await self._provider.fetch_by_id(cleaned)
        return normalize_upstream_record(raw)

    async def get_image(self, external_id: str, resolution: str = "180") -> bytes:
        """Fetch the demonstration GIF for an exercise."""
        cleaned = _clean(external_id)
        if not cleaned:
            raise ValueError("external_id is required")
        return await self._provider.fetch_image(cleaned, resolution=_clean(resolution) or "180")
