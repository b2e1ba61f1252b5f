"""
Exercise Provider Interface (Port).

This module defines the abstract interface for fetching exercise payloads
from the catalog's source of truth. The production implementation talks to
the ExerciseDB API over HTTP; a local implementation serves the same
contract from the catalog store.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol


class CriteriaKind(str, Enum):
    """Upstream query strategy."""

    NAME = "name"
    BODY_PART = "bodyPart"
    TARGET = "target"
    EQUIPMENT = "equipment"
    NONE = "none"


class ExerciseProvider(Protocol):
    """
    Abstract interface for the upstream exercise provider.

    Implementations never retry; retry policy belongs to the caller.
    Returned payloads keep provider field names and are normalized by
    domain.converters.normalize_upstream_record.
    """

    async def fetch_by_criteria(
        self, kind: CriteriaKind, value: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Fetch every exercise matching one criteria.

        Args:
            kind: Which provider listing to query (NONE = full listing)
            value: Criteria value; ignored for CriteriaKind.NONE

        Returns:
            Raw provider records in provider order

        Raises:
            UpstreamTimeout: If the call exceeded its deadline
            UpstreamError: If the provider failed or returned non-2xx
        """
        ...

    async def fetch_by_id(self, external_id: str) -> Dict[str, Any]:
        """
        Fetch one exercise by its provider id.

        Raises:
            ExerciseNotFound: If the provider does not know the id
            UpstreamTimeout: If the call exceeded its deadline
            UpstreamError: If the provider failed or returned non-2xx
        """
        ...

    async def fetch_image(self, external_id: str, resolution: str = "180") -> bytes:
        """
        Fetch the demonstration GIF for an exercise.

        Raises:
            UpstreamTimeout: If the call exceeded its deadline
            UpstreamError: If the provider failed or returned non-2xx
        """
        ...
