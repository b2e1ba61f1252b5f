"""
HTTP client for the ExerciseDB provider (RapidAPI).

This client fetches raw exercise payloads by name, body part, target muscle,
equipment, id, or as a full listing, plus demonstration GIFs. Every call
carries the configured timeout and provider auth headers; nothing is
retried here.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from application.exceptions import ExerciseNotFound, UpstreamError, UpstreamTimeout
from application.ports import CriteriaKind

logger = logging.getLogger(__name__)

CRITERIA_PATHS = {
    CriteriaKind.NAME: "/exercises/name/{value}",
    CriteriaKind.BODY_PART: "/exercises/bodyPart/{value}",
    CriteriaKind.TARGET: "/exercises/target/{value}",
    CriteriaKind.EQUIPMENT: "/exercises/equipment/{value}",
    CriteriaKind.NONE: "/exercises",
}


@dataclass(frozen=True)
class UpstreamConfig:
    """Connection settings for the provider, built once at startup."""

    base_url: str
    api_key: str
    api_host: str
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Any, timeout: float) -> "UpstreamConfig":
        """Build a config from application Settings with an explicit timeout."""
        return cls(
            base_url=settings.exercisedb_base_url.rstrip("/"),
            api_key=settings.exercisedb_key or "",
            api_host=settings.exercisedb_host,
            timeout=timeout,
        )

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "x-rapidapi-key": self.api_key,
            "x-rapidapi-host": self.api_host,
        }


def _encode(value: str) -> str:
    return quote(value, safe="")


class ExerciseDBClient:
    """
    HTTP client for ExerciseDB communication.

    Implements the ExerciseProvider port.
    """

    def __init__(self, config: UpstreamConfig):
        """
        Initialize the client.

        Args:
            config: Provider base URL, auth headers and request timeout
        """
        self._config = config

    @property
    def config(self) -> UpstreamConfig:
        return self._config

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> httpx.Response:
        """Issue one GET and translate transport failures and non-2xx statuses."""
        url = f"{self._config.base_url}{path}"

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout,
                follow_redirects=True,
            ) as client:
                response = await client.get(url, headers=self._config.headers, params=params)
        except httpx.TimeoutException as e:
            logger.error(f"ExerciseDB timeout on {path}: {e}")
            raise UpstreamTimeout(
                f"ExerciseDB request timed out after {self._config.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"ExerciseDB unavailable on {path}: {e}")
            raise UpstreamError(
                f"ExerciseDB is not available at {self._config.base_url}"
            ) from e

        if not 200 <= response.status_code < 300:
            logger.error(
                f"ExerciseDB error on {path}: {response.status_code} - {response.text}"
            )
            raise UpstreamError(
                f"ExerciseDB returned {response.status_code}",
                response.status_code,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                "ExerciseDB returned a non-JSON body", response.status_code
            ) from e

    async def fetch_by_criteria(
        self, kind: CriteriaKind, value: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Fetch every exercise matching one criteria.

        Args:
            kind: Provider listing to query (CriteriaKind.NONE = full listing)
            value: Criteria value, URL-path encoded

        Returns:
            Raw provider records; an unexpected non-list body yields []

        Raises:
            UpstreamTimeout: If the request timed out
            UpstreamError: If ExerciseDB is unreachable or returns non-2xx
        """
        if kind == CriteriaKind.NONE:
            path = CRITERIA_PATHS[kind]
        else:
            if not value:
                raise ValueError(f"A value is required for criteria '{kind.value}'")
            path = CRITERIA_PATHS[kind].format(value=_encode(value))

        data = self._json(await self._get(path))
        if not isinstance(data, list):
            logger.warning(f"ExerciseDB returned a non-list body for {path}")
            return []
        return [item for item in data if isinstance(item, dict)]

    async def fetch_by_id(self, external_id: str) -> Dict[str, Any]:
        """
        Fetch one exercise by its provider id.

        Raises:
            ExerciseNotFound: On 404 or a body without an id
            UpstreamTimeout: If the request timed out
            UpstreamError: If ExerciseDB is unreachable or returns non-2xx
        """
        path = f"/exercises/exercise/{_encode(external_id)}"
        try:
            response = await self._get(path)
        except UpstreamError as e:
            if e.status_code == 404:
                raise ExerciseNotFound(external_id) from e
            raise

        data = self._json(response)
        if not isinstance(data, dict) or not data.get("id"):
            raise ExerciseNotFound(external_id)
        return data

    async def fetch_image(self, external_id: str, resolution: str = "180") -> bytes:
        """
        Fetch the demonstration GIF for an exercise.

        Raises:
            UpstreamTimeout: If the request timed out
            UpstreamError: If ExerciseDB is unreachable or returns non-2xx
        """
        response = await self._get(
            "/image",
            params={"resolution": resolution, "exerciseId": external_id},
        )
        return response.content
