"""
Remote elevation service client.

Wire contract:
    request  {"locations": [{"latitude": ..., "longitude": ...}, ...]}
    response {"results": [{"latitude": ..., "longitude": ..., "elevation": ...}, ...]}

One request per batch, no retries. Any failure raises ElevationServiceError.
"""

import logging
from typing import List, Optional, Sequence

import httpx

from trip.config import Settings
from .errors import ElevationServiceError

logger = logging.getLogger(__name__)


class RemoteElevationClient:
    """
    Async client for an Open-Elevation compatible service.

    Usage:
        client = RemoteElevationClient.from_settings(settings)
        results = await client.lookup([{"latitude": 51.5, "longitude": -0.13}])
    """

    def __init__(
        self,
        url: str,
        method: str = "POST",
        user_agent: str = "trip",
        referer: str = "",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.url = url
        self.method = method
        self.user_agent = user_agent
        self.referer = referer
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "RemoteElevationClient":
        user_agent = f"trip/{settings.app_version} {settings.elevation_provider_user_agent_info}".strip()
        return cls(
            url=settings.elevation_provider_url,
            method=settings.elevation_provider_method,
            user_agent=user_agent,
            referer=settings.elevation_provider_referer_info,
            timeout=settings.elevation_timeout_seconds,
            transport=transport,
        )

    def _headers(self) -> dict:
        headers = {"User-Agent": self.user_agent}
        if self.referer:
            headers["Referer"] = self.referer
        return headers

    async def lookup(self, locations: Sequence[dict]) -> List[dict]:
        """
        Fetch elevations for a batch of locations.

        Raises:
            ElevationServiceError: On transport failure, a non-200 status,
                an unparsable body or a body without a results list
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport
            ) as client:
                response = await client.request(
                    method=self.method,
                    url=self.url,
                    json={"locations": list(locations)},
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            logger.error(f"Failure fetching elevation data from remote server: {e}")
            raise ElevationServiceError(f"Failure fetching elevation data: {e}") from e

        if response.status_code != 200:
            logger.warning(
                f"Response status code {response.status_code} fetching elevation data"
            )
            raise ElevationServiceError(
                f"Elevation service error: {response.status_code} - {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Failure parsing elevation data")
            raise ElevationServiceError("Failure parsing elevation data") from e

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            logger.warning("No or invalid results returned from elevation service")
            raise ElevationServiceError("No or invalid results returned from elevation service")

        return results
