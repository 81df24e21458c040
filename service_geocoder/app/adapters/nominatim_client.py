"""
Nominatim search client for Geocoder Service.
"""

from typing import List, Optional

import httpx
from pydantic import ValidationError

from shared.config import NOMINATIM_SEARCH_URL
from shared.logging import get_logger
from ..lookup.errors import UpstreamError
from ..lookup.models import PlaceResult, parse_results


class NominatimClient:
    """Client for the upstream place search endpoint."""

    def __init__(
        self,
        base_url: str = NOMINATIM_SEARCH_URL,
        timeout: float = 10.0,
        user_agent: str = "geocoder-cache/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self.logger = get_logger("geocoder.upstream")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            transport=self._transport,
        )

    async def start(self):
        """Open the shared HTTP client."""
        if self._client is None:
            self._client = self._build_client()

    async def stop(self):
        """Close the shared HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def search_url(self, escaped_query: str) -> str:
        """Build the search URL; ``escaped_query`` is inserted as-is."""
        return f"{self.base_url}?q={escaped_query}&format=json"

    async def fetch(self, escaped_query: str) -> List[PlaceResult]:
        """Search for an already URL-escaped query."""
        if self._client is None:
            await self.start()

        url = self.search_url(escaped_query)
        try:
            response = await self._client.get(url)
        except httpx.HTTPError as exc:
            self.logger.error("Upstream request failed", url=url, error=str(exc))
            raise UpstreamError(str(exc) or type(exc).__name__, details={"url": url}) from exc

        if not response.is_success:
            self.logger.error(
                "Upstream returned unexpected status",
                url=url,
                status_code=response.status_code
            )
            raise UpstreamError(
                f"Unexpected status {response.status_code}",
                details={"url": url, "status_code": response.status_code}
            )

        try:
            results = parse_results(response.json())
        except (ValueError, ValidationError) as exc:
            self.logger.error("Upstream body is not a place list", url=url, error=str(exc))
            raise UpstreamError(
                "Malformed upstream response",
                details={"url": url, "status_code": response.status_code}
            ) from exc

        self.logger.debug("Upstream search completed", url=url, results=len(results))
        return results
