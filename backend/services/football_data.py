"""football-data.org v4 client: Premier League standings, matches, scorers.

Payloads are returned exactly as the API sends them; nothing here knows
their schema. HTTP and network failures become typed errors from
errors.py so routes can report them uniformly.
"""

import logging
from typing import Any

import httpx

from errors import (
    REGISTER_URL,
    AuthOrRateLimitError,
    InvalidPayloadError,
    RateLimitError,
    TransportError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

API_BASE = "https://api.football-data.org/v4"
COMPETITION = "PL"


class FootballDataClient:
    """Async HTTP client for football-data.org."""

    def __init__(
        self,
        api_key: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 15.0,
    ) -> None:
        self._api_key = api_key
        kwargs: dict[str, Any] = {"base_url": API_BASE, "timeout": timeout}
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def fetch_resource(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a resource path (e.g. /competitions/PL/standings) and return its JSON."""
        if not self._api_key:
            logger.warning("No football-data.org API key found. Get one at: %s", REGISTER_URL)

        logger.info("Fetching: %s", path)
        try:
            response = await self._client.get(
                path,
                params=params,
                headers={"X-Auth-Token": self._api_key or ""},
            )
        except httpx.TransportError as e:
            logger.error("Error fetching %s: %s", path, e)
            raise TransportError(str(e) or type(e).__name__) from e
        except httpx.HTTPError as e:
            logger.error("Unreadable response for %s: %s", path, e)
            raise InvalidPayloadError(str(e) or type(e).__name__) from e

        if response.status_code == 403:
            raise AuthOrRateLimitError()
        if response.status_code == 429:
            raise RateLimitError()
        if not response.is_success:
            logger.error("API Error: %s %s", response.status_code, response.reason_phrase)
            raise UpstreamError(response.status_code, response.reason_phrase)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Non-JSON body for %s: %s", path, e)
            raise InvalidPayloadError(str(e)) from e

        logger.info("Success: %s", path)
        return data
