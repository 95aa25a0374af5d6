"""Guardian Open Platform search client.

Article lookups are best-effort: a missing key, a non-2xx response or a
network failure all come back as None, never as an exception.
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

GUARDIAN_API_BASE = "https://content.guardianapis.com"
GUARDIAN_KEY_URL = "https://open-platform.theguardian.com/access/"

SHOW_FIELDS = "headline,byline,trailText,body,thumbnail"
DEFAULT_SECTION = "football"
DEFAULT_PAGE_SIZE = 5


class GuardianClient:
    """Async HTTP client for the Guardian content API."""

    def __init__(
        self,
        api_key: str | None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        kwargs: dict[str, Any] = {"base_url": GUARDIAN_API_BASE, "timeout": timeout}
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def search(self, query: str, options: dict[str, Any] | None = None) -> dict | None:
        """Run a /search query and return the payload's ``response`` object.

        Args:
            query: Guardian query string, e.g. '"Wolves" AND "Chelsea"'.
            options: Extra Guardian parameters (tag, order-by, page-size, ...).
                They override the section and page-size defaults.

        Returns:
            The ``response`` dict (results, total, ...) or None when no data
            could be obtained.
        """
        if not self._api_key:
            logger.warning("No Guardian API key found. Get one at: %s", GUARDIAN_KEY_URL)
            return None

        params: dict[str, Any] = {
            "q": query,
            "section": DEFAULT_SECTION,
            "page-size": DEFAULT_PAGE_SIZE,
            **(options or {}),
            "api-key": self._api_key,
            "show-fields": SHOW_FIELDS,
        }

        logger.info("Fetching Guardian: %s", query)
        try:
            response = await self._client.get("/search", params=params)
        except httpx.HTTPError as e:
            logger.error("Error fetching Guardian search %r: %s", query, e)
            return None

        if not response.is_success:
            logger.error("Guardian API Error: %s %s", response.status_code, response.reason_phrase)
            return None

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Guardian returned invalid JSON for %r: %s", query, e)
            return None

        return data.get("response") if isinstance(data, dict) else None
