"""Get-or-fetch over the TTL cache for every football-data.org resource."""

import logging
from collections.abc import Awaitable, Callable
from datetime import date
from typing import Any

from services.cache import TTLCache
from services.football_data import COMPETITION, FootballDataClient

logger = logging.getLogger(__name__)

# Seconds. Live data goes stale quickly; metadata and finished seasons barely change.
RESOURCE_TTLS = {
    "standings": 300,
    "matches": 180,
    "scorers": 600,
    "teams": 3600,
    "competition": 86400,
    "standings_last": 86400,
    "matches_last": 86400,
}

_COMPETITION_PATH = f"/competitions/{COMPETITION}"


def last_season_year(today: date | None = None) -> int:
    """Starting year of the most recently completed August–May season.

    From August onwards the previous season is the one that started last
    calendar year; before August it started two years ago.
    """
    today = today or date.today()
    if today.month >= 8:
        return today.year - 1
    return today.year - 2


def register_resources(cache: TTLCache) -> None:
    for key, ttl in RESOURCE_TTLS.items():
        cache.register(key, ttl)


class CachedFetcher:
    def __init__(self, cache: TTLCache, client: FootballDataClient):
        self.cache = cache
        self.client = client

    async def resolve(self, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        """Return the cached value for ``key`` or fetch, store and return it.

        A failing fetch propagates and leaves the cache untouched.
        """
        if self.cache.is_valid(key):
            logger.info("Cache hit: %s", key)
            return self.cache.get(key)

        logger.info("Cache miss: %s, fetching...", key)
        data = await fetch()
        self.cache.set(key, data)
        return data

    def _resource(self, key: str, path: str, params: dict | None = None) -> Awaitable[Any]:
        return self.resolve(key, lambda: self.client.fetch_resource(path, params))

    # ---------------------------------------------------------------------------
    # Current season
    # ---------------------------------------------------------------------------

    async def standings(self) -> Any:
        return await self._resource("standings", f"{_COMPETITION_PATH}/standings")

    async def matches(self) -> Any:
        return await self._resource("matches", f"{_COMPETITION_PATH}/matches")

    async def scorers(self) -> Any:
        return await self._resource("scorers", f"{_COMPETITION_PATH}/scorers")

    async def teams(self) -> Any:
        return await self._resource("teams", f"{_COMPETITION_PATH}/teams")

    async def competition(self) -> Any:
        return await self._resource("competition", _COMPETITION_PATH)

    # ---------------------------------------------------------------------------
    # Last season
    # ---------------------------------------------------------------------------

    async def last_season_standings(self, today: date | None = None) -> Any:
        season = last_season_year(today)
        return await self._resource(
            "standings_last", f"{_COMPETITION_PATH}/standings", {"season": season}
        )

    async def last_season_matches(self, today: date | None = None) -> Any:
        season = last_season_year(today)
        return await self._resource(
            "matches_last", f"{_COMPETITION_PATH}/matches", {"season": season}
        )

    # ---------------------------------------------------------------------------
    # Per-match
    # ---------------------------------------------------------------------------

    async def head_to_head(self, match_id: str, limit: int = 10) -> Any:
        return await self._resource(
            f"head2head:{match_id}:{limit}",
            f"/matches/{match_id}/head2head",
            {"limit": limit},
        )
