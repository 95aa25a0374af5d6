"""Guardian article lookup for fixtures and clubs.

Match search walks an ordered chain of query strategies and stops at the
first one that returns anything:

    exact        "Man City" AND "Arsenal"              names as supplied
    full-names   "Manchester City" AND "Arsenal"       only if a name changed
    unquoted     Manchester City AND Arsenal           no phrase matching
    variation-i  "Man City" AND "Arsenal"              i-th alias of each club

Every search is cached for 30 minutes per (query, options), so re-running a
strategy for the same fixture does not hit the Guardian again.
"""

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from services.cache import TTLCache
from services.guardian import GuardianClient
from services.team_names import variants_for

logger = logging.getLogger(__name__)

ARTICLE_TTL_SECONDS = 1800
PAGE_SIZE = 5

PREVIEW_TAGS = "tone/minutebyminute,football/series/match-previews"
REPORT_TAGS = "tone/matchreports"

NO_STRATEGY = "none"


@dataclass
class SearchResult:
    articles: list[dict] = field(default_factory=list)
    total: int = 0
    strategy_used: str = NO_STRATEGY


def _phrase_and(first: str, second: str) -> str:
    return f'"{first}" AND "{second}"'


def match_strategies(home_team: str, away_team: str) -> Iterator[tuple[str, str]]:
    """Yield (strategy name, query) pairs in the order they should be tried."""
    home_variants = variants_for(home_team)
    away_variants = variants_for(away_team)
    home_full, away_full = home_variants[0], away_variants[0]

    yield "exact", _phrase_and(home_team, away_team)

    if home_full != home_team or away_full != away_team:
        yield "full-names", _phrase_and(home_full, away_full)

    yield "unquoted", f"{home_full} AND {away_full}"

    longest = max(len(home_variants), len(away_variants))
    for i in range(1, longest):
        home_name = home_variants[i] if i < len(home_variants) else home_full
        away_name = away_variants[i] if i < len(away_variants) else away_full
        yield f"variation-{i}", _phrase_and(home_name, away_name)


class ArticleSearchEngine:
    def __init__(self, cache: TTLCache, client: GuardianClient):
        self.cache = cache
        self.client = client

    async def search(self, query: str, options: dict[str, Any]) -> dict | None:
        """Cached Guardian search; a None (no data) response is never cached."""
        key = f"articles:{query}-{json.dumps(options, sort_keys=True)}"
        if self.cache.is_valid(key):
            logger.info("Guardian cache hit: %s", query)
            return self.cache.get(key)

        response = await self.client.search(query, options)
        if response is not None:
            self.cache.set(key, response, ttl=ARTICLE_TTL_SECONDS)
        return response

    async def find_match_articles(
        self, home_team: str, away_team: str, kind: str = "report"
    ) -> SearchResult:
        """Previews or reports for a fixture; empty result when nothing matches."""
        options = {
            "tag": PREVIEW_TAGS if kind == "preview" else REPORT_TAGS,
            "page-size": PAGE_SIZE,
            "order-by": "newest",
        }

        for strategy, query in match_strategies(home_team, away_team):
            response = await self.search(query, options)
            results = (response or {}).get("results") or []
            if results:
                logger.info(
                    "Match articles for %s v %s found via %s", home_team, away_team, strategy
                )
                return SearchResult(
                    articles=results,
                    total=response.get("total", len(results)),
                    strategy_used=strategy,
                )

        logger.info("No match articles for %s v %s", home_team, away_team)
        return SearchResult()

    async def find_team_articles(self, team: str) -> SearchResult:
        """Latest articles mentioning the club name exactly as supplied."""
        options = {"page-size": PAGE_SIZE, "order-by": "newest"}
        response = await self.search(f'"{team}"', options)
        results = (response or {}).get("results") or []
        if not results:
            return SearchResult()
        return SearchResult(
            articles=results,
            total=response.get("total", len(results)),
            strategy_used="exact",
        )
