"""football-data.org passthrough routes and the head-to-head summary.

Payloads are forwarded as-is; any upstream failure becomes a 500 with
{"error": "Failed to fetch <resource>", "details": ...}.
"""

import logging
from collections.abc import Awaitable
from typing import Any

from fastapi import APIRouter, Depends, Query

from dependencies import get_fetcher
from errors import (
    FootballDataError,
    InvalidParameterError,
    MissingParameterError,
    ResourceFetchError,
)
from services.fetcher import CachedFetcher
from services.head2head import summarize_head_to_head

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

DEFAULT_H2H_LIMIT = 10
MAX_H2H_LIMIT = 100


async def _passthrough(resource: str, pending: Awaitable[Any]) -> Any:
    try:
        return await pending
    except FootballDataError as e:
        raise ResourceFetchError(resource, e) from e


# ---------------------------------------------------------------------------
# Current season
# ---------------------------------------------------------------------------

@router.get("/standings")
async def standings(fetcher: CachedFetcher = Depends(get_fetcher)) -> Any:
    return await _passthrough("standings", fetcher.standings())


@router.get("/matches")
async def matches(fetcher: CachedFetcher = Depends(get_fetcher)) -> Any:
    return await _passthrough("matches", fetcher.matches())


@router.get("/scorers")
async def scorers(fetcher: CachedFetcher = Depends(get_fetcher)) -> Any:
    return await _passthrough("scorers", fetcher.scorers())


@router.get("/teams")
async def teams(fetcher: CachedFetcher = Depends(get_fetcher)) -> Any:
    return await _passthrough("teams", fetcher.teams())


@router.get("/competition")
async def competition(fetcher: CachedFetcher = Depends(get_fetcher)) -> Any:
    return await _passthrough("competition", fetcher.competition())


# ---------------------------------------------------------------------------
# Last season
# ---------------------------------------------------------------------------

@router.get("/standings/last")
async def last_season_standings(fetcher: CachedFetcher = Depends(get_fetcher)) -> Any:
    return await _passthrough("last season standings", fetcher.last_season_standings())


@router.get("/matches/last")
async def last_season_matches(fetcher: CachedFetcher = Depends(get_fetcher)) -> Any:
    return await _passthrough("last season matches", fetcher.last_season_matches())


# ---------------------------------------------------------------------------
# Head-to-head
# ---------------------------------------------------------------------------

def _parse_limit(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_H2H_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        raise InvalidParameterError("limit", f"an integer between 1 and {MAX_H2H_LIMIT}") from None
    if not 1 <= limit <= MAX_H2H_LIMIT:
        raise InvalidParameterError("limit", f"an integer between 1 and {MAX_H2H_LIMIT}")
    return limit


@router.get("/head2head")
@router.get("/head2head/")
async def head_to_head_missing_id() -> dict:
    raise MissingParameterError("matchId")


@router.get("/head2head/{match_id}")
async def head_to_head(
    match_id: str,
    limit: str | None = Query(None),
    fetcher: CachedFetcher = Depends(get_fetcher),
) -> dict:
    """Win/draw/loss record for the two sides of a fixture."""
    match_id = match_id.strip()
    if not match_id:
        raise MissingParameterError("matchId")
    meetings = _parse_limit(limit)

    payload = await _passthrough("head-to-head data", fetcher.head_to_head(match_id, meetings))
    stats = summarize_head_to_head(payload)
    if stats is None:
        return {"success": True, "stats": None, "message": "No previous meetings found"}

    return {"success": True, "stats": stats, "allMatches": payload.get("matches", [])}
