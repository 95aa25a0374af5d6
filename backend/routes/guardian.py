"""Guardian article routes for match previews/reports and club news."""

import logging

from fastapi import APIRouter, Depends, Query

from dependencies import get_article_engine
from errors import MissingParameterError
from services.articles import ArticleSearchEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/guardian")


@router.get("/match")
async def match_articles(
    home_team: str | None = Query(None, alias="homeTeam"),
    away_team: str | None = Query(None, alias="awayTeam"),
    kind: str = Query("report", alias="type"),
    engine: ArticleSearchEngine = Depends(get_article_engine),
) -> dict:
    """Articles for a fixture; ``type`` is preview or report."""
    if not home_team or not away_team:
        raise MissingParameterError("homeTeam", "awayTeam")

    result = await engine.find_match_articles(home_team, away_team, kind)
    return {
        "success": True,
        "articles": result.articles,
        "total": result.total,
        "searchStrategy": result.strategy_used,
    }


@router.get("/team")
async def team_articles(
    team: str | None = Query(None),
    engine: ArticleSearchEngine = Depends(get_article_engine),
) -> dict:
    if not team:
        raise MissingParameterError("team")

    result = await engine.find_team_articles(team)
    return {"success": True, "articles": result.articles, "total": result.total}
